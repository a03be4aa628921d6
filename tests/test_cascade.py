"""Tests for ordered strategy evaluation."""
from resume_extractor.cv_pipeline.cascade import Strategy, run_cascade
from resume_extractor.cv_pipeline.text_normalizer import normalize_text


def test_first_non_empty_strategy_wins_and_later_ones_do_not_run():
    calls = []

    def record(name, value):
        def func(text, lines):
            calls.append(name)
            return value
        return Strategy(name, func)

    result = run_cascade(
        "demo",
        (record("a", None), record("b", ""), record("c", "hit"), record("d", "late")),
        normalize_text("anything"),
    )
    assert result.value == "hit"
    assert result.strategy == "c"
    assert result.attempted == ["a", "b", "c"]
    assert calls == ["a", "b", "c"]


def test_no_match_leaves_value_empty():
    result = run_cascade("demo", (Strategy("a", lambda t, l: None),), normalize_text("text"))
    assert result.value == ""
    assert not result.matched


def test_failing_strategy_is_treated_as_no_match():
    def broken(text, lines):
        raise RuntimeError("boom")

    result = run_cascade(
        "demo",
        (Strategy("broken", broken), Strategy("ok", lambda t, l: "value")),
        normalize_text("text"),
    )
    assert result.value == "value"
    assert result.strategy == "ok"
