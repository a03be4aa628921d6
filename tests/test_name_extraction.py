"""Tests for the candidate name cascade."""
import pytest

from resume_extractor.cv_pipeline.cascade import run_cascade
from resume_extractor.cv_pipeline.fields.name import NAME_STRATEGIES
from resume_extractor.cv_pipeline.text_normalizer import normalize_text


def _name(text):
    result = run_cascade("name", NAME_STRATEGIES, normalize_text(text))
    return result.value, result.strategy


def test_label_beats_all_caps_first_line():
    assert _name("ACMECORP\nName: John Smith\nPhone: 9876543210") == ("John Smith", "labeled")


def test_full_name_label():
    assert _name("Curriculum Vitae\nFull Name: Jane O'Neil\n")[0] == "Jane O'Neil"


@pytest.mark.parametrize(
    "first_line, expected",
    [
        ("JOHNDOE", "JOHN DOE"),
        ("DANISHALI", "DANISH ALI"),
    ],
)
def test_single_word_caps_first_line_is_split(first_line, expected):
    assert _name(f"{first_line}\nBackend Developer\n") == (expected, "caps_first_line")


def test_caps_multi_word_line_within_first_five_lines():
    assert _name("Curriculum vitae\nJOHN MICHAEL DOE\njohn@doe.dev") == ("JOHN MICHAEL DOE", "caps_multi_word_line")


def test_capitalized_line_within_first_ten_lines():
    assert _name("resume\nJane Doe\njane@doe.dev") == ("Jane Doe", "capitalized_line")


def test_first_last_anywhere_fallback():
    assert _name("contact details below\nJane Doe, Pune\n") == ("Jane Doe", "first_last_anywhere")


def test_no_name_found():
    assert _name("1234\n@@@ ---\n") == ("", None)
