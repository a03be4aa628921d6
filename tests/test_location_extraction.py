"""Tests for the location cascade and its guard."""
import time

from resume_extractor.cv_pipeline.cascade import run_cascade
from resume_extractor.cv_pipeline.fields.location import LOCATION_STRATEGIES
from resume_extractor.cv_pipeline.text_normalizer import normalize_text


def _location(text):
    result = run_cascade("location", LOCATION_STRATEGIES, normalize_text(text))
    return result.value, result.strategy


def test_labeled_location_with_segments():
    assert _location("Location: Pune, Maharashtra, India\nSkills: Python") == (
        "Pune, Maharashtra, India",
        "labeled",
    )


def test_based_in_phrase_at_line_start():
    assert _location("Jane Doe\nBased in Bengaluru\n") == ("Bengaluru", "phrase")


def test_bare_city_region_pair():
    assert _location("Jane Doe\nAustin, Texas\n") == ("Austin, Texas", "city_region")


def test_role_text_is_not_a_location():
    assert _location("Address: Software Engineer, Google") == ("", None)


def test_too_short_location_is_rejected():
    assert _location("City: Goa") == ("", None)


def test_long_run_of_capitalized_words_is_scanned_quickly():
    start = time.perf_counter()
    assert _location("Ab " * 20000) == ("", None)
    assert time.perf_counter() - start < 1.0
