"""Tests for the experience and role cascades."""
from resume_extractor.cv_pipeline.cascade import run_cascade
from resume_extractor.cv_pipeline.fields.career import EXPERIENCE_STRATEGIES, ROLE_STRATEGIES
from resume_extractor.cv_pipeline.text_normalizer import normalize_text


def _experience(text):
    return run_cascade("experience", EXPERIENCE_STRATEGIES, normalize_text(text)).value


def _role(text):
    result = run_cascade("role", ROLE_STRATEGIES, normalize_text(text))
    return result.value, result.strategy


def test_labeled_decimal_experience():
    assert _experience("Total Experience: 6.5 years") == "6.5 years"


def test_years_of_experience_phrase():
    assert _experience("I have 4 yrs of experience in Java") == "4 years"


def test_experience_without_number():
    assert _experience("Experience:\nAcme Corp, Pune") == ""


def test_labeled_role_is_title_cased():
    assert _role("Designation: senior software ENGINEER\n") == ("Senior Software Engineer", "labeled")
    assert _role("Job Title: data analyst") == ("Data Analyst", "labeled")


def test_common_role_in_header_zone():
    text = "Jane Doe\nPassionate about building web apps as a full stack developer.\n"
    assert _role(text) == ("Full Stack Developer", "common_role")


def test_common_role_outside_header_zone_is_ignored_by_that_tier():
    text = "\n".join(["Jane Doe"] + ["filler text line"] * 200) + "\nData Scientist at Acme"
    assert _role(text)[1] != "common_role"


def test_keyword_line_scan():
    assert _role("Jane Doe\nLead Mechanical Engineer at Tata\n") == ("Lead Mechanical Engineer", "keyword_line")


def test_role_phrase_deep_in_text():
    text = "x" * 2100 + "\nworked as backend intern"
    assert _role(text) == ("Backend", "role_phrase")


def test_no_role():
    assert _role("Jane Doe\nPune") == ("", None)


def test_keyword_line_role_is_title_cased():
    assert _role("Jane Doe\nsenior platform engineer at acme\n") == ("Senior Platform Engineer", "keyword_line")
