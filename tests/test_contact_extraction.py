"""Tests for the email and phone cascades."""
import time

import pytest

from resume_extractor.cv_pipeline.cascade import run_cascade
from resume_extractor.cv_pipeline.fields.contact import (
    EMAIL_STRATEGIES,
    PHONE_STRATEGIES,
    labeled_email,
)
from resume_extractor.cv_pipeline.text_normalizer import normalize_text


def _email(text):
    return run_cascade("email", EMAIL_STRATEGIES, normalize_text(text)).value


def _phone(text):
    return run_cascade("contact_number", PHONE_STRATEGIES, normalize_text(text)).value


# ---- Email ----

def test_placeholder_only_email_is_dropped():
    assert _email("Reach me at foo@example.com") == ""


def test_placeholder_is_skipped_for_real_address():
    assert _email("foo@example.com\nbar@realdomain.io") == "bar@realdomain.io"


def test_email_is_lowercased():
    assert _email("Mail me: JOHN.DOE@Company.COM") == "john.doe@company.com"


def test_labeled_email_fallback():
    assert labeled_email("Email: Jane@Acme.io", ()) == "jane@acme.io"
    assert labeled_email("E-mail = x@example.com", ()) is None


def test_no_email():
    assert _email("no address here @ all") == ""


# ---- Phone ----

def test_labeled_phone_with_country_code():
    assert _phone("Phone: +91 98765 43210\n2019 - 2021") == "+919876543210"


@pytest.mark.parametrize(
    "digits",
    ["9876543210", "123456789012345"],
)
def test_phone_length_gate_accepts_10_and_15(digits):
    assert _phone(f"Mobile: {digits}") == digits


@pytest.mark.parametrize(
    "digits",
    ["123456789", "1234567890123456"],
)
def test_phone_length_gate_rejects_9_and_16(digits):
    assert _phone(f"Mobile: {digits}") == ""


def test_contact_label_with_email_uses_standalone_number():
    assert _phone("contact: john@abc.com 9876543210") == "9876543210"


def test_digits_inside_email_domain_are_not_a_phone():
    assert _phone("contact: john@1234567890.com") == ""


def test_us_format_standalone():
    assert _phone("Call (415) 555-2671 anytime") == "4155552671"


# ---- Garbled input ----

@pytest.mark.parametrize("text", ["a." * 25000, "1-" * 25000, "a." * 25000 + "@"])
def test_email_scan_is_fast_on_garbled_text(text):
    start = time.perf_counter()
    assert _email(text) == ""
    assert time.perf_counter() - start < 1.0


def test_overlong_local_part_is_not_an_email():
    assert _email("x" * 80 + "@acme.io") == ""
