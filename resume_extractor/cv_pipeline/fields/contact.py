"""Email and phone cascades."""

import re
from typing import Optional, Sequence

from resume_extractor.cv_pipeline.cascade import Strategy, StrategyFunc
from resume_extractor.utils.helpers import (
    EMAIL_PATTERN,
    digits_only,
    extract_emails,
    is_placeholder_email,
)

# ---- Email ----

_LABELED_EMAIL = re.compile(
    r"\b(?:e-mail|email|mail)\s*[:=]\s*([a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,})",
    re.IGNORECASE,
)


def any_email(text: str, lines: Sequence[str]) -> Optional[str]:
    """First address in the text that is not on a placeholder domain."""
    for email in extract_emails(text):
        if not is_placeholder_email(email):
            return email
    return None


def labeled_email(text: str, lines: Sequence[str]) -> Optional[str]:
    """Address following an email label, skipping placeholder domains."""
    for match in _LABELED_EMAIL.finditer(text):
        inner = EMAIL_PATTERN.search(match.group(1))
        if not inner:
            continue
        email = inner.group(0).lower().strip()
        if not is_placeholder_email(email):
            return email
    return None


EMAIL_STRATEGIES = (
    Strategy("any_email", any_email),
    Strategy("labeled_email", labeled_email),
)

# ---- Phone ----

PHONE_MIN_LEN = 10
PHONE_MAX_LEN = 15

_LABELED_PHONE = re.compile(
    r"(?:telephone|whatsapp|contact|mobile|phone|cell|tel|mob|ph)\s*[:=]?[ \t]*([+\d \t\-().]+)",
    re.IGNORECASE,
)

# Standalone formats, most specific first. None of them may start or stop
# inside a longer digit run.
_STANDALONE_PHONES = (
    (
        "international",
        re.compile(r"(?<![\d+])\+?\d{1,4}[-.\s]?\(?\d{1,4}\)?[-.\s]?\d{1,4}[-.\s]?\d{1,4}[-.\s]?\d{1,9}(?!\d)"),
    ),
    ("us", re.compile(r"(?<!\d)\(?\d{3}\)?[-.\s]?\d{3}[-.\s]?\d{4}(?!\d)")),
    ("indian", re.compile(r"(?<![\d+])\+?91[-.\s]?\d{5}[-.\s]?\d{5}(?!\d)")),
    ("generic", re.compile(r"\b\d{10,15}\b")),
    ("space_grouped", re.compile(r"(?<!\d)\d{3,4}\s+\d{3,4}\s+\d{3,4}(?!\d)")),
)

_YEAR = re.compile(r"^(?:19|20)\d{2}$")


def _valid_length(number: str) -> bool:
    return PHONE_MIN_LEN <= len(number) <= PHONE_MAX_LEN


def _looks_like_email_or_domain(text: str, start: int, end: int) -> bool:
    before = text[max(0, start - 5):start]
    after = text[end:end + 5]
    if "@" in before or "@" in after:
        return True
    return "." in before and "." in after


def labeled_phone(text: str, lines: Sequence[str]) -> Optional[str]:
    """Digits after a phone/mobile/contact label, on the same line."""
    for match in _LABELED_PHONE.finditer(text):
        cleaned = digits_only(match.group(1))
        if _valid_length(cleaned):
            return cleaned
    return None


def _standalone(pattern: "re.Pattern[str]") -> StrategyFunc:
    """Strategy for an unlabeled phone format; skips years and digits next to an email or domain."""

    def find(text: str, lines: Sequence[str]) -> Optional[str]:
        for match in pattern.finditer(text):
            cleaned = digits_only(match.group(0))
            if _YEAR.match(cleaned):
                continue
            if _looks_like_email_or_domain(text, match.start(), match.end()):
                continue
            if _valid_length(cleaned):
                return cleaned
        return None

    return find


PHONE_STRATEGIES = (Strategy("labeled", labeled_phone),) + tuple(
    Strategy(name, _standalone(pattern)) for name, pattern in _STANDALONE_PHONES
)
