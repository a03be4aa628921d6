"""Helper utilities shared by the field extractors."""

import re
from typing import List

EMAIL_PATTERN = re.compile(
    r"\b[a-zA-Z0-9](?:[a-zA-Z0-9._-]{0,62}[a-zA-Z0-9])?@[a-zA-Z0-9](?:[a-zA-Z0-9.-]{0,253}[a-zA-Z0-9])?\.[a-zA-Z]{2,}\b",
    re.IGNORECASE,
)

# Domains that only show up in templates and sample resumes
PLACEHOLDER_EMAIL_DOMAINS = ("example.com", "email.com", "test.com", "domain.com")


def extract_emails(text: str) -> List[str]:
    """Extract email addresses from text, lowercased, in order of appearance."""
    if not text or "@" not in text:
        return []
    found = (m.group(0).lower().strip() for m in EMAIL_PATTERN.finditer(text))
    return list(dict.fromkeys(found))


def is_placeholder_email(email: str) -> bool:
    """True if the address belongs to a template/placeholder domain."""
    domain = email.rsplit("@", 1)[-1].lower()
    return any(fp in domain for fp in PLACEHOLDER_EMAIL_DOMAINS)


def digits_only(value: str) -> str:
    """Strip everything except digits and '+' (kept only as the leading char)."""
    if not value:
        return ""
    cleaned = re.sub(r"[^\d+]", "", value)
    if not cleaned:
        return ""
    return cleaned[0] + cleaned[1:].replace("+", "")


def ensure_scheme(url: str) -> str:
    """Prefix https:// when the URL has no scheme."""
    url = (url or "").strip()
    if not url:
        return ""
    if re.match(r"^https?://", url, re.IGNORECASE):
        return url
    return "https://" + url


def title_case_words(text: str) -> str:
    """Uppercase the first letter of each space-separated word, lowercase the rest."""
    return " ".join(word.capitalize() for word in text.split(" "))
