"""Utility exports."""

from .date_parser import date_components, local_today, month_name, ordinal
from .helpers import (
    digits_only,
    ensure_scheme,
    extract_emails,
    is_placeholder_email,
    title_case_words,
)
from .logger import get_logger

__all__ = [
    "get_logger",
    "extract_emails",
    "is_placeholder_email",
    "digits_only",
    "ensure_scheme",
    "title_case_words",
    "month_name",
    "ordinal",
    "local_today",
    "date_components",
]
