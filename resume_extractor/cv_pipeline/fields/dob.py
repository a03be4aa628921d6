"""
Date-of-birth cascade.

The matched substring is stored as-is: '04/02/1995' may be 4 Feb or 2 Apr,
and the birthday check tries both orders later.
"""

import re
from typing import Optional, Sequence

from resume_extractor.cv_pipeline.cascade import Strategy, first_group

_LABEL = r"(?:date\s*of\s*birth|dob|d\.o\.b\.|birth\s*date|born|birth)"
_SEPARATOR = r"\s*[:\-=—–]?\s*"
_NUMERIC_DATE = r"(\d{1,2}[/\-.]\d{1,2}[/\-.](?:\d{4}|\d{2})(?!\d))"
_MONTH_NAME_DATE = r"([A-Za-z]+\s+\d{1,2},?\s+\d{4})"

_LABELED_NUMERIC = re.compile(_LABEL + _SEPARATOR + _NUMERIC_DATE, re.IGNORECASE)
_LABELED_MONTH_NAME = re.compile(_LABEL + _SEPARATOR + _MONTH_NAME_DATE, re.IGNORECASE)
# PDF extraction sometimes glues a stray glyph to the label ("zDOB", "—DOB")
_ARTIFACT_LABELED_NUMERIC = re.compile(
    r"[a-z]?(?:dob|birth|born)" + _SEPARATOR + _NUMERIC_DATE, re.IGNORECASE
)
# Unlabeled date whose year puts the holder at a plausible working age
_PLAUSIBLE_BIRTH_DATE = re.compile(
    r"\b(?:0?[1-9]|[12][0-9]|3[01])[/\-.](?:0?[1-9]|1[0-2])[/\-.](?:19[4-9]\d|200\d|201[0-5])\b"
)


def labeled_numeric(text: str, lines: Sequence[str]) -> Optional[str]:
    """Labeled DD/MM/YYYY-style date (any of / - . separators, 2- or 4-digit year)."""
    return first_group(_LABELED_NUMERIC.search(text))


def labeled_month_name(text: str, lines: Sequence[str]) -> Optional[str]:
    """Labeled date written with a month name, e.g. 'February 4, 1995'."""
    return first_group(_LABELED_MONTH_NAME.search(text))


def artifact_labeled_numeric(text: str, lines: Sequence[str]) -> Optional[str]:
    """Numeric date after a label with one stray leading letter."""
    return first_group(_ARTIFACT_LABELED_NUMERIC.search(text))


def plausible_birth_date(text: str, lines: Sequence[str]) -> Optional[str]:
    """First unlabeled numeric date with a year between 1940 and 2015."""
    return first_group(_PLAUSIBLE_BIRTH_DATE.search(text))


DOB_STRATEGIES = (
    Strategy("labeled_numeric", labeled_numeric),
    Strategy("labeled_month_name", labeled_month_name),
    Strategy("artifact_labeled_numeric", artifact_labeled_numeric),
    Strategy("plausible_birth_date", plausible_birth_date),
)
