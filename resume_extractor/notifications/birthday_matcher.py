"""
Decide whether a free-text date of birth falls on a given day.

DOB strings come straight from resume text ('04/02/1995', '4-2-90',
'4th February', 'Feb 4 1995', ...) and their day/month order is unknown, so
instead of parsing a date we generate every plausible spelling of today and
look for any of them inside the DOB. This is deliberately permissive: both
DD/MM and MM/DD readings match, so '02/04/1990' counts for 4 Feb and 2 Apr.

A separated numeric spelling only counts when it is not glued to another
digit on either side ('4/2' does not match inside '14/2/1995'). The
concatenated 'DDMM' and 'MMDD' forms match anywhere, so '19950204' counts for
4 Feb (and for 2 Apr).
"""

import re
from datetime import date
from functools import lru_cache
from typing import Optional, Tuple

from resume_extractor.utils.date_parser import date_components, month_name as month_name_for, ordinal

NUMERIC_SEPARATORS = ("/", "-", ".")


def _bounded(candidate: str) -> str:
    pattern = re.escape(candidate)
    if candidate[:1].isdigit():
        pattern = r"(?<!\d)" + pattern
    if candidate[-1:].isdigit():
        pattern += r"(?!\d)"
    return pattern


def birthday_candidates(day: int, month: int, month_name: str) -> Tuple[str, ...]:
    """Every literal spelling of day/month we look for, lowercased."""
    dd, mm = f"{day:02d}", f"{month:02d}"
    d, m = str(day), str(month)
    name = month_name.lower()

    candidates = []
    for first, second in ((dd, mm), (mm, dd), (d, m), (m, d)):
        for sep in NUMERIC_SEPARATORS:
            candidates.append(f"{first}{sep}{second}{sep}")
            candidates.append(f"{first}{sep}{second}")
    for day_str in (dd, d):
        candidates.append(f"{day_str} {name}")
        candidates.append(f"{name} {day_str}")
    return tuple(dict.fromkeys(candidates))


@lru_cache(maxsize=32)
def _compile(day: int, month: int, month_name: str) -> Tuple["re.Pattern[str]", "re.Pattern[str]"]:
    dd, mm = f"{day:02d}", f"{month:02d}"
    parts = [_bounded(c) for c in birthday_candidates(day, month, month_name)]
    parts += [re.escape(f"{dd}{mm}"), re.escape(f"{mm}{dd}")]
    spelled = re.compile("|".join(parts))
    ordinals = dict.fromkeys((ordinal(day), f"{day}th"))
    ordinal_re = re.compile(r"(?<!\d)(?:" + "|".join(re.escape(o) for o in ordinals) + r")")
    return spelled, ordinal_re


def is_birthday_today(date_of_birth: Optional[str], day: int, month: int, month_name: Optional[str] = None) -> bool:
    """True if the DOB text contains any spelling of day/month (or an ordinal day plus the month name)."""
    if not date_of_birth or not date_of_birth.strip():
        return False
    if not (1 <= day <= 31 and 1 <= month <= 12):
        return False
    name = (month_name or month_name_for(month)).lower()
    dob = date_of_birth.lower()

    spelled, ordinal_re = _compile(day, month, name)
    if spelled.search(dob):
        return True
    return bool(ordinal_re.search(dob)) and name in dob


class BirthdayMatcher:
    """is_birthday_today bound to one calendar day, for checking many records."""

    def __init__(self, day: int, month: int, month_name: Optional[str] = None) -> None:
        self.day = day
        self.month = month
        self.month_name = month_name or month_name_for(month)

    @classmethod
    def for_date(cls, value: date) -> "BirthdayMatcher":
        return cls(*date_components(value))

    def matches(self, date_of_birth: Optional[str]) -> bool:
        return is_birthday_today(date_of_birth, self.day, self.month, self.month_name)

    def __repr__(self) -> str:
        return f"BirthdayMatcher(day={self.day}, month={self.month}, month_name={self.month_name!r})"
