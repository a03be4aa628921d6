"""Birthday notifications: DOB matching and the daily SMS report."""

from .birthday_matcher import BirthdayMatcher, birthday_candidates, is_birthday_today
from .birthday_service import (
    find_birthdays,
    format_birthday_report,
    people_from_records,
    send_birthday_report,
)

__all__ = [
    "BirthdayMatcher",
    "birthday_candidates",
    "is_birthday_today",
    "people_from_records",
    "find_birthdays",
    "format_birthday_report",
    "send_birthday_report",
]
