"""Calendar helpers for date-of-birth handling (month names, today's components)."""

from datetime import date, datetime
from typing import Optional, Tuple
from zoneinfo import ZoneInfo

MONTH_NAMES = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)

# Type alias: (day of month, month 1-12, English month name)
TodayParts = Tuple[int, int, str]


def month_name(month: int) -> str:
    """English month name for a 1-based month number."""
    if not 1 <= month <= 12:
        raise ValueError(f"month out of range: {month}")
    return MONTH_NAMES[month - 1]


def date_components(day_value: date) -> TodayParts:
    """(day, month, month_name) for a calendar date."""
    return (day_value.day, day_value.month, month_name(day_value.month))


def local_today(tz: Optional[str] = None) -> date:
    """
    Today's date in the given IANA timezone.
    Server clocks are often UTC while candidates are not; pass the timezone the
    report is meant for.
    """
    return datetime.now(ZoneInfo(tz)).date() if tz else date.today()


def ordinal(day: int) -> str:
    """English ordinal for a day of month: 1st, 2nd, 3rd, 4th, 11th, 21st."""
    if 10 <= day % 100 <= 20:
        suffix = "th"
    else:
        suffix = {1: "st", 2: "nd", 3: "rd"}.get(day % 10, "th")
    return f"{day}{suffix}"
