"""Location cascade with a guard against role text read as a place."""

import re
from typing import Callable, Optional, Sequence

from resume_extractor.cv_pipeline.cascade import Strategy, first_group

_SEGMENT = r"[A-Z][A-Za-z \t]*"

_LABELED = re.compile(
    r"(?i:\b(?:location|address|city|residence|residing\s*at|place|native))[ \t]*[:\-=]?[ \t]*"
    rf"({_SEGMENT}(?:,[ \t]*{_SEGMENT}){{0,3}})"
)
_PHRASE = re.compile(
    r"^[ \t]*(?:lives[ \t]+in|based[ \t]+in|from|at)[ \t]+([A-Za-z][A-Za-z ,]*)",
    re.IGNORECASE | re.MULTILINE,
)
_CITY_REGION = re.compile(r"\b([A-Z][a-z]+(?:[ \t]+[A-Z][a-z]+){0,3},[ \t]*[A-Z][a-z]+(?:[ \t]+[A-Z][a-z]+){0,3})\b")

_ROLE_WORDS = ("engineer", "developer")


def _accept(value: Optional[str]) -> Optional[str]:
    """Trimmed value if it is a plausible place name, else None."""
    if not value:
        return None
    value = value.strip(" \t,")
    if not 3 < len(value) < 100:
        return None
    lowered = value.lower()
    if any(word in lowered for word in _ROLE_WORDS):
        return None
    return value


def _search(pattern: "re.Pattern[str]") -> Callable[[str, Sequence[str]], Optional[str]]:
    """Strategy taking the first match of pattern, filtered through _accept."""
    def find(text: str, lines: Sequence[str]) -> Optional[str]:
        return _accept(first_group(pattern.search(text)))

    return find


LOCATION_STRATEGIES = (
    Strategy("labeled", _search(_LABELED)),
    Strategy("phrase", _search(_PHRASE)),
    Strategy("city_region", _search(_CITY_REGION)),
)
