"""Summary/objective cascade: labeled paragraph up to the next section heading."""

import re
from typing import Optional, Sequence

from resume_extractor.cv_pipeline.cascade import Strategy

_LABEL = r"(?:summary|objective|professional\s*profile|about\s*me)"
_NEXT_SECTION = (
    r"(?:experience|skills|education|projects|work|employment|certifications|languages|hobbies|personal)"
)

_UNTIL_NEXT_SECTION = re.compile(
    _LABEL + r"\s*[:\-=]?\s*([\s\S]{30,1000}?)(?=\n\s*" + _NEXT_SECTION + r"|\s*\Z)",
    re.IGNORECASE,
)
_FEW_LINES = re.compile(_LABEL + r"\s*[:\-=]?\s*([^\n\r]+(?:\n[^\n\r]+){0,5})", re.IGNORECASE)
_LEADING_LABEL = re.compile(r"^\s*" + _LABEL + r"\s*[:\-=]?\s*", re.IGNORECASE)

MIN_SUMMARY_CHARS = 20


def _clean(value: str) -> Optional[str]:
    summary = _LEADING_LABEL.sub("", value).strip()
    return summary if len(summary) > MIN_SUMMARY_CHARS else None


def until_next_section(text: str, lines: Sequence[str]) -> Optional[str]:
    """Labeled paragraph up to the next section heading or the end of the text."""
    match = _UNTIL_NEXT_SECTION.search(text)
    return _clean(match.group(1)) if match else None


def few_lines(text: str, lines: Sequence[str]) -> Optional[str]:
    """Up to six lines following the label."""
    match = _FEW_LINES.search(text)
    return _clean(match.group(1)) if match else None


SUMMARY_STRATEGIES = (
    Strategy("until_next_section", until_next_section),
    Strategy("few_lines", few_lines),
)
