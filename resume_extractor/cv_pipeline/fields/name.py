"""Candidate name cascade: explicit label, then banner-style lines at the top, then any 'First Last'."""

import re
from typing import Optional, Sequence

from resume_extractor.cv_pipeline.cascade import Strategy, first_group

_NAME_TOKENS = r"[A-Za-z][A-Za-z .'\-]*"

_LABELED_LINE = re.compile(
    rf"^[ \t]*(?:full[ \t]*)?name[ \t]*:[ \t]*({_NAME_TOKENS})",
    re.IGNORECASE | re.MULTILINE,
)
_LABELED_ANYWHERE = re.compile(
    rf"\b(?:full\s*)?name\s*:[ \t]*({_NAME_TOKENS})",
    re.IGNORECASE,
)
_CAPS_SINGLE_WORD = re.compile(r"^[A-Z]{6,29}$")
_CAPS_SPLIT = re.compile(r"^([A-Z]{3,})([A-Z]{3,})$")
_CAPS_WORDS = re.compile(r"^[A-Z\s]+$")
_ALPHA_WORDS = re.compile(r"^[A-Za-z\s]+$")
_CAPITALIZED_WORD = re.compile(r"^[A-Z][A-Za-z]*$")
_FIRST_LAST = re.compile(r"^([A-Z][a-z]+[ \t]+[A-Z][a-z]+(?:[ \t]+[A-Z][a-z]+)?)", re.MULTILINE)


def labeled_name(text: str, lines: Sequence[str]) -> Optional[str]:
    """Value after a 'Name:' or 'Full Name:' label, preferring one at the start of a line."""
    for pattern in (_LABELED_LINE, _LABELED_ANYWHERE):
        value = first_group(pattern.search(text))
        if value:
            return value
    return None


def caps_first_line(text: str, lines: Sequence[str]) -> Optional[str]:
    """'JOHNDOE' -> 'JOHN DOE'; kept verbatim when it cannot be split."""
    if not lines or not _CAPS_SINGLE_WORD.match(lines[0]):
        return None
    split = _CAPS_SPLIT.match(lines[0])
    if split:
        return f"{split.group(1)} {split.group(2)}"
    return lines[0]


def caps_multi_word_line(text: str, lines: Sequence[str]) -> Optional[str]:
    """First all-caps line of 2-4 words among the first five lines."""
    for line in lines[:5]:
        if not (5 < len(line) < 50) or not _CAPS_WORDS.match(line):
            continue
        if 2 <= len(line.split()) <= 4:
            return line
    return None


def capitalized_line(text: str, lines: Sequence[str]) -> Optional[str]:
    """First line of 2-4 capitalized alphabetic words among the first ten lines."""
    for line in lines[:10]:
        words = line.split()
        if not 2 <= len(words) <= 4 or not _ALPHA_WORDS.match(line):
            continue
        if all(_CAPITALIZED_WORD.match(word) for word in words):
            return line
    return None


def first_last_anywhere(text: str, lines: Sequence[str]) -> Optional[str]:
    """Any line starting with 'First Last' (optionally a third name)."""
    return first_group(_FIRST_LAST.search(text))


NAME_STRATEGIES = (
    Strategy("labeled", labeled_name),
    Strategy("caps_first_line", caps_first_line),
    Strategy("caps_multi_word_line", caps_multi_word_line),
    Strategy("capitalized_line", capitalized_line),
    Strategy("first_last_anywhere", first_last_anywhere),
)
