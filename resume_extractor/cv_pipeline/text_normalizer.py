"""Split raw resume text into trimmed lines while keeping the original for regex scans."""

import re
from dataclasses import dataclass
from typing import Optional, Tuple

_LINE_BREAK = re.compile(r"\r?\n")


@dataclass(frozen=True)
class NormalizedText:
    """Original text (multi-line regex scans) and its non-empty trimmed lines (positional heuristics)."""

    original: str
    lines: Tuple[str, ...]

    @property
    def is_empty(self) -> bool:
        return not self.original or not self.original.strip()


def normalize_text(text: Optional[str]) -> NormalizedText:
    """Never raises; None and blank input give an empty NormalizedText."""
    if not text:
        return NormalizedText(original="", lines=())
    lines = tuple(line.strip() for line in _LINE_BREAK.split(text) if line.strip())
    return NormalizedText(original=text, lines=lines)
