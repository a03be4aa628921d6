"""
Extraction cascade: an ordered list of strategies for one field, first match wins.

Each strategy is a pure function (text, lines) -> Optional[str]. A strategy
that returns None or an empty string falls through to the next one.
"""

from dataclasses import dataclass, field
from typing import Callable, List, Optional, Sequence

from resume_extractor.cv_pipeline.text_normalizer import NormalizedText
from resume_extractor.utils.logger import get_logger

logger = get_logger(__name__)

StrategyFunc = Callable[[str, Sequence[str]], Optional[str]]


@dataclass(frozen=True)
class Strategy:
    """Named pattern-matcher for one field."""

    name: str
    func: StrategyFunc

    def __call__(self, text: str, lines: Sequence[str]) -> Optional[str]:
        return self.func(text, lines)


@dataclass
class CascadeResult:
    """Outcome of running one field's cascade."""

    value: str = ""
    strategy: Optional[str] = None
    attempted: List[str] = field(default_factory=list)

    @property
    def matched(self) -> bool:
        return self.strategy is not None


def run_cascade(field_name: str, strategies: Sequence[Strategy], doc: NormalizedText) -> CascadeResult:
    """Evaluate strategies in order and stop at the first non-empty result."""
    result = CascadeResult()
    for strategy in strategies:
        result.attempted.append(strategy.name)
        try:
            value = strategy(doc.original, doc.lines)
        except Exception:
            # Keep the never-raises contract; a broken strategy counts as no match.
            logger.exception("Strategy %s for %s failed", strategy.name, field_name)
            continue
        if value:
            result.value = value
            result.strategy = strategy.name
            logger.debug("%s found by %s: %r", field_name, strategy.name, value)
            return result
    logger.debug("%s not found (tried: %s)", field_name, ", ".join(result.attempted))
    return result


def first_group(match) -> Optional[str]:
    """Group 1 of a match (or the whole match), stripped; None if no match."""
    if not match:
        return None
    value = match.group(1) if match.re.groups else match.group(0)
    return value.strip() if value else None
