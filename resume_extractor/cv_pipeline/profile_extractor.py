"""Heuristic extraction of a structured candidate profile from raw resume text."""

from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Tuple

from resume_extractor.cv_pipeline.cascade import Strategy, run_cascade
from resume_extractor.cv_pipeline.fields import (
    DOB_STRATEGIES,
    EMAIL_STRATEGIES,
    EXPERIENCE_STRATEGIES,
    GITHUB_STRATEGIES,
    LINKEDIN_STRATEGIES,
    LOCATION_STRATEGIES,
    NAME_STRATEGIES,
    PHONE_STRATEGIES,
    PORTFOLIO_STRATEGIES,
    ROLE_STRATEGIES,
    SUMMARY_STRATEGIES,
)
from resume_extractor.cv_pipeline.text_normalizer import normalize_text
from resume_extractor.schemas.extracted_profile import ExtractedProfile, ProfileLinks
from resume_extractor.utils.logger import get_logger

logger = get_logger(__name__)

# (profile field, cascade). Order only affects logging and trace order;
# fields never read each other's results.
PROFILE_CASCADES: Tuple[Tuple[str, Sequence[Strategy]], ...] = (
    ("name", NAME_STRATEGIES),
    ("email", EMAIL_STRATEGIES),
    ("contact_number", PHONE_STRATEGIES),
    ("date_of_birth", DOB_STRATEGIES),
    ("experience", EXPERIENCE_STRATEGIES),
    ("role", ROLE_STRATEGIES),
    ("location", LOCATION_STRATEGIES),
    ("summary", SUMMARY_STRATEGIES),
)

LINK_CASCADES: Tuple[Tuple[str, Sequence[Strategy]], ...] = (
    ("linkedin", LINKEDIN_STRATEGIES),
    ("github", GITHUB_STRATEGIES),
    ("portfolio", PORTFOLIO_STRATEGIES),
)


@dataclass
class TraceEntry:
    """How one field was (or was not) filled."""

    field: str
    strategy: Optional[str]
    value: str
    attempted: List[str]


@dataclass
class ExtractionTrace:
    """Structured record of one extraction run; pass one in to collect it."""

    text_length: int = 0
    line_count: int = 0
    entries: List[TraceEntry] = field(default_factory=list)

    def strategy_for(self, field_name: str) -> Optional[str]:
        for entry in self.entries:
            if entry.field == field_name:
                return entry.strategy
        return None

    def missing_fields(self) -> List[str]:
        return [e.field for e in self.entries if e.strategy is None]


def extract_resume_data(text: Optional[str], trace: Optional[ExtractionTrace] = None) -> ExtractedProfile:
    """
    Run every field cascade over the text and assemble a profile.
    Never raises for malformed input; returns an empty profile for empty text.
    """
    doc = normalize_text(text)
    if trace is not None:
        trace.text_length = len(doc.original)
        trace.line_count = len(doc.lines)
    if doc.is_empty:
        logger.warning("Resume text is empty; returning empty profile")
        return ExtractedProfile()

    logger.debug("Extracting profile: chars=%s lines=%s", len(doc.original), len(doc.lines))

    values = {}
    for field_name, strategies in PROFILE_CASCADES:
        result = run_cascade(field_name, strategies, doc)
        values[field_name] = result.value
        if trace is not None:
            trace.entries.append(TraceEntry(field_name, result.strategy, result.value, result.attempted))

    links = {}
    for link_name, strategies in LINK_CASCADES:
        result = run_cascade(f"links.{link_name}", strategies, doc)
        links[link_name] = result.value
        if trace is not None:
            trace.entries.append(
                TraceEntry(f"links.{link_name}", result.strategy, result.value, result.attempted)
            )

    profile = ExtractedProfile(links=ProfileLinks(**links), **values)
    found = [name for name, value in values.items() if value] + [f"links.{k}" for k, v in links.items() if v]
    logger.info("Profile extracted: fields=%s/%s (%s)", len(found), len(values) + len(links), ", ".join(found))
    return profile


def extract_resume_data_with_trace(text: Optional[str]) -> Tuple[ExtractedProfile, ExtractionTrace]:
    """Same as extract_resume_data, also returning the per-field trace."""
    trace = ExtractionTrace()
    profile = extract_resume_data(text, trace=trace)
    return profile, trace
