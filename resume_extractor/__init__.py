"""Heuristic resume field extraction and birthday matching."""

from resume_extractor.cv_pipeline import (
    ExtractionTrace,
    extract_resume_data,
    extract_resume_data_with_trace,
    run_resume_pipeline,
)
from resume_extractor.notifications import BirthdayMatcher, is_birthday_today
from resume_extractor.schemas import ExtractedProfile, ProfileLinks, ResumeRecord

__all__ = [
    "extract_resume_data",
    "extract_resume_data_with_trace",
    "ExtractionTrace",
    "run_resume_pipeline",
    "is_birthday_today",
    "BirthdayMatcher",
    "ExtractedProfile",
    "ProfileLinks",
    "ResumeRecord",
]
