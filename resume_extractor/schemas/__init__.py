"""Schema exports."""

from .birthday import BirthdayPerson
from .extracted_profile import ExtractedProfile, ProfileLinks
from .resume_record import ResumeRecord

__all__ = ["ExtractedProfile", "ProfileLinks", "ResumeRecord", "BirthdayPerson"]
