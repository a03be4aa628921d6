"""Structured candidate profile produced by the extraction engine."""

from typing import List

from pydantic import BaseModel, ConfigDict, Field


class ProfileLinks(BaseModel):
    """Profile URLs found in the resume; empty string when absent."""

    linkedin: str = Field(default="", description="LinkedIn profile URL")
    github: str = Field(default="", description="GitHub profile URL")
    portfolio: str = Field(default="", description="Personal site or portfolio URL")


class ExtractedProfile(BaseModel):
    """
    Best-effort structured data for one resume text.
    Every field defaults to empty; a fully empty profile is a valid result.
    """

    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(default="", description="Best-guess candidate full name")
    email: str = Field(default="", description="Lowercased email address")
    contact_number: str = Field(
        default="", alias="contactNumber", description="Digits and leading '+', 10-15 chars"
    )
    date_of_birth: str = Field(
        default="",
        alias="dateOfBirth",
        description="Raw matched text; day/month order is resolved later by the birthday check",
    )
    experience: str = Field(default="", description="Years of experience as '<n> years'")
    role: str = Field(default="", description="Title-cased job title")
    location: str = Field(default="", description="Free-text location")
    skills: List[str] = Field(default_factory=list, description="Reserved; not extracted yet")
    education: str = Field(default="", description="Reserved; not extracted yet")
    summary: str = Field(default="", description="Summary or objective paragraph")
    links: ProfileLinks = Field(default_factory=ProfileLinks)

    def is_empty(self) -> bool:
        """True when no field was extracted (e.g. image-only PDF)."""
        return self == ExtractedProfile()

    def to_record(self) -> dict:
        """Serialize with the camelCase keys used by the record store."""
        return self.model_dump(by_alias=True)
