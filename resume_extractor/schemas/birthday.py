"""Birthday check schema: one candidate as seen by the daily report."""

from typing import Optional

from pydantic import BaseModel, Field


class BirthdayPerson(BaseModel):
    """Candidate row normalized from either an email record or a direct upload."""

    name: str = Field(default="Unknown Name", description="Candidate name")
    phone: str = Field(default="No Phone", description="Contact number as stored")
    dob: Optional[str] = Field(default=None, description="Free-text date of birth")
    source: str = Field(default="Upload", description="Email or Upload")
