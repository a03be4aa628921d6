"""Record handed to the persistence layer after a resume is processed."""

from datetime import datetime, timezone

from pydantic import BaseModel, Field

from resume_extractor.schemas.extracted_profile import ExtractedProfile


class ResumeRecord(BaseModel):
    """Extracted profile plus ingestion metadata for one resume file."""

    profile: ExtractedProfile = Field(default_factory=ExtractedProfile)
    source: str = Field(default="upload", description="Source key (upload, email)")
    filename: str = Field(default="", description="Original attachment or upload filename")
    raw_text: str = Field(default="", description="Leading slice of the extracted text")
    used_ocr: bool = Field(default=False, description="True if the text came from the OCR fallback")
    extracted_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    def to_record(self) -> dict:
        """Flatten into the stored document shape: profile fields at top level."""
        doc = self.profile.to_record()
        doc.update(
            {
                "source": self.source,
                "filename": self.filename,
                "rawText": self.raw_text,
                "usedOcr": self.used_ocr,
                "extractedAt": self.extracted_at,
            }
        )
        return doc
