"""Configuration loaded from environment variables."""

import os
from pathlib import Path

from dotenv import load_dotenv

# Load .env: try package dir then project root
_base = Path(__file__).resolve().parent
for _env_path in (_base / ".env", _base.parent / ".env"):
    if load_dotenv(_env_path):
        break
load_dotenv()  # also allow process env


def _env_bool(name: str, default: bool = False) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


# Logging
LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()

# Text extraction limits
CV_TEXT_MAX_CHARS: int = int(os.getenv("CV_TEXT_MAX_CHARS", "50000"))
RAW_TEXT_MAX_CHARS: int = int(os.getenv("RAW_TEXT_MAX_CHARS", "5000"))  # Stored alongside the profile

# OCR fallback (scanned PDFs with no text layer)
OCR_MIN_TEXT_CHARS: int = int(os.getenv("OCR_MIN_TEXT_CHARS", "50"))
ENABLE_OCR: bool = _env_bool("ENABLE_OCR")
OCR_LANG: str = os.getenv("OCR_LANG", "eng")
OCR_RESOLUTION: int = int(os.getenv("OCR_RESOLUTION", "200"))

# Birthday notifications
BIRTHDAY_TIMEZONE: str = os.getenv("BIRTHDAY_TIMEZONE", "Asia/Kolkata")
SMS_RECIPIENT_NUMBER: str = os.getenv("SMS_RECIPIENT_NUMBER", "")
