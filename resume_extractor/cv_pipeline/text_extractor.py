"""Extract raw text from resume files (PDF, DOCX), with an optional OCR pass for scanned PDFs. In-memory only."""

import re
import unicodedata
from io import BytesIO
from typing import Optional

from resume_extractor.config import (
    CV_TEXT_MAX_CHARS,
    ENABLE_OCR,
    OCR_LANG,
    OCR_RESOLUTION,
)
from resume_extractor.utils.logger import get_logger

logger = get_logger(__name__)

SUPPORTED_EXTENSIONS = (".pdf", ".docx")


def _normalize_unicode(text: str) -> str:
    """NFC-normalize and turn non-breaking spaces into plain spaces."""
    if not text:
        return ""
    return unicodedata.normalize("NFC", text).replace("\u00a0", " ")


def _clean_cv_text(text: str, max_chars: int = CV_TEXT_MAX_CHARS) -> str:
    """Collapse runs of spaces and blank lines; line structure is kept for the name/role heuristics."""
    if not text or not text.strip():
        return ""
    t = _normalize_unicode(text)
    t = re.sub(r"[ \t]+", " ", t)
    t = re.sub(r"\n\s*\n\s*\n", "\n\n", t)
    t = t.strip()
    if len(t) > max_chars:
        t = t[:max_chars]
    return t


def _extract_pdf(bytes_io: BytesIO) -> Optional[str]:
    """Text layer of every page, pages separated by a blank line. None for image-only PDFs."""
    try:
        import pdfplumber
    except ImportError:
        logger.warning("Cannot read PDF resumes: pdfplumber is missing (pip install pdfplumber)")
        return None
    try:
        with pdfplumber.open(bytes_io) as pdf:
            pages = [page.extract_text() or "" for page in pdf.pages]
    except Exception as e:
        logger.exception("Could not read PDF resume: %s", e)
        return None
    text = "\n\n".join(p for p in pages if p.strip())
    return text or None


def _extract_docx(bytes_io: BytesIO) -> Optional[str]:
    """One line per non-blank paragraph, so header lines stay separate."""
    try:
        from docx import Document
    except ImportError:
        logger.warning("Cannot read DOCX resumes: python-docx is missing (pip install python-docx)")
        return None
    try:
        paragraphs = Document(bytes_io).paragraphs
    except Exception as e:
        logger.exception("Could not read DOCX resume: %s", e)
        return None
    text = "\n".join(p.text for p in paragraphs if p.text.strip())
    return text or None


def is_supported_file(filename: str) -> bool:
    """True for .pdf and .docx names (case-insensitive)."""
    return (filename or "").lower().strip().endswith(SUPPORTED_EXTENSIONS)


_READERS = {".pdf": _extract_pdf, ".docx": _extract_docx}


def extract_text_from_file(file_bytes: bytes, filename: str) -> Optional[str]:
    """
    Text of a PDF or DOCX resume, read from memory and cleaned for the field
    extractors. None for other file types, unreadable files, or files with no
    text layer (scanned PDFs go through ocr_pdf_text instead).
    """
    if not is_supported_file(filename):
        logger.warning("Not a PDF/DOCX resume, skipping: %s", filename)
        return None

    extension = "." + filename.lower().strip().rsplit(".", 1)[-1]
    raw = _READERS[extension](BytesIO(file_bytes))
    if not raw:
        logger.info("No text layer found in %s", filename)
        return None
    return _clean_cv_text(raw)


def ocr_pdf_text(file_bytes: bytes) -> Optional[str]:
    """
    OCR fallback for image-only PDFs: rasterize each page with pdfplumber and
    read it with pytesseract. Requires ENABLE_OCR and a tesseract binary.
    Returns None when OCR is disabled, unavailable or finds nothing.
    """
    if not ENABLE_OCR:
        return None
    try:
        import pdfplumber
        import pytesseract
    except ImportError:
        logger.warning("OCR requested but pytesseract/pdfplumber not installed; install with: pip install pytesseract")
        return None
    try:
        parts = []
        with pdfplumber.open(BytesIO(file_bytes)) as pdf:
            for page in pdf.pages:
                image = page.to_image(resolution=OCR_RESOLUTION).original
                ptext = pytesseract.image_to_string(image, lang=OCR_LANG)
                if ptext and ptext.strip():
                    parts.append(ptext)
        text = _clean_cv_text("\n\n".join(parts))
        return text or None
    except Exception as e:
        logger.exception("OCR failed: %s", e)
        return None
