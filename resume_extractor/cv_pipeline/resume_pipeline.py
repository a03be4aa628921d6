"""Resume pipeline: file bytes -> text (OCR fallback for scanned PDFs) -> heuristic profile -> record."""

from typing import Callable, Optional, Tuple

from resume_extractor.config import OCR_MIN_TEXT_CHARS, RAW_TEXT_MAX_CHARS
from resume_extractor.cv_pipeline.profile_extractor import ExtractionTrace, extract_resume_data
from resume_extractor.cv_pipeline.text_extractor import (
    extract_text_from_file,
    is_supported_file,
    ocr_pdf_text,
)
from resume_extractor.schemas.resume_record import ResumeRecord
from resume_extractor.utils.logger import get_logger

logger = get_logger(__name__)

OcrFunc = Callable[[bytes], Optional[str]]


def _resolve_text(file_bytes: bytes, filename: str, ocr: Optional[OcrFunc]) -> Tuple[str, bool]:
    """Primary text extraction, escalating to OCR when the PDF yields too little text."""
    text = extract_text_from_file(file_bytes, filename) or ""
    if len(text.strip()) >= OCR_MIN_TEXT_CHARS:
        return text, False
    if ocr is None or not filename.lower().endswith(".pdf"):
        return text, False

    logger.info("Only %s chars extracted from %s; attempting OCR", len(text.strip()), filename)
    ocr_text = ocr(file_bytes) or ""
    if len(ocr_text.strip()) > len(text.strip()):
        logger.info("OCR extracted %s chars from %s", len(ocr_text), filename)
        return ocr_text, True
    logger.warning("OCR produced no usable text for %s", filename)
    return text, False


def run_resume_pipeline(
    file_bytes: bytes,
    filename: str,
    source: str = "upload",
    ocr: Optional[OcrFunc] = ocr_pdf_text,
    trace: Optional[ExtractionTrace] = None,
) -> Optional[ResumeRecord]:
    """
    Run the full resume pipeline for one uploaded or attached file.
    Returns None for unsupported file types. A file with no extractable text
    still produces a record with an empty profile.
    """
    if not is_supported_file(filename):
        logger.warning("Skipping unsupported resume file: %s", filename)
        return None

    text, used_ocr = _resolve_text(file_bytes, filename, ocr)
    profile = extract_resume_data(text, trace=trace)
    if profile.is_empty():
        logger.warning("No profile fields extracted from %s (chars=%s)", filename, len(text))

    return ResumeRecord(
        profile=profile,
        source=source,
        filename=filename,
        raw_text=text[:RAW_TEXT_MAX_CHARS],
        used_ocr=used_ocr,
    )
