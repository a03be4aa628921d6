"""Resume pipeline: text extraction (PDF/DOCX/OCR), normalization, heuristic field extraction."""

from resume_extractor.cv_pipeline.profile_extractor import (
    ExtractionTrace,
    TraceEntry,
    extract_resume_data,
    extract_resume_data_with_trace,
)
from resume_extractor.cv_pipeline.resume_pipeline import run_resume_pipeline
from resume_extractor.cv_pipeline.text_extractor import extract_text_from_file, ocr_pdf_text
from resume_extractor.cv_pipeline.text_normalizer import NormalizedText, normalize_text

__all__ = [
    "extract_resume_data",
    "extract_resume_data_with_trace",
    "ExtractionTrace",
    "TraceEntry",
    "run_resume_pipeline",
    "extract_text_from_file",
    "ocr_pdf_text",
    "NormalizedText",
    "normalize_text",
]
