"""Tests for the file -> text -> profile pipeline (text extraction stubbed)."""
import pytest

from resume_extractor.cv_pipeline import resume_pipeline
from resume_extractor.cv_pipeline.resume_pipeline import run_resume_pipeline


@pytest.fixture
def stub_text(monkeypatch):
    """Replace PDF/DOCX parsing with a canned text."""
    def install(text):
        monkeypatch.setattr(resume_pipeline, "extract_text_from_file", lambda data, name: text)
    return install


def test_unsupported_file_type_is_skipped():
    assert run_resume_pipeline(b"hello", "resume.txt") is None


def test_text_layer_pdf_skips_ocr(stub_text, sample_resume_text):
    stub_text(sample_resume_text)
    calls = []

    record = run_resume_pipeline(b"%PDF", "priya.pdf", source="email", ocr=lambda data: calls.append(data))

    assert calls == []
    assert record.used_ocr is False
    assert record.source == "email"
    assert record.filename == "priya.pdf"
    assert record.profile.email == "priya.sharma@gmail.com"
    assert record.raw_text == sample_resume_text


def test_scanned_pdf_falls_back_to_ocr(stub_text, sample_resume_text):
    stub_text(None)

    record = run_resume_pipeline(b"%PDF", "scan.pdf", ocr=lambda data: sample_resume_text)

    assert record.used_ocr is True
    assert record.profile.name == "PRIYA SHARMA"


def test_ocr_without_text_gives_empty_profile(stub_text):
    stub_text("")

    record = run_resume_pipeline(b"%PDF", "scan.pdf", ocr=lambda data: None)

    assert record.used_ocr is False
    assert record.profile.is_empty()
    assert record.raw_text == ""


def test_docx_never_uses_ocr(stub_text):
    stub_text("short")
    calls = []

    record = run_resume_pipeline(b"PK", "cv.docx", ocr=lambda data: calls.append(data))

    assert calls == []
    assert record.raw_text == "short"


def test_raw_text_is_truncated(stub_text, monkeypatch, sample_resume_text):
    monkeypatch.setattr(resume_pipeline, "RAW_TEXT_MAX_CHARS", 20)
    stub_text(sample_resume_text)

    record = run_resume_pipeline(b"%PDF", "priya.pdf", ocr=None)

    assert record.raw_text == sample_resume_text[:20]
    assert record.profile.contact_number == "+919876543210"


def test_record_shape(stub_text, sample_resume_text):
    stub_text(sample_resume_text)
    doc = run_resume_pipeline(b"%PDF", "priya.pdf", ocr=None).to_record()

    assert doc["contactNumber"] == "+919876543210"
    assert doc["dateOfBirth"] == "04/02/1995"
    assert doc["source"] == "upload"
    assert "rawText" in doc and "extractedAt" in doc
