"""
Tests for PDF text extraction.

These tests verify:
1. Text is extracted from a well-formed PDF
2. Empty, malformed, image-only and encrypted inputs raise ExtractionError
"""

import pymupdf
import pytest

from app.services.exceptions import ExtractionError
from app.services.pdf_extractor import extract_text
from conftest import make_pdf


class TestExtractText:

    def test_extracts_page_text(self):
        text = extract_text(make_pdf("Jane Doe\nPython Engineer"))

        assert "Jane Doe" in text
        assert "Python Engineer" in text
        assert text == text.strip()

    def test_joins_multiple_pages(self):
        doc = pymupdf.open()
        for label in ("First page", "Second page"):
            doc.new_page().insert_text((72, 72), label)
        data = doc.tobytes()
        doc.close()

        text = extract_text(data)

        assert text.index("First page") < text.index("Second page")

    def test_empty_bytes(self):
        with pytest.raises(ExtractionError) as exc_info:
            extract_text(b"", filename="resume.pdf")
        assert "empty" in str(exc_info.value).lower()
        assert exc_info.value.filename == "resume.pdf"

    def test_not_a_pdf(self):
        with pytest.raises(ExtractionError) as exc_info:
            extract_text(b"this is definitely not a pdf", filename="resume.pdf")
        assert exc_info.value.filename == "resume.pdf"

    def test_blank_page_has_no_text(self):
        with pytest.raises(ExtractionError) as exc_info:
            extract_text(make_pdf(None))
        assert "no extractable text" in str(exc_info.value)

    def test_password_protected(self):
        doc = pymupdf.open()
        doc.new_page().insert_text((72, 72), "secret resume")
        data = doc.tobytes(
            encryption=pymupdf.PDF_ENCRYPT_AES_256,
            owner_pw="owner",
            user_pw="user",
        )
        doc.close()

        with pytest.raises(ExtractionError) as exc_info:
            extract_text(data)
        assert "password" in str(exc_info.value)

    def test_uses_current_pymupdf_module(self):
        """The deprecated `fitz` alias is not imported."""
        from app.services import pdf_extractor

        assert pdf_extractor.pymupdf.__name__ == "pymupdf"
        assert not hasattr(pdf_extractor, "fitz")
