"""Unit tests for PDF parser module."""

from collections.abc import Callable

import pytest
import pytest_check as check

from src.parsing.classifier import MAX_FILE_SIZE
from src.parsing.pdf_parser import PDFParseError, parse_pdf


class TestParsePdfValid:
    """Tests for successful PDF parsing."""

    def test_extracts_text_and_page_count(self, make_pdf: Callable[[str], bytes]) -> None:
        """Valid PDF returns text content and correct page count."""
        result = parse_pdf(make_pdf("Rental Agreement between Landlord and Tenant"))

        check.is_in("Rental Agreement", result.text)
        check.equal(result.pages, 1)

    def test_scanned_pdf_returns_empty_text(self, make_pdf: Callable[[str], bytes]) -> None:
        """PDF without a text layer parses without error."""
        result = parse_pdf(make_pdf(""))

        check.equal(result.text.strip(), "")
        check.equal(result.pages, 1)


class TestParsePdfRejection:
    """Tests for PDF validation and rejection."""

    def test_rejects_empty_bytes(self) -> None:
        """Empty content raises PDFParseError."""
        with pytest.raises(PDFParseError, match="Empty file"):
            parse_pdf(b"")

    def test_rejects_non_pdf_file(self) -> None:
        """Content without the PDF header is rejected."""
        with pytest.raises(PDFParseError, match="Invalid PDF"):
            parse_pdf(b"This is not a PDF at all")

    def test_rejects_oversized_file(self) -> None:
        """Files over the size limit are rejected."""
        oversized = b"%PDF-1.4" + b"\x00" * (MAX_FILE_SIZE + 1)

        with pytest.raises(PDFParseError, match="exceeds maximum"):
            parse_pdf(oversized)

    def test_rejects_truncated_pdf(self) -> None:
        """A damaged PDF raises PDFParseError."""
        with pytest.raises(PDFParseError, match="Corrupt|Failed"):
            parse_pdf(b"%PDF-1.4\n1 0 obj\n<<")
