"""Document classification and text extraction.

Responsibilities:
    - Classification by MIME type or extension (text, docx, pdf, image)
    - PDF text-layer extraction with pypdf
    - DOCX raw text extraction with python-docx
    - UTF-8 decoding for plain text and unrecognised files

No OCR happens here; images go to the vision model untouched.
"""

from src.parsing.classifier import (
    MAX_FILE_SIZE,
    DocumentKind,
    classify_document,
    image_mime_type,
)
from src.parsing.docx_parser import extract_docx_text
from src.parsing.pdf_parser import PDFContent, PDFParseError, parse_pdf
from src.parsing.text_parser import (
    UnsupportedDocumentError,
    decode_text,
    read_unknown_as_text,
)

__all__ = [
    "MAX_FILE_SIZE",
    "DocumentKind",
    "PDFContent",
    "PDFParseError",
    "UnsupportedDocumentError",
    "classify_document",
    "decode_text",
    "extract_docx_text",
    "image_mime_type",
    "parse_pdf",
    "read_unknown_as_text",
]
