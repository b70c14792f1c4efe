"""Document classification from declared MIME type and filename.

Browsers and operating systems omit or mis-set the MIME type for some
formats, so a declared type OR a matching extension is enough.
"""

import mimetypes
from enum import Enum
from pathlib import PurePath

MAX_FILE_SIZE = 10 * 1024 * 1024  # 10MB

DOCX_MIME_TYPE = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"
TEXT_MIME_TYPE = "text/plain"
PDF_MIME_TYPE = "application/pdf"

IMAGE_EXTENSIONS = frozenset({".png", ".jpg", ".jpeg", ".gif", ".webp", ".bmp", ".tif", ".tiff"})


class DocumentKind(str, Enum):
    """Logical type of an uploaded document."""

    TEXT = "text"
    DOCX = "docx"
    PDF = "pdf"
    IMAGE = "image"
    UNSUPPORTED = "unsupported"


def _normalize_mime(content_type: str | None) -> str:
    """Lower-case MIME type without parameters (``; charset=...``)."""
    if not content_type:
        return ""
    return content_type.split(";", 1)[0].strip().lower()


def _extension(filename: str | None) -> str:
    if not filename:
        return ""
    return PurePath(filename).suffix.lower()


def classify_document(filename: str | None, content_type: str | None) -> DocumentKind:
    """Classify a document by MIME type or extension.

    Checked in order: docx, text, pdf, image.

    Args:
        filename: Original filename (extension compared case-insensitively).
        content_type: Declared MIME type, possibly empty.

    Returns:
        The document kind, ``UNSUPPORTED`` when nothing matches.
    """
    mime = _normalize_mime(content_type)
    ext = _extension(filename)

    if mime == DOCX_MIME_TYPE or ext == ".docx":
        return DocumentKind.DOCX
    if mime == TEXT_MIME_TYPE or ext == ".txt":
        return DocumentKind.TEXT
    if mime == PDF_MIME_TYPE or ext == ".pdf":
        return DocumentKind.PDF
    if mime.startswith("image/") or ext in IMAGE_EXTENSIONS:
        return DocumentKind.IMAGE
    return DocumentKind.UNSUPPORTED


def image_mime_type(filename: str | None, content_type: str | None) -> str:
    """MIME type for an image data URL.

    Uses the declared type when it is an image type, otherwise guesses
    from the extension.
    """
    mime = _normalize_mime(content_type)
    if mime.startswith("image/"):
        return mime
    guessed, _ = mimetypes.guess_type(filename or "")
    return guessed or "image/png"
