"""Raw text extraction from Word (.docx) files using python-docx."""

import io
import logging

from docx import Document

logger = logging.getLogger(__name__)


def extract_docx_text(file_content: bytes) -> str:
    """Extract paragraph and table text from a .docx file.

    Any failure (corrupt archive, not OOXML) yields an empty string; the
    caller treats empty text as "nothing to analyze".

    Args:
        file_content: Raw bytes of the .docx file.

    Returns:
        Newline-joined text, or ``""``.
    """
    try:
        document = Document(io.BytesIO(file_content))
    except Exception as e:
        logger.warning(f"Failed to open DOCX: {e}")
        return ""

    lines = [p.text for p in document.paragraphs]
    for table in document.tables:
        for row in table.rows:
            cells = [cell.text.strip() for cell in row.cells if cell.text.strip()]
            if cells:
                lines.append("\t".join(cells))

    return "\n".join(lines).strip()
