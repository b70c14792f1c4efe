"""Document Analysis Gateway.

Turns one uploaded file into a structured markdown analysis:

    text / docx / pdf  ->  local text extraction  ->  text model
    image              ->  base64 data URL        ->  vision model (OCR + analysis)

PDFs without a usable text layer are rejected with instructions to resend
them as images; no local OCR is attempted.
"""

import base64
import logging
from typing import Any

from src.errors import ConfigurationError, ExtractionError, PayloadTooLargeError
from src.llm.client import CompletionClient
from src.llm.config import GatewayConfig
from src.llm.prompts import (
    ANALYSIS_SYSTEM_PROMPT,
    IMAGE_ANALYSIS_INSTRUCTION,
    text_analysis_request,
)
from src.models.schemas import DocumentAnalysis
from src.parsing import (
    MAX_FILE_SIZE,
    DocumentKind,
    PDFParseError,
    UnsupportedDocumentError,
    classify_document,
    decode_text,
    extract_docx_text,
    image_mime_type,
    parse_pdf,
    read_unknown_as_text,
)

logger = logging.getLogger(__name__)

MIN_PDF_TEXT_LENGTH = 10

MISSING_KEY_MESSAGE = "OpenAI API key is missing"
UPSTREAM_FAILURE_MESSAGE = "Failed to analyze document"
SCANNED_PDF_MESSAGE = (
    "This appears to be a scanned PDF with no extractable text. Please upload the "
    "document as an image (PNG/JPG) for OCR processing, or upload a text-based PDF."
)
EMPTY_DOCUMENT_MESSAGE = (
    "Could not extract text from the document. The file may be empty or corrupted."
)


def extract_document_text(kind: DocumentKind, data: bytes) -> str:
    """Extract analyzable text from a non-image document.

    Args:
        kind: Classification of the document.
        data: Raw file bytes.

    Returns:
        Text with at least one non-whitespace character.

    Raises:
        ExtractionError: Scanned PDF, unreadable file, or empty text.
    """
    if kind is DocumentKind.DOCX:
        text = extract_docx_text(data)
    elif kind is DocumentKind.TEXT:
        text = decode_text(data)
    elif kind is DocumentKind.PDF:
        try:
            text = parse_pdf(data).text
        except PDFParseError as e:
            logger.warning(f"PDF parse error: {e}")
            text = ""
        if len(text.strip()) < MIN_PDF_TEXT_LENGTH:
            raise ExtractionError(SCANNED_PDF_MESSAGE)
    else:
        try:
            text = read_unknown_as_text(data)
        except UnsupportedDocumentError as e:
            raise ExtractionError(str(e)) from e

    if not text.strip():
        raise ExtractionError(EMPTY_DOCUMENT_MESSAGE)
    return text


class DocumentAnalysisGateway:
    """Stateless handler for ``POST /api/analyze-document``."""

    def __init__(self, config: GatewayConfig, client: CompletionClient) -> None:
        self._config = config
        self._client = client

    def build_messages(
        self,
        filename: str,
        content_type: str | None,
        data: bytes,
    ) -> tuple[list[dict[str, Any]], bool]:
        """Build the provider messages for one document.

        Returns:
            The message list and whether the vision model does the reading.

        Raises:
            ExtractionError: If no analyzable text can be obtained.
        """
        kind = classify_document(filename, content_type)
        system = {"role": "system", "content": ANALYSIS_SYSTEM_PROMPT}

        if kind is DocumentKind.IMAGE:
            encoded = base64.b64encode(data).decode("ascii")
            mime = image_mime_type(filename, content_type)
            user = {
                "role": "user",
                "content": [
                    {"type": "text", "text": IMAGE_ANALYSIS_INSTRUCTION},
                    {"type": "image_url", "image_url": {"url": f"data:{mime};base64,{encoded}"}},
                ],
            }
            return [system, user], True

        text = extract_document_text(kind, data)
        return [system, {"role": "user", "content": text_analysis_request(text)}], False

    async def analyze(
        self,
        filename: str,
        content_type: str | None,
        data: bytes,
    ) -> DocumentAnalysis:
        """Analyze one uploaded document.

        Args:
            filename: Original filename, echoed back in the result.
            content_type: Declared MIME type.
            data: Raw file bytes.

        Returns:
            The model's analysis with filename, usage and OCR flag.

        Raises:
            ConfigurationError: No API key configured.
            PayloadTooLargeError: File exceeds 10MB.
            ExtractionError: Document has no usable text.
            UpstreamError: Provider failed.
            InvalidUpstreamResponseError: Provider answer was malformed.
        """
        if not self._config.has_credentials:
            raise ConfigurationError(MISSING_KEY_MESSAGE)

        if len(data) > MAX_FILE_SIZE:
            size_mb = len(data) / (1024 * 1024)
            raise PayloadTooLargeError(
                f"File size ({size_mb:.1f}MB) exceeds maximum allowed (10MB)"
            )

        messages, ocr_used = self.build_messages(filename, content_type, data)

        completion = await self._client.complete(
            self._config.analysis_model,
            messages,
            UPSTREAM_FAILURE_MESSAGE,
            temperature=self._config.analysis_temperature,
            max_tokens=self._config.analysis_max_tokens,
        )
        logger.info(f"Analyzed document {filename} (ocr={ocr_used})")

        return DocumentAnalysis(
            analysis=completion.content,
            file_name=filename,
            usage=completion.usage,
            ocr_used=ocr_used,
        )
