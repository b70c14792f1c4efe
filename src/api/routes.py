"""Document analysis endpoint.

Handles the multipart upload and hands the bytes to the analysis gateway.
"""

import logging

from fastapi import APIRouter, Depends, File, UploadFile

from src.api.dependencies import get_analysis_gateway
from src.errors import INTERNAL_ERROR_MESSAGE, NO_FILE_MESSAGE, ClientInputError, GatewayError
from src.gateways.analysis import DocumentAnalysisGateway
from src.models.schemas import DocumentAnalysis, ErrorResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["documents"])


@router.post(
    "/analyze-document",
    response_model=DocumentAnalysis,
    responses={400: {"model": ErrorResponse}, 413: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def analyze_document(
    file: UploadFile | None = File(None),
    gateway: DocumentAnalysisGateway = Depends(get_analysis_gateway),
) -> DocumentAnalysis:
    """Analyze one uploaded legal document.

    Accepts a text, .docx, PDF or image file in the ``file`` form field and
    returns the model's structured markdown analysis.

    Args:
        file: The uploaded document (multipart/form-data).
        gateway: Document analysis gateway.

    Returns:
        DocumentAnalysis with analysis text, filename, usage and OCR flag.

    Raises:
        400: No file, scanned PDF, unreadable or unsupported file.
        413: File exceeds 10MB limit.
        500: Missing API key, malformed provider answer or unexpected failure.
        Provider status: the upstream model call failed.
    """
    if file is None or not file.filename:
        raise ClientInputError(NO_FILE_MESSAGE)

    content = await file.read()
    logger.info(f"Received {file.filename} ({len(content)} bytes, {file.content_type})")

    try:
        return await gateway.analyze(file.filename, file.content_type, content)
    except GatewayError:
        raise
    except Exception as e:
        logger.exception(f"Unexpected failure analyzing {file.filename}")
        raise GatewayError(INTERNAL_ERROR_MESSAGE) from e
