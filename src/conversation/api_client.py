"""HTTP client for the LexAI API endpoints."""

import logging
import os
from typing import Any, TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from src.conversation.state import UploadedDocument
from src.models.schemas import ChatReply, DocumentAnalysis

logger = logging.getLogger(__name__)

API_BASE_URL = os.getenv("API_BASE_URL", "http://localhost:8000")

ANALYSIS_FALLBACK_ERROR = "Failed to analyze document"
CHAT_FALLBACK_ERROR = "Failed to get response"

ResponseT = TypeVar("ResponseT", bound=BaseModel)


class ApiError(Exception):
    """A request to the LexAI API failed.

    ``status_code`` is 0 when the server could not be reached.
    """

    def __init__(self, message: str, status_code: int = 0) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code


def _error_message(response: httpx.Response, fallback: str) -> str:
    try:
        body = response.json()
    except ValueError:
        return fallback
    if isinstance(body, dict) and isinstance(body.get("error"), str):
        return body["error"]
    return fallback


class LexAIClient:
    """Calls ``/api/analyze-document`` and ``/api/chat``."""

    def __init__(
        self,
        base_url: str | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
        timeout: float | None = None,
    ) -> None:
        self._base_url = (base_url or API_BASE_URL).rstrip("/")
        self._transport = transport
        self._timeout = timeout

    async def _post(
        self,
        path: str,
        model: type[ResponseT],
        fallback_error: str,
        **kwargs: Any,
    ) -> ResponseT:
        async with httpx.AsyncClient(
            base_url=self._base_url,
            transport=self._transport,
            timeout=self._timeout,
        ) as client:
            try:
                response = await client.post(path, **kwargs)
            except httpx.RequestError as e:
                raise ApiError(f"Connection failed: {e}") from e

        if response.is_error:
            raise ApiError(_error_message(response, fallback_error), response.status_code)
        try:
            return model.model_validate(response.json())
        except (ValueError, ValidationError) as e:
            logger.error(f"{path} answered {response.status_code} with an unexpected body: {e}")
            raise ApiError(fallback_error, response.status_code) from e

    async def analyze_document(self, document: UploadedDocument) -> DocumentAnalysis:
        """Upload one document for analysis.

        Raises:
            ApiError: With the server's ``error`` text on failure.
        """
        files = {
            "file": (
                document.name,
                document.data,
                document.content_type or "application/octet-stream",
            )
        }
        return await self._post(
            "/api/analyze-document",
            DocumentAnalysis,
            ANALYSIS_FALLBACK_ERROR,
            files=files,
        )

    async def chat(self, messages: list[dict[str, str]]) -> ChatReply:
        """Send the full conversation and return the assistant's reply.

        Raises:
            ApiError: With the server's ``error`` text on failure.
        """
        return await self._post("/api/chat", ChatReply, CHAT_FALLBACK_ERROR, json={"messages": messages})
