"""Error taxonomy shared by the gateways and the API layer.

Every error carries the HTTP status and the user-facing message the API
layer renders as ``{"error": message}``.
"""

from fastapi import status

NO_FILE_MESSAGE = "No file provided"
INVALID_REQUEST_MESSAGE = "Invalid request"
INTERNAL_ERROR_MESSAGE = "Internal server error"


class GatewayError(Exception):
    """Base class for failures that end a gateway request."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class ClientInputError(GatewayError):
    """Missing or malformed request input."""

    status_code = status.HTTP_400_BAD_REQUEST


class ExtractionError(GatewayError):
    """Document text could not be extracted; message says how to resubmit."""

    status_code = status.HTTP_400_BAD_REQUEST


class PayloadTooLargeError(GatewayError):
    """Upload exceeds the size limit."""

    status_code = status.HTTP_413_CONTENT_TOO_LARGE


class ConfigurationError(GatewayError):
    """Credentials or other settings are missing."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR


class UpstreamError(GatewayError):
    """The LLM provider answered with a non-success status.

    The raw body is kept for server-side logging only.
    """

    def __init__(self, message: str, status_code: int, body: str = "") -> None:
        super().__init__(message, status_code)
        self.body = body


class InvalidUpstreamResponseError(GatewayError):
    """The LLM provider answered 2xx with an unusable payload."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str = "Invalid response format from AI") -> None:
        super().__init__(message)
