from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ChatMessage(BaseModel):
    """A single conversation turn as accepted by the chat endpoint.

    Attributes:
        role: The speaker, ``user`` or ``assistant``.
        content: The message text.
    """

    role: Literal["user", "assistant"]
    content: str

    @field_validator("role", mode="before")
    @classmethod
    def normalize_role(cls, v: Any) -> Any:
        """Accept role names in any case."""
        if isinstance(v, str):
            return v.strip().lower()
        return v


class ChatReply(BaseModel):
    """Response from the chat endpoint.

    Attributes:
        message: The assistant's markdown reply.
        usage: Token usage reported by the provider.
    """

    message: str
    usage: dict[str, Any] | None = None


class DocumentAnalysis(BaseModel):
    """Response from the document analysis endpoint.

    Serialized with camelCase keys (``fileName``, ``ocrUsed``).

    Attributes:
        analysis: Markdown analysis in the fixed section structure.
        file_name: Original filename of the upload.
        usage: Token usage reported by the provider.
        ocr_used: Whether the vision model read the document.
    """

    model_config = ConfigDict(populate_by_name=True)

    analysis: str
    file_name: str = Field(alias="fileName")
    usage: dict[str, Any] | None = None
    ocr_used: bool = Field(default=False, alias="ocrUsed")


class ErrorResponse(BaseModel):
    """Body of every failed request."""

    error: str
