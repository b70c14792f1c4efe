"""Conversation state owned by one client session.

Messages are immutable and only ever appended; the whole conversation can
be cleared. Nothing is persisted.
"""

import time
import uuid
from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from src.parsing import (
    DocumentKind,
    UnsupportedDocumentError,
    classify_document,
    decode_text,
    read_unknown_as_text,
)


def new_id() -> str:
    """Millisecond timestamp plus a random suffix.

    Not globally unique; only ordering matters within a conversation.
    """
    return f"{int(time.time() * 1000)}-{uuid.uuid4().hex[:8]}"


class DocumentReadError(Exception):
    """Raised when a selected file cannot be read as a document."""


class Message(BaseModel):
    """One conversation turn.

    Attributes:
        id: Timestamp-based identifier.
        role: ``user`` or ``assistant``.
        content: Exactly what was sent to (or received from) the chat endpoint.
        timestamp: When the turn was created.
        documents: Names of documents merged into a user turn.
        display_text: Short text for display (the typed question).
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=new_id)
    role: Literal["user", "assistant"]
    content: str
    timestamp: datetime = Field(default_factory=datetime.now)
    documents: list[str] | None = None
    display_text: str | None = None

    def to_payload(self) -> dict[str, str]:
        """Role/content pair in the chat endpoint's request shape."""
        return {"role": self.role, "content": self.content}


class UploadedDocument(BaseModel):
    """A file selected for the next user message.

    Plain-text and unrecognised files are decoded on selection; docx, pdf
    and image files keep their bytes for the analysis endpoint. A
    successful analysis is cached in ``analysis`` so a failed send can be
    retried without analyzing again.
    """

    id: str = Field(default_factory=new_id)
    name: str
    size: int = Field(ge=0)
    content_type: str = ""
    kind: DocumentKind
    data: bytes = Field(repr=False)
    text: str | None = Field(default=None, repr=False)
    analysis: str | None = Field(default=None, repr=False)

    @property
    def is_image(self) -> bool:
        return self.kind is DocumentKind.IMAGE

    @property
    def is_pdf(self) -> bool:
        return self.kind is DocumentKind.PDF

    @property
    def needs_analysis(self) -> bool:
        """Whether the analysis endpoint has to read this document."""
        return self.kind in (DocumentKind.DOCX, DocumentKind.PDF, DocumentKind.IMAGE)

    @classmethod
    def from_file(
        cls,
        name: str,
        data: bytes,
        content_type: str | None = None,
    ) -> "UploadedDocument":
        """Classify a selected file and read it if it is text.

        Raises:
            DocumentReadError: Unrecognised file that is not UTF-8 text.
        """
        kind = classify_document(name, content_type)
        text = None
        if kind is DocumentKind.TEXT:
            text = decode_text(data)
        elif kind is DocumentKind.UNSUPPORTED:
            try:
                text = read_unknown_as_text(data)
            except UnsupportedDocumentError as e:
                raise DocumentReadError(str(e)) from e

        return cls(
            name=name,
            size=len(data),
            content_type=content_type or "",
            kind=kind,
            data=data,
            text=text,
        )


class ConversationState:
    """Ordered, append-only list of messages."""

    def __init__(self) -> None:
        self._messages: list[Message] = []

    @property
    def messages(self) -> tuple[Message, ...]:
        return tuple(self._messages)

    def append(self, message: Message) -> None:
        self._messages.append(message)

    def clear(self) -> None:
        self._messages.clear()

    def payload(self) -> list[dict[str, str]]:
        """All turns in the chat endpoint's request shape, oldest first."""
        return [m.to_payload() for m in self._messages]

    def __len__(self) -> int:
        return len(self._messages)
