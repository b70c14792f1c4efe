"""Client-side conversation handling.

Responsibilities:
    - Conversation state (append-only messages) and pending uploads
    - Composing documents and the typed question into one user message
    - Sequential document analysis that stops at the first failure
    - HTTP client for the analysis and chat endpoints

Any front end can drive a ConversationSession; no rendering happens here.
"""

from src.conversation.api_client import ApiError, LexAIClient
from src.conversation.composer import (
    TEXT_DOCUMENT_CHAR_LIMIT,
    AnalyzedDocument,
    DocumentFailure,
    analyze_documents,
    compose_user_message,
)
from src.conversation.session import ConversationSession, SendResult
from src.conversation.state import (
    ConversationState,
    DocumentReadError,
    Message,
    UploadedDocument,
)

__all__ = [
    "TEXT_DOCUMENT_CHAR_LIMIT",
    "AnalyzedDocument",
    "ApiError",
    "ConversationSession",
    "ConversationState",
    "DocumentFailure",
    "DocumentReadError",
    "LexAIClient",
    "Message",
    "SendResult",
    "UploadedDocument",
    "analyze_documents",
    "compose_user_message",
]
