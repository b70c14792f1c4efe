"""Client-side send flow for one conversation.

A send analyzes pending documents one by one, merges them with the typed
question, posts the whole conversation, and only then appends the user and
assistant turns. On any failure nothing is appended and the pending
documents come back, keeping analyses that already succeeded.
"""

import logging

from pydantic import BaseModel

from src.conversation.api_client import ApiError, LexAIClient
from src.conversation.composer import (
    DOCUMENTS_ONLY_DISPLAY_TEXT,
    AnalyzedDocument,
    DocumentFailure,
    analyze_documents,
    compose_user_message,
)
from src.conversation.state import ConversationState, Message, UploadedDocument

logger = logging.getLogger(__name__)

CHAT_FAILURE_MESSAGE = "Failed to get response. Please try again."


class SendResult(BaseModel):
    """Outcome of one send.

    Attributes:
        ok: Whether both turns were appended.
        user_message: The appended user turn.
        reply: The appended assistant turn.
        error: User-facing error text when ``ok`` is False.
    """

    ok: bool
    user_message: Message | None = None
    reply: Message | None = None
    error: str | None = None


class ConversationSession:
    """Conversation state plus pending uploads for one user."""

    def __init__(self, api: LexAIClient | None = None) -> None:
        self._api = api or LexAIClient()
        self.state = ConversationState()
        self.pending: list[UploadedDocument] = []
        self.is_sending: bool = False

    def add_file(
        self,
        name: str,
        data: bytes,
        content_type: str | None = None,
    ) -> UploadedDocument:
        """Queue a file for the next send.

        Raises:
            DocumentReadError: Unrecognised file that is not UTF-8 text.
        """
        document = UploadedDocument.from_file(name, data, content_type)
        self.pending.append(document)
        logger.debug(f"Queued {document.name} as {document.kind.value}")
        return document

    def remove_document(self, document_id: str) -> bool:
        before = len(self.pending)
        self.pending = [d for d in self.pending if d.id != document_id]
        return len(self.pending) != before

    def new_conversation(self) -> None:
        self.state.clear()
        self.pending.clear()

    async def _analyze(self, document: UploadedDocument) -> str:
        result = await self._api.analyze_document(document)
        return result.analysis

    def _restore(self, documents: list[UploadedDocument]) -> None:
        self.pending = documents + self.pending

    async def send(self, text: str) -> SendResult | None:
        """Send the typed question with all pending documents.

        Args:
            text: The typed question (may be empty when documents are pending).

        Returns:
            None when there is nothing to send or a send is in flight,
            otherwise the tagged outcome.
        """
        query = text.strip()
        if self.is_sending or (not query and not self.pending):
            return None

        self.is_sending = True
        documents, self.pending = self.pending, []
        committed = False
        try:
            outcomes = await analyze_documents(documents, self._analyze)
            failures = [o for o in outcomes if isinstance(o, DocumentFailure)]
            if failures:
                return SendResult(ok=False, error=failures[0].error)

            analyzed = [o for o in outcomes if isinstance(o, AnalyzedDocument)]
            user_message = Message(
                role="user",
                content=compose_user_message(query, analyzed),
                documents=[d.name for d in documents] or None,
                display_text=query or DOCUMENTS_ONLY_DISPLAY_TEXT,
            )

            try:
                reply = await self._api.chat(self.state.payload() + [user_message.to_payload()])
            except ApiError as e:
                logger.warning(f"Chat request failed ({e.status_code}): {e.message}")
                return SendResult(ok=False, error=CHAT_FAILURE_MESSAGE)

            assistant_message = Message(role="assistant", content=reply.message)
            self.state.append(user_message)
            self.state.append(assistant_message)
            committed = True
            return SendResult(ok=True, user_message=user_message, reply=assistant_message)
        finally:
            if not committed:
                self._restore(documents)
            self.is_sending = False
