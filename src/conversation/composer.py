"""Merge analyzed documents and the typed question into one user message."""

import logging
from collections.abc import Awaitable, Callable

from pydantic import BaseModel

from src.conversation.api_client import ApiError
from src.conversation.state import UploadedDocument

logger = logging.getLogger(__name__)

# Size cap for plain-text documents inlined into the prompt
TEXT_DOCUMENT_CHAR_LIMIT = 5000

DOCUMENTS_ONLY_DISPLAY_TEXT = "Analyze uploaded document(s)"

ANALYSIS_FAILURE_MESSAGE = "Failed to analyze document"

Analyzer = Callable[[UploadedDocument], Awaitable[str]]


class AnalyzedDocument(BaseModel):
    """A document ready to be merged into the message."""

    ok: bool = True
    name: str
    body: str


class DocumentFailure(BaseModel):
    """A document whose analysis failed; later documents were not tried."""

    ok: bool = False
    name: str
    error: str


DocumentOutcome = AnalyzedDocument | DocumentFailure


def document_block(name: str, body: str) -> str:
    return f"\n\n--- Document: {name} ---\n{body}"


def compose_user_message(query: str, documents: list[AnalyzedDocument]) -> str:
    """Build the user message sent to the chat endpoint.

    Args:
        query: The typed question, already stripped (may be empty).
        documents: Analyzed documents in upload order.

    Returns:
        The question alone, the question followed by the documents, or a
        default summarize request followed by the documents.
    """
    if not documents:
        return query

    blocks = "".join(document_block(d.name, d.body) for d in documents)
    if query:
        return f"{query}\n\nPlease analyze the following document(s) in context of my question:{blocks}"
    return (
        "Please analyze the following document(s) and provide a detailed summary "
        f"with key legal points:{blocks}"
    )


async def analyze_documents(
    documents: list[UploadedDocument],
    analyze: Analyzer,
) -> list[DocumentOutcome]:
    """Analyze documents one at a time, stopping at the first failure.

    Plain-text documents are inlined (truncated to
    ``TEXT_DOCUMENT_CHAR_LIMIT``); the rest go through ``analyze`` unless
    an earlier send already cached their analysis.

    Args:
        documents: Pending documents in upload order.
        analyze: Coroutine returning the analysis text for one document.

    Returns:
        One outcome per attempted document; a failure, if any, is last.
    """
    outcomes: list[DocumentOutcome] = []
    for doc in documents:
        if not doc.needs_analysis:
            body = (doc.text or "")[:TEXT_DOCUMENT_CHAR_LIMIT]
        elif doc.analysis is not None:
            body = doc.analysis
        else:
            try:
                body = await analyze(doc)
            except ApiError as e:
                logger.warning(f"Document analysis failed for {doc.name}: {e.message}")
                outcomes.append(DocumentFailure(name=doc.name, error=e.message))
                break
            except Exception:
                logger.exception(f"Document analysis crashed for {doc.name}")
                outcomes.append(DocumentFailure(name=doc.name, error=ANALYSIS_FAILURE_MESSAGE))
                break
            doc.analysis = body
        outcomes.append(AnalyzedDocument(name=doc.name, body=body))
    return outcomes
