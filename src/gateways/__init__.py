"""Stateless request handlers between the API layer and the LLM provider.

Gateways:
    - DocumentAnalysisGateway: one uploaded file -> structured analysis
    - ChatGateway: conversation -> assistant reply

Each gateway receives its configuration and completion client explicitly,
so tests can substitute either.
"""

from src.gateways.analysis import DocumentAnalysisGateway, extract_document_text
from src.gateways.chat import ChatGateway, parse_messages

__all__ = [
    "ChatGateway",
    "DocumentAnalysisGateway",
    "extract_document_text",
    "parse_messages",
]
