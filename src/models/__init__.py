"""Pydantic models for API requests and responses.

Provides type safety, validation, and automatic OpenAPI documentation.

Models:
    - ChatMessage: Individual role/content turn sent to the chat endpoint
    - ChatReply: Assistant reply with token usage
    - DocumentAnalysis: Structured analysis of one uploaded document
    - ErrorResponse: ``{"error": ...}`` body of failed requests
"""

from src.models.schemas import ChatMessage, ChatReply, DocumentAnalysis, ErrorResponse

__all__ = ["ChatMessage", "ChatReply", "DocumentAnalysis", "ErrorResponse"]
