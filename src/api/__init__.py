"""FastAPI endpoints for the LexAI assistant.

Endpoints:
    - GET /health: Service health status
    - POST /api/analyze-document: Structured analysis of one uploaded document
    - POST /api/chat: Assistant reply to a full conversation

Failures are answered as ``{"error": message}`` with the matching status.
"""

from src.api.app import app, create_app

__all__ = ["app", "create_app"]
