"""Integration tests for components working together as a system.

Coverage:
    - API endpoints through the real FastAPI app
    - Conversation session driving the API over HTTP

Only the upstream model provider is faked; no API key is needed.
"""
