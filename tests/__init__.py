"""Test package for the LexAI gateway.

Structure:
    - unit/: Individual function and class tests
    - integration/: API and conversation workflows through ASGITransport

Documents (PDF, DOCX) are generated by fixtures; the upstream model is a
recording httpx MockTransport. Leverages pytest with pytest-check for soft
assertions.
"""
