"""Unit tests for individual components in isolation.

Coverage:
    - parsing/: Classification and text extraction
    - llm/: Configuration and the completion client
    - gateways/: Analysis and chat request handling
    - conversation/: Composition and the send flow

Uses fakes for the provider and the HTTP API. Leverages pytest-check for
multiple assertions per test.
"""
