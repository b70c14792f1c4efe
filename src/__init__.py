"""LexAI - legal-advice chat assistant for Indian law.

Combines FastAPI for the HTTP gateways, httpx for the OpenAI-compatible
provider, pypdf and python-docx for text extraction, and Pydantic for
configuration and data validation.

Components:
    - api: HTTP endpoints for document analysis and chat
    - gateways: stateless analysis and chat request handlers
    - llm: provider configuration, prompts and completion client
    - parsing: document classification and text extraction
    - conversation: client-side conversation state and send flow
    - models: Request/response schemas
"""

__version__ = "0.1.0"
