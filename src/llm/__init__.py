"""LLM provider access.

Responsibilities:
    - Injected gateway configuration (credentials, models, sampling)
    - Fixed system prompts for chat and document analysis
    - Chat-completions HTTP client for OpenAI and Azure OpenAI

Holds no conversation state; callers pass the full message list.
"""

from src.llm.client import Completion, CompletionClient
from src.llm.config import GatewayConfig, get_gateway_config

__all__ = ["Completion", "CompletionClient", "GatewayConfig", "get_gateway_config"]
