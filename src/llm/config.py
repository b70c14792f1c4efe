"""Gateway configuration with environment variable loading.

Pydantic-based configuration shared by the document analysis and chat
gateways. Supports OpenAI and Azure OpenAI deployments.
"""

import os
from typing import Literal

from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator

# Load environment variables from .env file
load_dotenv()

DEFAULT_OPENAI_BASE_URL = "https://api.openai.com/v1"
DEFAULT_AZURE_API_VERSION = "2024-06-01"


def _timeout_from_env() -> float | None:
    raw = os.getenv("LLM_TIMEOUT", "").strip()
    return float(raw) if raw else None


class GatewayConfig(BaseModel):
    """Configuration for the LLM gateways.

    The API key may be empty at load time; gateways check
    ``has_credentials`` per request and answer with a configuration error.

    Attributes:
        api_key: API key for model access.
        provider: ``openai`` or ``azure``.
        base_url: API base URL (Azure: the resource endpoint).
        azure_api_version: ``api-version`` query value for Azure.
        chat_model: Model (or Azure deployment) for conversation replies.
        analysis_model: Vision-capable model for document analysis.
        chat_temperature: Sampling temperature for chat replies.
        chat_max_tokens: Maximum tokens in a chat reply.
        chat_top_p: Nucleus sampling for chat replies.
        analysis_temperature: Sampling temperature for document analysis.
        analysis_max_tokens: Maximum tokens in a document analysis.
        request_timeout: Upstream timeout in seconds (None waits forever).
    """

    api_key: str = Field(
        default_factory=lambda: os.getenv("OPENAI_API_KEY", os.getenv("LLM_API_KEY", "")),
        description="API key for LLM provider",
    )
    provider: Literal["openai", "azure"] = Field(
        default_factory=lambda: os.getenv("LLM_PROVIDER", "openai").lower(),
        description="Upstream API flavour",
    )
    base_url: str = Field(
        default_factory=lambda: os.getenv("LLM_BASE_URL") or DEFAULT_OPENAI_BASE_URL,
        description="API base URL",
    )
    azure_api_version: str = Field(
        default_factory=lambda: os.getenv("AZURE_OPENAI_API_VERSION", DEFAULT_AZURE_API_VERSION),
        description="Azure OpenAI api-version",
    )
    chat_model: str = Field(
        default_factory=lambda: os.getenv("LLM_CHAT_MODEL", "gpt-4o-mini"),
        description="Model used for chat replies",
    )
    analysis_model: str = Field(
        default_factory=lambda: os.getenv("LLM_ANALYSIS_MODEL", "gpt-4o"),
        description="Vision-capable model used for document analysis",
    )
    chat_temperature: float = Field(default=0.7, ge=0.0, le=2.0)
    chat_max_tokens: int = Field(default=4096, ge=1, le=128000)
    chat_top_p: float = Field(default=0.95, gt=0.0, le=1.0)
    analysis_temperature: float = Field(default=0.4, ge=0.0, le=2.0)
    analysis_max_tokens: int = Field(default=16384, ge=1, le=128000)
    request_timeout: float | None = Field(
        default_factory=_timeout_from_env,
        gt=0,
        description="Upstream request timeout in seconds",
    )

    @field_validator("api_key")
    @classmethod
    def strip_api_key(cls, v: str) -> str:
        """Strip surrounding whitespace; a blank key becomes empty."""
        return v.strip()

    @field_validator("base_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")

    @property
    def has_credentials(self) -> bool:
        return bool(self.api_key)


def get_gateway_config() -> GatewayConfig:
    """Create gateway configuration from environment.

    Returns:
        Configured GatewayConfig instance.
    """
    return GatewayConfig()
