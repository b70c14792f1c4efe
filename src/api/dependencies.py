"""FastAPI dependencies wiring configuration into the gateways.

Tests replace ``get_gateway_config`` or ``get_completion_client`` through
``app.dependency_overrides``.
"""

from fastapi import Depends

from src.gateways.analysis import DocumentAnalysisGateway
from src.gateways.chat import ChatGateway
from src.llm.client import CompletionClient
from src.llm.config import GatewayConfig, get_gateway_config


def get_completion_client(
    config: GatewayConfig = Depends(get_gateway_config),
) -> CompletionClient:
    """Build the provider client for one request.

    Args:
        config: Gateway configuration with credentials and base URL.

    Returns:
        CompletionClient bound to ``config``.
    """
    return CompletionClient(config)


def get_analysis_gateway(
    config: GatewayConfig = Depends(get_gateway_config),
    client: CompletionClient = Depends(get_completion_client),
) -> DocumentAnalysisGateway:
    """Provide the document analysis gateway."""
    return DocumentAnalysisGateway(config, client)


def get_chat_gateway(
    config: GatewayConfig = Depends(get_gateway_config),
    client: CompletionClient = Depends(get_completion_client),
) -> ChatGateway:
    """Provide the chat gateway."""
    return ChatGateway(config, client)
