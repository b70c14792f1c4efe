"""Chat-completions HTTP client for OpenAI and Azure OpenAI.

Thin adapter: builds the provider URL and auth headers from the injected
configuration, posts one request, and returns the first choice's content
together with the provider's token usage.
"""

import logging
from typing import Any

import httpx
from pydantic import BaseModel, Field

from src.errors import InvalidUpstreamResponseError, UpstreamError
from src.llm.config import GatewayConfig

logger = logging.getLogger(__name__)


class Completion(BaseModel):
    """Assistant text returned by the provider.

    Attributes:
        content: Markdown text of the first choice.
        usage: Token usage block exactly as the provider reported it.
    """

    content: str
    usage: dict[str, Any] | None = Field(default=None)


class CompletionClient:
    """Posts chat-completion requests to the configured provider."""

    def __init__(
        self,
        config: GatewayConfig,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            config: Gateway configuration with credentials and endpoint.
            transport: Optional httpx transport (tests pass a MockTransport).
        """
        self._config = config
        self._transport = transport

    def _endpoint(self, model: str) -> tuple[str, dict[str, str], dict[str, str]]:
        config = self._config
        if config.provider == "azure":
            url = f"{config.base_url}/openai/deployments/{model}/chat/completions"
            headers = {"api-key": config.api_key}
            params = {"api-version": config.azure_api_version}
        else:
            url = f"{config.base_url}/chat/completions"
            headers = {"Authorization": f"Bearer {config.api_key}"}
            params = {}
        headers["Content-Type"] = "application/json"
        return url, headers, params

    async def complete(
        self,
        model: str,
        messages: list[dict[str, Any]],
        error_message: str,
        **sampling: Any,
    ) -> Completion:
        """Send one chat-completion request.

        Args:
            model: Model name (Azure: deployment name).
            messages: Provider-format messages, system prompt included.
            error_message: User-facing message if the provider fails.
            **sampling: temperature, max_tokens, top_p and similar.

        Returns:
            The first choice's content and usage.

        Raises:
            UpstreamError: Provider answered non-2xx or could not be reached.
            InvalidUpstreamResponseError: 2xx answer without a message.
        """
        url, headers, params = self._endpoint(model)
        payload: dict[str, Any] = {"messages": messages, **sampling}
        if self._config.provider == "openai":
            payload["model"] = model

        async with httpx.AsyncClient(
            timeout=self._config.request_timeout,
            transport=self._transport,
        ) as client:
            try:
                response = await client.post(url, headers=headers, params=params, json=payload)
            except httpx.RequestError as e:
                logger.error(f"LLM request to {url} failed: {e}")
                raise UpstreamError(error_message, 502, str(e)) from e

        if response.is_error:
            logger.error(f"OpenAI API error ({response.status_code}): {response.text}")
            raise UpstreamError(error_message, response.status_code, response.text)

        try:
            data = response.json()
            message = data["choices"][0]["message"]
        except (ValueError, KeyError, IndexError, TypeError) as e:
            logger.error(f"Invalid OpenAI response: {response.text}")
            raise InvalidUpstreamResponseError() from e

        if not isinstance(message, dict):
            logger.error(f"Invalid OpenAI response: {response.text}")
            raise InvalidUpstreamResponseError()

        return Completion(content=message.get("content") or "", usage=data.get("usage"))
