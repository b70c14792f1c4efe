"""Chat Gateway.

Prepends the fixed legal-advisor system prompt to the caller's
conversation and forwards it to the chat model. Holds no session memory:
the caller sends every prior turn with each request.
"""

import logging
from typing import Any

from pydantic import TypeAdapter, ValidationError

from src.errors import ClientInputError, ConfigurationError
from src.llm.client import CompletionClient
from src.llm.config import GatewayConfig
from src.llm.prompts import CHAT_SYSTEM_PROMPT
from src.models.schemas import ChatMessage, ChatReply

logger = logging.getLogger(__name__)

MISSING_MESSAGES_MESSAGE = "Messages array is required"
INVALID_MESSAGE_MESSAGE = (
    "Each message needs a role of 'user' or 'assistant' and string content"
)
MISSING_CONFIG_MESSAGE = "OpenAI API configuration is missing"
UPSTREAM_FAILURE_MESSAGE = "Failed to get response from AI"

_messages_adapter = TypeAdapter(list[ChatMessage])


def parse_messages(payload: Any) -> list[ChatMessage]:
    """Validate the ``messages`` field of a chat request body.

    Args:
        payload: Decoded JSON body.

    Returns:
        The conversation turns in order.

    Raises:
        ClientInputError: Missing or non-array ``messages``, or a bad item.
    """
    messages = payload.get("messages") if isinstance(payload, dict) else None
    if not isinstance(messages, list):
        raise ClientInputError(MISSING_MESSAGES_MESSAGE)

    try:
        return _messages_adapter.validate_python(messages)
    except ValidationError as e:
        logger.warning(f"Rejected chat messages: {e.error_count()} invalid field(s)")
        raise ClientInputError(INVALID_MESSAGE_MESSAGE) from e


class ChatGateway:
    """Stateless handler for ``POST /api/chat``."""

    def __init__(self, config: GatewayConfig, client: CompletionClient) -> None:
        self._config = config
        self._client = client

    @staticmethod
    def build_messages(messages: list[ChatMessage]) -> list[dict[str, str]]:
        """System prompt followed by the conversation, in order."""
        return [{"role": "system", "content": CHAT_SYSTEM_PROMPT}] + [
            {"role": m.role, "content": m.content} for m in messages
        ]

    async def reply(self, messages: list[ChatMessage]) -> ChatReply:
        """Get the assistant's reply to a conversation.

        Raises:
            ConfigurationError: No API key configured.
            UpstreamError: Provider failed.
            InvalidUpstreamResponseError: Provider answer was malformed.
        """
        if not self._config.has_credentials:
            raise ConfigurationError(MISSING_CONFIG_MESSAGE)

        completion = await self._client.complete(
            self._config.chat_model,
            self.build_messages(messages),
            UPSTREAM_FAILURE_MESSAGE,
            temperature=self._config.chat_temperature,
            max_tokens=self._config.chat_max_tokens,
            top_p=self._config.chat_top_p,
        )
        return ChatReply(message=completion.content, usage=completion.usage)
