"""Chat endpoint.

Reads the raw JSON body so that a missing or non-array ``messages`` field
is answered with the gateway's own 400 message.
"""

import json
import logging

from fastapi import APIRouter, Depends, Request

from src.api.dependencies import get_chat_gateway
from src.errors import INTERNAL_ERROR_MESSAGE, ClientInputError, GatewayError
from src.gateways.chat import MISSING_MESSAGES_MESSAGE, ChatGateway, parse_messages
from src.models.schemas import ChatReply, ErrorResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["chat"])


@router.post(
    "/chat",
    response_model=ChatReply,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def chat(
    request: Request,
    gateway: ChatGateway = Depends(get_chat_gateway),
) -> ChatReply:
    """Answer the latest turn of a conversation.

    Body: ``{"messages": [{"role": "user" | "assistant", "content": str}, ...]}``
    holding every prior turn plus the new user message.

    Raises:
        400: Body is not JSON, or messages is missing, not an array, or invalid.
        500: Missing API key, malformed provider answer or unexpected failure.
        Provider status: the upstream model call failed.
    """
    try:
        payload = await request.json()
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        logger.warning(f"Chat request body is not JSON: {e}")
        raise ClientInputError(MISSING_MESSAGES_MESSAGE) from e

    messages = parse_messages(payload)
    try:
        return await gateway.reply(messages)
    except GatewayError:
        raise
    except Exception as e:
        logger.exception("Unexpected failure answering chat request")
        raise GatewayError(INTERNAL_ERROR_MESSAGE) from e
