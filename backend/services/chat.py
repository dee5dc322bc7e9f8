"""
Construction assistant chat.

Uses the AI gateway when it is configured, otherwise Groq when
GROQ_API_KEY is set. With neither, a fixed offline reply is returned so
the dashboard chat still answers during local development.
"""

import logging
from typing import List

from config import GROQ_API_KEY, GROQ_MODEL, AI_MAX_TOKENS
from errors import GatewayError, ValidationError
from models import ChatRole
from services import ai_gateway

logger = logging.getLogger(__name__)

# Groq client (lazy init)
_groq_client = None


def _get_groq_client():
    """Lazy initialization of Groq client."""
    global _groq_client
    if _groq_client is None and GROQ_API_KEY:
        from groq import AsyncGroq
        _groq_client = AsyncGroq(api_key=GROQ_API_KEY, max_retries=0)
    return _groq_client


SYSTEM_PROMPT = """You are Digital Build's AI construction assistant. \
Help homeowners plan and build their house: floor plan layouts, room sizing, \
architectural styles, construction materials, cost drivers, permits, \
scheduling, and working with contractors and designers.

Be concise, practical and friendly. When a question depends on details you \
do not have (plot size, budget, location, number of floors), ask for them. \
Give ranges rather than single figures for costs and durations, and say \
when local regulations or a licensed professional should be consulted."""

OFFLINE_REPLY = (
    "I'm here to help with your construction project! This feature will be powered "
    "by AI to provide expert guidance on design, materials, and construction best practices."
)


def _prepare_messages(messages: List[dict]) -> List[dict]:
    """Validate the transcript and prepend the system prompt."""
    if not messages:
        raise ValidationError("At least one message is required", field="messages")

    prepared = [{"role": ChatRole.SYSTEM.value, "content": SYSTEM_PROMPT}]
    for msg in messages:
        role = ChatRole.parse(msg.get("role"))
        if role is None or role == ChatRole.SYSTEM:
            raise ValidationError(f"Invalid message role: {msg.get('role')!r}", field="messages")
        prepared.append({"role": role.value, "content": msg.get("content", "")})

    last = prepared[-1]
    if last["role"] != ChatRole.USER.value or not last["content"].strip():
        raise ValidationError("Message cannot be empty", field="messages")
    return prepared


async def _chat_with_groq(client, messages: List[dict]) -> str:
    from groq import APIError, APIStatusError

    try:
        response = await client.chat.completions.create(
            model=GROQ_MODEL,
            messages=messages,
            temperature=0.7,
            max_tokens=AI_MAX_TOKENS,
        )
    except APIStatusError as e:
        logger.error("Groq error: %s %s", e.status_code, e.message)
        raise GatewayError.from_status(e.status_code, e.message) from e
    except APIError as e:
        logger.error("Groq request failed: %s", e)
        raise GatewayError(f"AI request failed: {e}") from e

    reply = response.choices[0].message.content if response.choices else None
    if not reply:
        raise GatewayError("No response received from AI")
    return reply


async def chat_reply(messages: List[dict]) -> str:
    """
    Answer the last user message of a transcript.

    Args:
        messages: [{"role": "user"/"assistant", "content": "..."}], oldest first.

    Returns:
        The assistant's reply text.
    """
    prepared = _prepare_messages(messages)

    if ai_gateway.is_configured():
        return await ai_gateway.complete_text(prepared)

    client = _get_groq_client()
    if client is not None:
        return await _chat_with_groq(client, prepared)

    logger.info("No chat provider configured, using offline reply")
    return OFFLINE_REPLY
