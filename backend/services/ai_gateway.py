"""
AI gateway client.

The gateway speaks the OpenAI chat-completions protocol, so we talk to it
through the OpenAI SDK pointed at AI_GATEWAY_BASE_URL. Text models return
message content; image models return generated images on the message's
``images`` field when asked for the image modality.

Failures are raised as GatewayError with the status the API should
answer with. Nothing is retried.
"""

import json
import logging
import re
from typing import List, Optional

import openai

from config import (
    AI_GATEWAY_API_KEY, AI_GATEWAY_BASE_URL,
    AI_TEXT_MODEL, AI_IMAGE_MODEL, AI_TEMPERATURE, AI_MAX_TOKENS,
)
from errors import GatewayError

logger = logging.getLogger(__name__)

# Lazy-initialized client
_gateway_client = None


def is_configured() -> bool:
    return bool(AI_GATEWAY_API_KEY)


def _get_gateway_client():
    """Lazy initialization of the gateway client."""
    global _gateway_client
    if _gateway_client is None:
        if not AI_GATEWAY_API_KEY:
            raise GatewayError("AI_GATEWAY_API_KEY is not configured")
        _gateway_client = openai.AsyncOpenAI(
            api_key=AI_GATEWAY_API_KEY,
            base_url=AI_GATEWAY_BASE_URL,
            max_retries=0,
        )
    return _gateway_client


# ============================================================================
# HELPER FUNCTIONS
# ============================================================================

def extract_json(text: str) -> Optional[dict]:
    """Extract the first JSON object from model output, ignoring markdown fences."""
    if not text:
        return None
    text = text.strip()

    fenced = re.search(r'```(?:json)?\s*(.*?)\s*```', text, re.DOTALL | re.IGNORECASE)
    if fenced:
        text = fenced.group(1)

    json_match = re.search(r'\{.*\}', text, re.DOTALL)
    if not json_match:
        return None
    try:
        data = json.loads(json_match.group())
    except json.JSONDecodeError:
        return None
    return data if isinstance(data, dict) else None


async def _create_completion(**kwargs):
    client = _get_gateway_client()
    try:
        return await client.chat.completions.create(**kwargs)
    except openai.APIStatusError as e:
        logger.error("AI gateway error: %s %s", e.status_code, e.message)
        raise GatewayError.from_status(e.status_code, e.message) from e
    except openai.APIError as e:
        logger.error("AI gateway request failed: %s", e)
        raise GatewayError(f"AI gateway request failed: {e}") from e


# ============================================================================
# PUBLIC API
# ============================================================================

async def complete_text(messages: List[dict], model: Optional[str] = None,
                        temperature: Optional[float] = None) -> str:
    """
    Run a chat completion and return the assistant's text.

    Args:
        messages: [{"role": "system"/"user"/"assistant", "content": "..."}]
        model: Override for AI_TEXT_MODEL.
        temperature: Override for AI_TEMPERATURE.

    Raises:
        GatewayError: on upstream failure or empty content.
    """
    model = model or AI_TEXT_MODEL
    logger.info("Calling AI gateway: model=%s messages=%d", model, len(messages))
    response = await _create_completion(
        model=model,
        messages=messages,
        temperature=AI_TEMPERATURE if temperature is None else temperature,
        max_tokens=AI_MAX_TOKENS,
    )

    content = response.choices[0].message.content if response.choices else None
    if not content:
        raise GatewayError("No response received from AI")
    return content


async def complete_json(messages: List[dict], model: Optional[str] = None,
                        temperature: Optional[float] = None) -> dict:
    """Run a chat completion whose answer must be a JSON object."""
    content = await complete_text(messages, model=model, temperature=temperature)
    data = extract_json(content)
    if data is None:
        logger.error("Could not find JSON in response: %s", content[:200])
        raise GatewayError("Invalid response format from AI")
    return data


async def generate_image(prompt: str) -> str:
    """
    Generate an image from a prompt and return its URL (usually a data URL).

    Raises:
        GatewayError: on upstream failure or when no image came back.
    """
    logger.info("Calling AI gateway for image generation: model=%s", AI_IMAGE_MODEL)
    response = await _create_completion(
        model=AI_IMAGE_MODEL,
        messages=[{"role": "user", "content": prompt}],
        extra_body={"modalities": ["image", "text"]},
    )

    message = response.choices[0].message if response.choices else None
    images = getattr(message, "images", None) or []
    try:
        image_url = images[0]["image_url"]["url"]
    except (IndexError, KeyError, TypeError):
        image_url = None

    if not image_url:
        raise GatewayError("No image generated")
    return image_url
