"""
Construction cost estimation through the AI gateway.

The model is asked for a USD breakdown with fixed keys; the answer is
validated against the CostEstimate schema before it reaches the client.
"""

import logging

from pydantic import ValidationError as SchemaValidationError

from errors import GatewayError, ValidationError
from models import ConstructionQuality
from schemas import CostEstimate
from services import ai_gateway
from services.plot_metrics import to_number

logger = logging.getLogger(__name__)

SYSTEM_PROMPT = """You are a construction cost estimation expert.
Provide detailed and realistic cost estimates for home construction projects.
Always respond with a valid JSON object containing the cost breakdown."""

QUALITY_NOTES = {
    ConstructionQuality.BASIC: "economy materials and finishes, minimal customization",
    ConstructionQuality.STANDARD: "mid-range materials and finishes typical for the area",
    ConstructionQuality.PREMIUM: "high-grade materials, upgraded fixtures and finishes",
    ConstructionQuality.LUXURY: "top-tier imported materials, bespoke fixtures and detailing",
}


def build_estimate_prompt(area: float, quality: ConstructionQuality, location: str) -> str:
    return f"""Estimate construction costs for:
- Total Area: {area:g} sq ft
- Quality Level: {quality.value} ({QUALITY_NOTES[quality]})
- Location: {location}

Provide a detailed breakdown in JSON format with these exact keys:
{{
  "materials": number (in USD),
  "labor": number (in USD),
  "equipment": number (in USD),
  "permits": number (in USD),
  "total": number (in USD),
  "details": string (brief explanation of estimates)
}}"""


async def estimate_cost(area, quality=None, location=None) -> CostEstimate:
    """
    Estimate construction cost for a built-up area.

    Raises:
        ValidationError: when the area is missing or not positive.
        GatewayError: on gateway failure or a malformed estimate.
    """
    area_sqft = to_number(area)
    if area_sqft <= 0:
        raise ValidationError("Total area must be a positive number", field="area")

    quality_level = ConstructionQuality.parse(quality)
    location = (location or "").strip() or "Not specified"

    logger.info("Estimating cost: %g sq ft, quality=%s, location=%s",
                area_sqft, quality_level.value, location)

    data = await ai_gateway.complete_json([
        {"role": "system", "content": SYSTEM_PROMPT},
        {"role": "user", "content": build_estimate_prompt(area_sqft, quality_level, location)},
    ])
    data.setdefault("currency", "USD")

    try:
        return CostEstimate.model_validate(data)
    except SchemaValidationError as e:
        logger.error("Cost estimate missing fields: %s", e)
        raise GatewayError("Invalid response format from AI") from e
