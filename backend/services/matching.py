"""
Contractor and designer matching.

Builds a search prompt from the dashboard filters and asks the AI gateway
for six matching professional profiles, validated against the profile
schemas before they are returned.
"""

import logging
from dataclasses import dataclass
from typing import List, Optional

from pydantic import ValidationError as SchemaValidationError

from errors import GatewayError, ValidationError
from models import (
    ContractorSpecialty, DesignerSpecialty,
    CONTRACTOR_SPECIALTIES, DESIGNER_SPECIALTIES,
    specialty_title,
)
from schemas import ContractorSearchResponse, DesignerSearchResponse, SearchRequest
from services import ai_gateway

logger = logging.getLogger(__name__)

RESULT_COUNT = 6
DEFAULT_LOCATION = "Pakistan"


@dataclass(frozen=True)
class MatchKind:
    """What is being matched and the bounds the generated profiles must respect."""
    noun: str                 # "contractor" / "designer"
    result_key: str           # JSON key holding the list
    default_specialty: str
    specialty_enum: type
    specialties: dict
    rate_range: str
    rating_range: str
    reviews_range: str
    projects_range: str
    response_model: type
    extra_requirements: str = ""
    extra_fields: str = ""


CONTRACTORS = MatchKind(
    noun="contractor",
    result_key="contractors",
    default_specialty="General Contractor",
    specialty_enum=ContractorSpecialty,
    specialties=CONTRACTOR_SPECIALTIES,
    rate_range="Rs 500-3000/hour",
    rating_range="4.0-5.0",
    reviews_range="15-150",
    projects_range="20-200",
    response_model=ContractorSearchResponse,
)

DESIGNERS = MatchKind(
    noun="designer",
    result_key="designers",
    default_specialty="Interior Designer",
    specialty_enum=DesignerSpecialty,
    specialties=DESIGNER_SPECIALTIES,
    rate_range="Rs 1500-5000/hour",
    rating_range="4.2-5.0",
    reviews_range="20-180",
    projects_range="25-250",
    response_model=DesignerSearchResponse,
    extra_requirements=(
        "- Include 3-5 portfolio highlights for each designer "
        '(e.g., "Luxury Villa Design", "Modern Office Space", "Eco-Friendly Home")\n'
    ),
    extra_fields=',\n      "portfolioHighlights": ["Project Type 1", "Project Type 2", "Project Type 3"]',
)


def _clean(value: Optional[str]) -> str:
    return (value or "").strip()


def search_criteria(query: SearchRequest) -> List[str]:
    """Human-readable list of the filters that were filled in."""
    labels = (
        ("Search query", query.searchQuery),
        ("Specialty", query.specialty),
        ("Location", query.location),
        ("Budget range", query.budget),
        ("Project details", query.projectDetails),
    )
    return [f"{label}: {_clean(value)}" for label, value in labels if _clean(value)]


def build_search_prompt(kind: MatchKind, query: SearchRequest) -> str:
    specialty = (specialty_title(_clean(query.specialty), kind.specialties, kind.specialty_enum)
                 or _clean(query.searchQuery)
                 or kind.default_specialty)
    location = _clean(query.location) or DEFAULT_LOCATION
    guidelines = "\n".join(p.guideline() for p in kind.specialties.values())
    criteria = "\n".join(search_criteria(query))

    return f"""You are a {kind.noun} matching AI assistant for construction projects in Pakistan.
Generate a list of {RESULT_COUNT} realistic {kind.noun}s based on these search criteria:

{criteria}

REQUIREMENTS:
- Generate {kind.noun}s with realistic Pakistani/local names
- All {kind.noun}s should be based in or near: {location}
- Primary specialty should be: {specialty}
- Use Pakistani phone format: +92-3XX-XXXXXXX
- Use professional email addresses
- Hourly rates in Pakistani Rupees ({kind.rate_range} based on specialty and experience)
- Ratings between {kind.rating_range}
- Reviews between {kind.reviews_range}
- Experience between 5-20 years
- Some should be verified (verified: true), others not
- Include 2-4 relevant certifications per {kind.noun}
- Completed projects between {kind.projects_range}
- Brief professional descriptions (2-3 sentences) that highlight expertise
{kind.extra_requirements}
SPECIALTY GUIDELINES:
{guidelines}

You must respond with ONLY valid JSON - no markdown, no code blocks, no backticks, just raw JSON.

Return ONLY this JSON structure:
{{
  "{kind.result_key}": [
    {{
      "id": "unique-string-id",
      "name": "Full Pakistani Name",
      "specialty": "Exact Specialty Title",
      "location": "City, Area, Pakistan",
      "rating": 4.7,
      "reviews": 89,
      "experience": "10 years",
      "phone": "+92-3XX-XXXXXXX",
      "email": "professional@email.com",
      "hourlyRate": "Rs 1,500/hour",
      "description": "Professional description highlighting expertise and experience...",
      "verified": true,
      "certifications": ["Certification 1", "Certification 2"],
      "completedProjects": 134{kind.extra_fields}
    }}
  ]
}}"""


async def _find(kind: MatchKind, query: SearchRequest):
    if not (_clean(query.searchQuery) or _clean(query.specialty) or _clean(query.location)):
        raise ValidationError("Please provide at least one search criteria.")

    logger.info("Searching %ss: %s", kind.noun, "; ".join(search_criteria(query)))

    data = await ai_gateway.complete_json([
        {"role": "system",
         "content": f"You are a {kind.noun} matching assistant. "
                    "Always respond with valid JSON only, no markdown or code blocks."},
        {"role": "user", "content": build_search_prompt(kind, query)},
    ])

    if not isinstance(data.get(kind.result_key), list):
        raise GatewayError("Invalid data format received from AI")

    try:
        result = kind.response_model.model_validate({kind.result_key: data[kind.result_key]})
    except SchemaValidationError as e:
        logger.error("Invalid %s profiles from AI: %s", kind.noun, e)
        raise GatewayError("Invalid data format received from AI") from e

    logger.info("Found %d %ss", len(data[kind.result_key]), kind.noun)
    return result


async def find_contractors(query: SearchRequest) -> ContractorSearchResponse:
    return await _find(CONTRACTORS, query)


async def find_designers(query: SearchRequest) -> DesignerSearchResponse:
    return await _find(DESIGNERS, query)
