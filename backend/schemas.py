"""Pydantic schemas for API request/response validation.

Field names follow the dashboard's camelCase JSON.
"""

from pydantic import BaseModel, ConfigDict, Field
from typing import Optional, Union


# ---------- Errors ----------
class ErrorResponse(BaseModel):
    error: str


# Shared by every router for the OpenAPI docs.
ERROR_RESPONSES = {
    400: {"model": ErrorResponse, "description": "Invalid request"},
    402: {"model": ErrorResponse, "description": "AI gateway credits exhausted"},
    429: {"model": ErrorResponse, "description": "AI gateway rate limit"},
    500: {"model": ErrorResponse, "description": "Server or AI gateway error"},
}


# ---------- Plot metrics & layout ----------
# Form values arrive as numbers or raw strings; the services coerce them.
FormNumber = Optional[Union[float, str]]


class PlotMetricsRequest(BaseModel):
    plotLength: FormNumber = None
    plotWidth: FormNumber = None
    openArea: FormNumber = None


class PlotMetricsOut(BaseModel):
    totalArea: float
    builtUpArea: float
    openArea: float
    openPercentage: float
    isValid: bool


class RoomLayoutRequest(PlotMetricsRequest):
    rooms: FormNumber = None
    style: Optional[str] = None


class RoomVolumeOut(BaseModel):
    label: str
    position: list[float] = Field(..., min_length=3, max_length=3)
    size: list[float] = Field(..., min_length=3, max_length=3)
    color: str


class RoomLayoutResponse(BaseModel):
    metrics: PlotMetricsOut
    rooms: list[RoomVolumeOut]


# ---------- Design generation ----------
class DesignRequest(BaseModel):
    plotLength: Optional[float] = None
    plotWidth: Optional[float] = None
    rooms: Optional[int] = None
    floors: Optional[int] = None
    style: Optional[str] = None
    openArea: Optional[float] = None


class DesignSpecifications(BaseModel):
    plotLength: float
    plotWidth: float
    rooms: int
    floors: int
    style: str
    totalArea: float
    openArea: float
    coveredArea: float


class DesignResponse(BaseModel):
    imageUrl: str
    specifications: DesignSpecifications


# ---------- Cost estimation ----------
class CostEstimateRequest(BaseModel):
    area: Optional[float] = None
    quality: Optional[str] = None
    location: Optional[str] = None


class CostEstimate(BaseModel):
    materials: float
    labor: float
    equipment: float
    permits: float
    total: float
    details: str = ""
    currency: str = "USD"


# ---------- Chat ----------
class ChatMessage(BaseModel):
    role: str = Field(..., description="'user' or 'assistant'")
    content: str


class ChatRequest(BaseModel):
    messages: list[ChatMessage] = []


class ChatResponse(BaseModel):
    response: str


# ---------- Contractor / designer matching ----------
class SearchRequest(BaseModel):
    searchQuery: Optional[str] = None
    specialty: Optional[str] = None
    location: Optional[str] = None
    budget: Optional[str] = None
    projectDetails: Optional[str] = None


class ContractorProfile(BaseModel):
    model_config = ConfigDict(coerce_numbers_to_str=True)

    id: str
    name: str
    specialty: str
    location: str
    rating: float
    reviews: int = 0
    experience: str = ""
    phone: str = ""
    email: str = ""
    hourlyRate: str = ""
    description: str = ""
    verified: bool = False
    certifications: list[str] = []
    completedProjects: int = 0


class DesignerProfile(ContractorProfile):
    portfolioHighlights: list[str] = []


class ContractorSearchResponse(BaseModel):
    contractors: list[ContractorProfile]


class DesignerSearchResponse(BaseModel):
    designers: list[DesignerProfile]
