"""Contractor and designer search routes."""

from fastapi import APIRouter

from schemas import SearchRequest, ContractorSearchResponse, DesignerSearchResponse, ERROR_RESPONSES
from services.matching import find_contractors, find_designers

router = APIRouter(prefix="/api", tags=["matching"], responses=ERROR_RESPONSES)


@router.post("/find-contractors", response_model=ContractorSearchResponse)
async def find_contractors_route(query: SearchRequest):
    """AI-matched contractors for the search filters."""
    return await find_contractors(query)


@router.post("/find-designers", response_model=DesignerSearchResponse)
async def find_designers_route(query: SearchRequest):
    """AI-matched designers for the search filters."""
    return await find_designers(query)
