"""Cost estimation route."""

from fastapi import APIRouter

from schemas import CostEstimateRequest, CostEstimate, ERROR_RESPONSES
from services.cost_estimate import estimate_cost

router = APIRouter(prefix="/api", tags=["estimate"], responses=ERROR_RESPONSES)


@router.post("/estimate-cost", response_model=CostEstimate)
async def estimate_cost_route(data: CostEstimateRequest):
    """Materials, labor, equipment and permit costs for a built-up area."""
    return await estimate_cost(data.area, data.quality, data.location)
