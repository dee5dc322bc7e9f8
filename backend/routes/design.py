"""Plot metrics, 3D room layout and AI design generation routes."""

from typing import Optional

from fastapi import APIRouter, Query
from fastapi.responses import Response

from errors import ValidationError
from schemas import (
    PlotMetricsRequest, PlotMetricsOut,
    RoomLayoutRequest, RoomLayoutResponse,
    DesignRequest, DesignResponse,
    ERROR_RESPONSES,
)
from services.design import generate_design
from services.model3d import export_glb
from services.plot_metrics import compute_metrics
from services.room_layout import plan_layout, scene_footprint

router = APIRouter(prefix="/api", tags=["design"], responses=ERROR_RESPONSES)


def _valid_layout(plot_length, plot_width, open_area, rooms, style):
    """Metrics gate first, then the room layout."""
    metrics = compute_metrics(plot_length, plot_width, open_area)
    if not metrics.is_valid:
        raise ValidationError("Invalid plot dimensions or open area")
    return metrics, plan_layout(plot_length, plot_width, rooms, style)


@router.post("/plot-metrics", response_model=PlotMetricsOut)
async def plot_metrics(data: PlotMetricsRequest):
    """Area summary for the plot form. Never fails; invalid plots have isValid=false."""
    return compute_metrics(data.plotLength, data.plotWidth, data.openArea).to_dict()


@router.post("/room-layout", response_model=RoomLayoutResponse)
async def room_layout(data: RoomLayoutRequest):
    """Room boxes for the 3D preview."""
    metrics, rooms = _valid_layout(data.plotLength, data.plotWidth, data.openArea,
                                   data.rooms, data.style)
    return {
        "metrics": metrics.to_dict(),
        "rooms": [r.to_dict() for r in rooms],
    }


@router.get("/room-layout/model.glb")
async def room_layout_model(
    plotLength: Optional[str] = Query(None),
    plotWidth: Optional[str] = Query(None),
    rooms: Optional[str] = Query(None),
    style: Optional[str] = Query(None),
    openArea: Optional[str] = Query(None),
):
    """Download the 3D preview as a GLB file."""
    _, layout = _valid_layout(plotLength, plotWidth, openArea, rooms, style)
    width, depth = scene_footprint(plotLength, plotWidth)
    try:
        content = export_glb(layout, width, depth)
    except ValueError as e:
        raise ValidationError(str(e)) from e
    return Response(
        content=content,
        media_type="model/gltf-binary",
        headers={"Content-Disposition": 'attachment; filename="room_layout.glb"'},
    )


@router.post("/generate-design", response_model=DesignResponse)
async def generate_design_route(data: DesignRequest):
    """
    Generate a floor-plan image for the plot.

    Rejected with 400 before any AI call when the plot fails validation.
    """
    return await generate_design(
        plot_length=data.plotLength,
        plot_width=data.plotWidth,
        rooms=data.rooms,
        floors=data.floors,
        style=data.style,
        open_area=data.openArea,
    )
