"""AI floor-plan image generation for a plot."""

import logging

from services import ai_gateway
from services.plot_metrics import check_design_request, to_number

logger = logging.getLogger(__name__)


def build_design_prompt(plot_length: float, plot_width: float, rooms: int, floors: int,
                        style: str, total_area: float, open_area: float,
                        covered_area: float) -> str:
    """Prompt for a top-down architectural floor-plan drawing."""
    storeys = "single-story" if floors == 1 else f"{floors}-story"

    lines = [
        f"Create a professional architectural floor plan for a {style} style {storeys} house.",
        f"Plot dimensions: {plot_length:g}ft x {plot_width:g}ft (Total: {total_area:g} sq ft).",
        f"Number of rooms: {rooms} across {floors} floor(s).",
    ]
    if open_area:
        lines.append(f"Open area required: {open_area:g} sq ft (for lawn, courtyard, garden, or terrace).")
        lines.append(f"Covered/Built area per floor: {covered_area:g} sq ft.")
    if floors > 1:
        lines.append(f"Show floor plans for all {floors} floors separately or as a stacked view "
                     "labeled Ground Floor, First Floor, and so on.")
        lines.append("Include staircase placement connecting the floors.")
    lines += [
        "The floor plan should be a top-down 2D view with clear room labels, dimensions, doors, and windows.",
        "Use a clean architectural drawing style with black lines on white background.",
        f"Include bedroom(s), bathroom(s), kitchen, living room, and other necessary spaces "
        f"distributed across {floors} floor(s).",
    ]
    if open_area:
        lines.append("Mark the open area clearly (lawn/courtyard/garden) separate from the built structure.")
    lines.append("Show proper spacing and realistic room proportions for each floor.")
    return "\n".join(lines)


async def generate_design(plot_length, plot_width, rooms, floors, style, open_area=None) -> dict:
    """
    Validate the plot and ask the gateway for a floor-plan image.

    Returns:
        {"imageUrl": str, "specifications": {...}}

    Raises:
        ValidationError: when the request fails local gating.
        GatewayError: when the gateway call fails.
    """
    metrics = check_design_request(plot_length, plot_width, rooms, floors, style, open_area)

    length = to_number(plot_length)
    width = to_number(plot_width)
    room_count = int(to_number(rooms))
    floor_count = int(to_number(floors))
    style = str(style).strip()

    logger.info("Generating design: %gx%g ft, %d rooms, %d floor(s), style=%s, open=%g",
                length, width, room_count, floor_count, style, metrics.open_area)

    prompt = build_design_prompt(
        length, width, room_count, floor_count, style,
        metrics.total_area, metrics.open_area, metrics.built_up_area,
    )
    image_url = await ai_gateway.generate_image(prompt)

    return {
        "imageUrl": image_url,
        "specifications": {
            "plotLength": length,
            "plotWidth": width,
            "rooms": room_count,
            "floors": floor_count,
            "style": style,
            "totalArea": metrics.total_area,
            "openArea": metrics.open_area,
            "coveredArea": metrics.built_up_area,
        },
    }
