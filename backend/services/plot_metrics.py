"""
Plot geometry metrics and local gating for design requests.

compute_metrics() summarizes a rectangular plot from raw form values and
never raises. check_design_request() applies the rules a design request
must pass before anything is sent to the AI gateway.
"""

import logging
import math
from dataclasses import dataclass, asdict

from config import MIN_BUILT_UP_AREA
from errors import ValidationError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PlotMetrics:
    total_area: float
    built_up_area: float
    open_area: float
    open_percentage: float
    is_valid: bool

    def to_dict(self) -> dict:
        d = asdict(self)
        return {
            "totalArea": d["total_area"],
            "builtUpArea": d["built_up_area"],
            "openArea": d["open_area"],
            "openPercentage": d["open_percentage"],
            "isValid": d["is_valid"],
        }


def to_number(value) -> float:
    """Parse a form value as a float. Missing, non-numeric and non-finite values become 0."""
    if value is None or isinstance(value, bool):
        return 0.0
    try:
        number = float(str(value).strip()) if isinstance(value, str) else float(value)
    except (TypeError, ValueError):
        return 0.0
    return number if math.isfinite(number) else 0.0


def compute_metrics(length_ft, width_ft, open_area_sqft=0) -> PlotMetrics:
    length = to_number(length_ft)
    width = to_number(width_ft)
    open_area = to_number(open_area_sqft)

    total_area = length * width
    built_up_area = total_area - open_area
    open_percentage = open_area / total_area * 100 if total_area != 0 else 0.0

    if not all(math.isfinite(v) for v in (total_area, built_up_area, open_percentage)):
        logger.warning("Plot area overflow: length=%s width=%s open=%s", length, width, open_area)
        return PlotMetrics(total_area=0.0, built_up_area=0.0, open_area=open_area,
                           open_percentage=0.0, is_valid=False)

    # Open area must leave something to build on; equality is invalid.
    is_valid = length > 0 and width > 0 and 0 <= open_area < total_area

    return PlotMetrics(
        total_area=total_area,
        built_up_area=built_up_area,
        open_area=open_area,
        open_percentage=open_percentage,
        is_valid=is_valid,
    )


def _is_missing(value) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def check_design_request(plot_length, plot_width, rooms, floors, style,
                         open_area=None) -> PlotMetrics:
    """
    Validate a design-generation request locally.

    Raises:
        ValidationError: on the first failed rule, in the order
            missing fields, non-positive numbers, negative open area,
            open area covering the plot, built-up area below the floor.

    Returns:
        The PlotMetrics of the requested plot.
    """
    if any(_is_missing(v) for v in (plot_length, plot_width, rooms, floors, style)):
        raise ValidationError("Missing required parameters")

    if any(to_number(v) <= 0 for v in (plot_length, plot_width, rooms, floors)):
        raise ValidationError("Invalid dimensions, room count, or floor count")

    metrics = compute_metrics(plot_length, plot_width, open_area)

    if metrics.open_area < 0:
        raise ValidationError("Open area cannot be negative", field="openArea")

    if metrics.open_area >= metrics.total_area:
        raise ValidationError(
            "Open area cannot be equal to or greater than total plot area", field="openArea")

    # Absolute floor, independent of the requested room count.
    if metrics.built_up_area < MIN_BUILT_UP_AREA:
        logger.info("Rejected design request: built-up area %.0f sq ft < %.0f",
                    metrics.built_up_area, MIN_BUILT_UP_AREA)
        raise ValidationError("Built-up area is too small for the requested number of rooms")

    return metrics
