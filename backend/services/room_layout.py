"""
Procedural room layout for the 3D plot preview.

Partitions a rectangular plot into 2, 3 or 4 labeled room boxes. This is a
presentation layout, not an architectural solver: each room count maps to
a fixed topology from TOPOLOGIES, scaled to the plot at layout time.

Scene axes follow the viewer convention: x across the plot width, z along
the plot length (positive z is the front), y up. A room's position is the
centre of its footprint at floor level.
"""

import logging
from dataclasses import dataclass
from itertools import combinations
from typing import List, Tuple

from shapely.geometry import box as shapely_box

from config import SCENE_SCALE, ROOM_HEIGHT
from models import Style
from services.plot_metrics import to_number

logger = logging.getLogger(__name__)

# Four colours per style, assigned to rooms in template order.
PALETTES = {
    Style.MODERN:      ("#3b82f6", "#8b5cf6", "#06b6d4", "#10b981"),
    Style.TRADITIONAL: ("#d97706", "#dc2626", "#059669", "#7c3aed"),
    Style.MINIMAL:     ("#64748b", "#475569", "#334155", "#1e293b"),
    Style.LUXURY:      ("#fbbf24", "#f59e0b", "#d97706", "#b45309"),
}


@dataclass(frozen=True)
class RoomTemplate:
    """Room slot relative to the scaled plot (fractions of width / length)."""
    label: str
    rel_x: float
    rel_z: float
    rel_width: float
    rel_depth: float


TOPOLOGIES = {
    2: (
        RoomTemplate("Living Room", -0.25, 0.0, 0.5, 0.8),
        RoomTemplate("Bedroom",      0.25, 0.0, 0.5, 0.8),
    ),
    3: (
        RoomTemplate("Living Room", -0.25, 0.25, 0.5, 0.5),
        RoomTemplate("Bedroom 1",    0.25, 0.25, 0.5, 0.5),
        RoomTemplate("Kitchen",      0.0, -0.25, 0.8, 0.5),
    ),
    4: (
        RoomTemplate("Living Room", -0.25,  0.25, 0.5, 0.5),
        RoomTemplate("Bedroom 1",    0.25,  0.25, 0.5, 0.5),
        RoomTemplate("Kitchen",     -0.25, -0.25, 0.5, 0.5),
        RoomTemplate("Bedroom 2",    0.25, -0.25, 0.5, 0.5),
    ),
}

DEFAULT_TOPOLOGY = 4


@dataclass(frozen=True)
class RoomVolume:
    label: str
    position: Tuple[float, float, float]
    size: Tuple[float, float, float]
    color: str

    def footprint(self):
        """Footprint in the x-z plane as a shapely box."""
        x, _, z = self.position
        w, _, d = self.size
        return shapely_box(x - w / 2, z - d / 2, x + w / 2, z + d / 2)

    def to_dict(self) -> dict:
        return {
            "label": self.label,
            "position": list(self.position),
            "size": list(self.size),
            "color": self.color,
        }


def _topology_for(room_count) -> Tuple[RoomTemplate, ...]:
    count = to_number(room_count)
    # Only exact counts pick a smaller topology; 2.5 gets the grid.
    if count.is_integer() and int(count) in TOPOLOGIES:
        return TOPOLOGIES[int(count)]
    return TOPOLOGIES[DEFAULT_TOPOLOGY]


def scene_footprint(length_ft, width_ft) -> Tuple[float, float]:
    """Scaled (width, depth) of the whole plot in scene units."""
    return to_number(width_ft) * SCENE_SCALE, to_number(length_ft) * SCENE_SCALE


def plan_layout(length_ft, width_ft, room_count, style) -> List[RoomVolume]:
    """
    Lay out room volumes for a plot.

    Room counts other than 2 and 3 use the 2x2 grid; unknown styles use the
    modern palette. Never raises.
    """
    scaled_width, scaled_length = scene_footprint(length_ft, width_ft)
    palette = PALETTES[Style.parse(style)]

    rooms = []
    for i, t in enumerate(_topology_for(room_count)):
        rooms.append(RoomVolume(
            label=t.label,
            position=(t.rel_x * scaled_width, 0.0, t.rel_z * scaled_length),
            size=(t.rel_width * scaled_width, ROOM_HEIGHT, t.rel_depth * scaled_length),
            color=palette[i],
        ))

    logger.debug("Planned %d rooms for %sx%s ft plot", len(rooms), length_ft, width_ft)
    return rooms


def find_overlaps(rooms: List[RoomVolume], tolerance: float = 1e-9) -> List[Tuple[str, str]]:
    """Label pairs whose footprints share positive area. Shared edges do not count."""
    overlaps = []
    for a, b in combinations(rooms, 2):
        if a.footprint().intersection(b.footprint()).area > tolerance:
            overlaps.append((a.label, b.label))
    return overlaps
