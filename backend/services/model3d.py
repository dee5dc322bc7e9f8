"""
3D preview scene for a room layout.

Turns the RoomVolume boxes from services.room_layout into a glTF binary
that the dashboard viewer can load directly:
  - A thin ground slab under the whole plot footprint
  - One semi-transparent box per room, coloured from the style palette
  - Node names set to the room labels

The scene is y-up to match the viewer. Idle animation is applied by the
viewer and is not baked into the file.
"""

import logging
from typing import List

import numpy as np
import trimesh

from services.room_layout import RoomVolume

logger = logging.getLogger(__name__)

# ===========================================================================
# CONSTANTS
# ===========================================================================

GROUND_THICK = 0.05       # scene units
GROUND_MARGIN = 0.5       # scene units of ground around the plot
ROOM_OPACITY = 0.8

COLORS = {
    'ground':  [42, 42, 42, 255],
    'default': [200, 200, 200, 255],
}


# ===========================================================================
# GEOMETRY HELPERS
# ===========================================================================

def hex_to_rgba(color: str, opacity: float = 1.0) -> List[int]:
    """Convert '#rrggbb' to an RGBA list. Malformed values give the default colour."""
    value = (color or "").lstrip("#")
    try:
        rgb = [int(value[i:i + 2], 16) for i in (0, 2, 4)] if len(value) == 6 else None
    except ValueError:
        rgb = None
    if rgb is None:
        rgb = COLORS['default'][:3]
    return rgb + [int(round(255 * opacity))]


def _make_box(x, y, z, w, h, d):
    """Box of size (w, h, d) whose base centre sits at (x, y, z)."""
    if w < 1e-6 or h < 1e-6 or d < 1e-6:
        return trimesh.Trimesh()
    mesh = trimesh.creation.box(extents=[w, h, d])
    mesh.apply_translation([x, y + h / 2, z])
    return mesh


def _color_mesh(mesh, rgba):
    """Apply a solid colour to a mesh."""
    if not _is_valid_mesh(mesh):
        return mesh
    mesh.visual = trimesh.visual.ColorVisuals(mesh=mesh, face_colors=np.array(rgba, dtype=np.uint8))
    return mesh


def _is_valid_mesh(mesh):
    """Check if a mesh has valid geometry."""
    return (mesh is not None and hasattr(mesh, 'vertices')
            and mesh.vertices.shape[0] > 0)


# ===========================================================================
# SCENE
# ===========================================================================

def build_scene(rooms: List[RoomVolume], plot_width: float, plot_depth: float) -> trimesh.Scene:
    """
    Build the preview scene.

    Args:
        rooms: Room volumes from plan_layout().
        plot_width: Scaled plot width (x extent).
        plot_depth: Scaled plot length (z extent).
    """
    scene = trimesh.Scene()

    ground = _make_box(0.0, -GROUND_THICK, 0.0,
                       plot_width + 2 * GROUND_MARGIN, GROUND_THICK,
                       plot_depth + 2 * GROUND_MARGIN)
    if _is_valid_mesh(ground):
        scene.add_geometry(_color_mesh(ground, COLORS['ground']),
                           node_name="Ground", geom_name="Ground")

    for room in rooms:
        x, y, z = room.position
        w, h, d = room.size
        mesh = _make_box(x, y, z, w, h, d)
        if not _is_valid_mesh(mesh):
            logger.warning("Skipping degenerate room %r (size %s)", room.label, room.size)
            continue
        _color_mesh(mesh, hex_to_rgba(room.color, ROOM_OPACITY))
        scene.add_geometry(mesh, node_name=room.label, geom_name=room.label)

    return scene


def export_glb(rooms: List[RoomVolume], plot_width: float, plot_depth: float) -> bytes:
    """
    Export the preview scene as GLB bytes.

    Raises:
        ValueError: if the layout has no drawable geometry.
    """
    scene = build_scene(rooms, plot_width, plot_depth)
    if not scene.geometry:
        raise ValueError("No valid geometry generated for 3D model.")

    logger.info("Exporting 3D preview: %d meshes, plot %.2fx%.2f",
                len(scene.geometry), plot_width, plot_depth)
    return scene.export(file_type="glb")
