"""Procedural room layout for the 3D preview."""

import pytest

from config import SCENE_SCALE, ROOM_HEIGHT
from models import Style
from services.room_layout import (
    PALETTES, plan_layout, find_overlaps, scene_footprint, RoomVolume,
)


def labels(rooms):
    return [r.label for r in rooms]


def test_two_rooms_side_by_side():
    rooms = plan_layout(50, 40, 2, "modern")
    assert labels(rooms) == ["Living Room", "Bedroom"]
    assert all(r.size[1] == 2.5 for r in rooms)

    left, right = rooms
    assert left.position[0] == pytest.approx(-right.position[0])
    assert left.position[0] < 0 < right.position[0]
    assert left.size == right.size
    # half the scaled width, 80% of the scaled length
    assert left.size[0] == pytest.approx(40 * SCENE_SCALE / 2)
    assert left.size[2] == pytest.approx(50 * SCENE_SCALE * 0.8)
    assert [r.color for r in rooms] == list(PALETTES[Style.MODERN][:2])


def test_three_rooms_traditional():
    rooms = plan_layout(60, 30, 3, "traditional")
    assert labels(rooms) == ["Living Room", "Bedroom 1", "Kitchen"]
    assert [r.color for r in rooms] == list(PALETTES[Style.TRADITIONAL][:3])

    kitchen = rooms[2]
    assert kitchen.position[0] == pytest.approx(0)
    assert kitchen.position[2] < 0
    assert kitchen.size[0] == pytest.approx(30 * SCENE_SCALE * 0.8)
    assert kitchen.size[2] == pytest.approx(60 * SCENE_SCALE / 2)
    assert all(r.position[2] > 0 for r in rooms[:2])


def test_four_room_grid_reading_order():
    rooms = plan_layout(40, 40, 4, "luxury")
    assert labels(rooms) == ["Living Room", "Bedroom 1", "Kitchen", "Bedroom 2"]
    (lx, _, lz), (rx, _, rz), (kx, _, kz), (bx, _, bz) = [r.position for r in rooms]
    assert lx < 0 and lz > 0      # front-left
    assert rx > 0 and rz > 0      # front-right
    assert kx < 0 and kz < 0      # back-left
    assert bx > 0 and bz < 0      # back-right
    assert [r.color for r in rooms] == list(PALETTES[Style.LUXURY])


@pytest.mark.parametrize("count", [99, 5, 1, 0, -3, 2.5, 3.5, "3.9", "2.1", "", None, "abc"])
def test_other_counts_fall_back_to_grid(count):
    assert plan_layout(45, 35, count, "minimal") == plan_layout(45, 35, 4, "minimal")


def test_numeric_strings_are_accepted():
    assert plan_layout("50", "40", "3", "modern") == plan_layout(50, 40, 3, "modern")


@pytest.mark.parametrize("count,expected", [(2.0, 2), ("2.0", 2), (3.0, 3), ("3", 3)])
def test_whole_number_counts(count, expected):
    assert plan_layout(50, 40, count, "modern") == plan_layout(50, 40, expected, "modern")


@pytest.mark.parametrize("style", ["victorian", "", None, "Contemporary"])
def test_unknown_style_uses_modern_palette(style):
    expected = [r.color for r in plan_layout(50, 40, 4, "modern")]
    assert [r.color for r in plan_layout(50, 40, 4, style)] == expected


def test_style_is_case_insensitive():
    rooms = plan_layout(50, 40, 2, " Luxury ")
    assert rooms[0].color == PALETTES[Style.LUXURY][0]


@pytest.mark.parametrize("length,width", [(50, 40), (60, 30), (10, 200), (1, 1), (333.3, 17.25)])
@pytest.mark.parametrize("count", [2, 3, 4, 7])
def test_rooms_never_overlap(length, width, count):
    rooms = plan_layout(length, width, count, "modern")
    assert find_overlaps(rooms) == []


@pytest.mark.parametrize("count", [2, 3, 4])
def test_rooms_stay_inside_plot_footprint(count):
    rooms = plan_layout(70, 45, count, "modern")
    width, depth = scene_footprint(70, 45)
    for r in rooms:
        minx, minz, maxx, maxz = r.footprint().bounds
        assert minx >= -width / 2 - 1e-9 and maxx <= width / 2 + 1e-9
        assert minz >= -depth / 2 - 1e-9 and maxz <= depth / 2 + 1e-9


def test_layout_is_deterministic():
    assert plan_layout(52, 38, 3, "luxury") == plan_layout(52, 38, 3, "luxury")


def test_find_overlaps_detects_overlap():
    a = RoomVolume("A", (0.0, 0.0, 0.0), (2.0, ROOM_HEIGHT, 2.0), "#fff")
    b = RoomVolume("B", (1.0, 0.0, 0.0), (2.0, ROOM_HEIGHT, 2.0), "#fff")
    c = RoomVolume("C", (2.0, 0.0, 0.0), (2.0, ROOM_HEIGHT, 2.0), "#fff")
    assert find_overlaps([a, b, c]) == [("A", "B"), ("B", "C")]


def test_to_dict():
    room = plan_layout(50, 40, 2, "modern")[0]
    d = room.to_dict()
    assert d["label"] == "Living Room"
    assert d["position"] == [pytest.approx(-0.3), 0.0, 0.0]
    assert len(d["size"]) == 3
    assert d["color"] == "#3b82f6"


def test_degenerate_plot_does_not_raise():
    rooms = plan_layout(0, "", 3, "modern")
    assert len(rooms) == 3
    assert all(r.size[0] == 0 and r.size[2] == 0 for r in rooms)
