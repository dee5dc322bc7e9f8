"""Plot metrics and design-request gating."""

import pytest

from errors import ValidationError
from services.plot_metrics import compute_metrics, check_design_request, to_number


@pytest.mark.parametrize("length,width,open_area", [
    (50, 40, 0),
    (50, 40, 1999.99),
    (10.5, 3.2, 1),
    (1, 1, 0.5),
    (200, 150, 29999),
])
def test_valid_plots(length, width, open_area):
    m = compute_metrics(length, width, open_area)
    assert m.is_valid
    assert m.total_area == pytest.approx(length * width)
    assert m.built_up_area == pytest.approx(m.total_area - open_area)
    assert m.built_up_area >= 0


@pytest.mark.parametrize("open_area", [2000, 2000.5, 5000])
def test_open_area_covering_plot_is_invalid(open_area):
    m = compute_metrics(50, 40, open_area)
    assert not m.is_valid


def test_open_percentage():
    m = compute_metrics(50, 40, 500)
    assert m.open_percentage == pytest.approx(25.0)


@pytest.mark.parametrize("length,width", [(0, 40), (50, 0), (0, 0), ("", ""), (None, None)])
def test_zero_area_has_zero_open_percentage(length, width):
    m = compute_metrics(length, width, 100)
    assert m.total_area == 0
    assert m.open_percentage == 0
    assert not m.is_valid


def test_zero_area_with_zero_open_area_is_not_generable():
    m = compute_metrics(0, 0, 0)
    assert m.built_up_area == 0
    assert m.open_percentage == 0
    assert not m.is_valid


@pytest.mark.parametrize("length,width", [(-50, -40), (-50, 40), (50, -40)])
def test_negative_sides_are_invalid(length, width):
    assert not compute_metrics(length, width, 0).is_valid


@pytest.mark.parametrize("length,width,open_area", [(1e200, 1e200, 0), (1e200, 1e200, 5), (1e300, 1e10, 0)])
def test_overflowing_area_is_zeroed(length, width, open_area):
    m = compute_metrics(length, width, open_area)
    assert m.total_area == 0
    assert m.built_up_area == 0
    assert m.open_percentage == 0
    assert not m.is_valid


@pytest.mark.parametrize("raw,expected", [
    ("50", 50.0),
    (" 12.5 ", 12.5),
    ("", 0.0),
    ("abc", 0.0),
    (None, 0.0),
    (float("nan"), 0.0),
    (float("inf"), 0.0),
    ("1e400", 0.0),
    (True, 0.0),
    (7, 7.0),
])
def test_to_number(raw, expected):
    assert to_number(raw) == expected


def test_form_strings_are_parsed():
    m = compute_metrics("50", "40", "")
    assert m.total_area == 2000
    assert m.open_area == 0
    assert m.is_valid


def test_negative_open_area_is_invalid():
    assert not compute_metrics(50, 40, -10).is_valid


def test_to_dict_uses_api_field_names():
    d = compute_metrics(50, 40, 400).to_dict()
    assert d == {
        "totalArea": 2000.0,
        "builtUpArea": 1600.0,
        "openArea": 400.0,
        "openPercentage": 20.0,
        "isValid": True,
    }


# ---- gating ----

def test_check_design_request_accepts_valid_plot():
    m = check_design_request(50, 40, 4, 1, "modern", 400)
    assert m.built_up_area == 1600


@pytest.mark.parametrize("args", [
    (None, 40, 4, 1, "modern"),
    (50, None, 4, 1, "modern"),
    (50, 40, None, 1, "modern"),
    (50, 40, 4, None, "modern"),
    (50, 40, 4, 1, ""),
    (50, 40, 4, 1, "   "),
])
def test_missing_parameters(args):
    with pytest.raises(ValidationError, match="Missing required parameters"):
        check_design_request(*args)


@pytest.mark.parametrize("args", [
    (0, 40, 4, 1, "modern"),
    (50, -1, 4, 1, "modern"),
    (50, 40, 0, 1, "modern"),
    (50, 40, 4, -2, "modern"),
])
def test_non_positive_values(args):
    with pytest.raises(ValidationError, match="Invalid dimensions"):
        check_design_request(*args)


def test_negative_open_area_rejected():
    with pytest.raises(ValidationError, match="cannot be negative"):
        check_design_request(50, 40, 4, 1, "modern", -5)


@pytest.mark.parametrize("open_area", [2000, 2500])
def test_open_area_at_or_above_total_rejected(open_area):
    with pytest.raises(ValidationError, match="equal to or greater"):
        check_design_request(50, 40, 4, 1, "modern", open_area)


def test_built_up_area_floor_is_absolute():
    # 20x20 = 400 sq ft < 500 regardless of room count
    with pytest.raises(ValidationError, match="too small"):
        check_design_request(20, 20, 1, 1, "modern")
    # exactly at the floor passes
    assert check_design_request(25, 20, 9, 1, "modern").built_up_area == 500


def test_open_area_can_push_below_floor():
    with pytest.raises(ValidationError) as exc:
        check_design_request(30, 20, 2, 1, "modern", 150)
    assert exc.value.status_code == 400
