import pytest

from withdrawcurve.axis import DisplayMode
from withdrawcurve.config import ScenarioError, ScenarioInputs
from withdrawcurve.parsing import (
    PointEdit,
    apply_point_edits,
    parse_display_mode,
    parse_point_edits,
    parse_scenario,
)

from conftest import AXIS_Y


def test_parse_scenario_from_text():
    inputs = parse_scenario(" 60", "2025", "30 ", "4.5")

    assert inputs == ScenarioInputs(60, 2025, 30, 4.5)


@pytest.mark.parametrize(
    "values",
    [
        ("sixty", "2025", "30", "4"),
        ("60", "2025.5", "30", "4"),
        ("60", "2025", "30", ""),
    ],
)
def test_parse_scenario_rejects_non_numeric(values):
    with pytest.raises(ScenarioError):
        parse_scenario(*values)


@pytest.mark.parametrize("text, mode", [("year", DisplayMode.CALENDAR_YEAR), (" AGE ", DisplayMode.AGE), ("plan", DisplayMode.PLAN_YEAR)])
def test_parse_display_mode(text, mode):
    assert parse_display_mode(text) is mode


def test_parse_display_mode_rejects_unknown():
    with pytest.raises(ValueError, match="year/age/plan"):
        parse_display_mode("decade")


def test_parse_point_edits():
    assert parse_point_edits("2:3.5@2040; 4:2;") == [
        PointEdit(2, 3.5, 2040),
        PointEdit(4, 2.0, None),
    ]
    assert parse_point_edits("  ") == []


@pytest.mark.parametrize("text", ["2=3", "7:1", "a:1", "1:x", "0:3@2030", "4:3@2050"])
def test_parse_point_edits_rejects_malformed(text):
    with pytest.raises(ValueError):
        parse_point_edits(text)


def test_apply_point_edits_uses_drag_constraints(session):
    # 2050 maps to x=650, which is mid-3's own position; mid-2 stops 50px short.
    apply_point_edits(session, [PointEdit(2, 0.0, 2050), PointEdit(4, 8.0)])

    snap = session.curve.snapshot()
    assert snap[2] == pytest.approx((600.0, AXIS_Y))
    assert snap[4] == pytest.approx((775.0, session.axis.percent_to_vertical_pixel(8.0)))
    assert session.curve.dragging_index is None


def test_endpoint_edit_cannot_name_a_year():
    with pytest.raises(ValueError, match="endpoint"):
        parse_point_edits("1:2@2030; 4:3@2050")
