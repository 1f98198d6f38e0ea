import pytest

from withdrawcurve.axis import DisplayMode
from withdrawcurve.config import ScenarioConfig, ScenarioError, ScenarioInputs

from conftest import DEFAULT_XS


def test_starts_with_default_scenario(session):
    cfg = session.config

    assert (cfg.current_age, cfg.min_year, cfg.max_year) == (60, 2025, 2055)
    assert cfg.reference_withdraw_percent == 4.0
    assert session.display_mode is DisplayMode.CALENDAR_YEAR
    assert [x for x, _ in session.curve.snapshot()] == pytest.approx(DEFAULT_XS)


def test_submit_replaces_scenario_and_discards_edits(session):
    session.press(400, 195)
    session.move(300, 50)
    session.release()

    cfg = session.submit(ScenarioInputs(50, 2030, 20, 5.0))

    assert session.config is cfg
    assert session.axis.config is cfg
    assert cfg.max_year == 2050
    assert session.curve.snapshot()[2] == pytest.approx((400, 162.5))
    assert session.curve.dragging_index is None


def test_rejected_submit_keeps_previous_state(session):
    session.press(400, 195)
    session.move(300, 50)
    session.release()
    before_config = session.config
    before_points = session.curve.snapshot()

    with pytest.raises(ScenarioError):
        session.submit(ScenarioInputs(50, 2030, 20, 0.0))

    assert session.config is before_config
    assert session.curve.snapshot() == before_points


def test_move_without_press_changes_nothing(session):
    before = session.curve.snapshot()

    assert session.move(400, 10) is False
    assert session.curve.snapshot() == before


@pytest.mark.parametrize(
    "mode, expected",
    [
        (DisplayMode.CALENDAR_YEAR, [2025, 2030, 2040, 2050, 2055]),
        (DisplayMode.AGE, [60, 65, 75, 85, 90]),
        (DisplayMode.PLAN_YEAR, [1, 6, 16, 26, 31]),
    ],
)
def test_axis_labels_follow_display_mode(session, mode, expected):
    before = session.curve.snapshot()
    session.set_display_mode(mode)

    assert [label for _, label in session.axis_labels()] == expected
    assert session.curve.snapshot() == before


def test_display_mode_accepts_raw_value(session):
    session.set_display_mode("age")

    assert session.display_mode is DisplayMode.AGE


def test_point_labels_show_two_decimals(session):
    session.press(775, 195)
    session.move(775, 0)
    session.release()

    labels = session.point_labels()
    assert [text for _, _, text in labels] == ["4.00", "4.00", "4.00", "4.00", "10.00"]
    assert labels[-1][:2] == (775, 0)


def test_reference_line_position(session):
    assert session.reference_pixel_y == pytest.approx(195.0)


def test_invalid_direct_config_keeps_previous_state(session):
    session.press(400, 195)
    session.move(300, 50)
    session.release()
    before_config = session.config
    before_points = session.curve.snapshot()

    with pytest.raises(ScenarioError):
        session.reset_scenario(ScenarioConfig(60, 2025, 0, 0.0))

    assert session.config is before_config
    assert session.curve.snapshot() == before_points
    assert len(session.rate_table()) == 31


def test_point_labels_match_interpolator_percents(session):
    session.press(400, 195)
    session.move(400, 100)
    session.release()

    percents = session.interpolator().point_percents()
    assert [text for _, _, text in session.point_labels()] == [f"{p:.2f}" for p in percents]
