import pytest

from withdrawcurve.interpolation import CurveInterpolator
from withdrawcurve.table import RATE_TABLE_HEADER, RateRow, TableGenerationError, generate_rate_table

from conftest import AXIS_Y


def test_untouched_curve_gives_reference_rate_every_year(short_session):
    rows = short_session.rate_table()

    assert [r.year for r in rows] == list(range(2025, 2031))
    assert [r.plan_year for r in rows] == [1, 2, 3, 4, 5, 6]
    assert [r.age for r in rows] == [60, 61, 62, 63, 64, 65]
    assert all(r.rate_percent == "4.00" for r in rows)


def test_first_year_uses_start_point_exactly(short_session):
    short_session.press(25, 195)
    short_session.move(25, 100)
    short_session.release()

    first = short_session.rate_table()[0]
    expected = short_session.axis.vertical_pixel_to_percent(100)
    assert first.rate_percent == f"{expected:.2f}"
    assert short_session.interpolator().value_at_x(short_session.axis.year_to_pixel(2025)) == expected


def test_rates_follow_linear_segments(short_session):
    # Middle point (x=400) pulled to the axis; 2027 sits at x=325 on the 150..400 segment.
    short_session.press(400, 195)
    short_session.move(400, AXIS_Y)
    short_session.release()

    rates = {r.year: r.rate_percent for r in short_session.rate_table()}
    assert rates[2025] == "4.00"
    assert rates[2027] == "1.20"
    assert rates[2030] == "4.00"


def test_gap_in_curve_aborts_generation(short_config, axis):
    interp = CurveInterpolator([(100.0, 195.0), (700.0, 195.0)], axis)

    with pytest.raises(TableGenerationError, match="2025"):
        generate_rate_table(short_config, axis, interp)


def test_row_tuple_order_matches_header():
    row = RateRow(year=2025, plan_year=1, age=60, rate_percent="4.00")

    assert len(row.as_tuple()) == len(RATE_TABLE_HEADER)
    assert row.as_tuple() == (2025, 1, 60, "4.00")
