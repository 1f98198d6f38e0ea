from __future__ import annotations

import matplotlib

matplotlib.use("Agg")

import pytest

from withdrawcurve.axis import AxisMapping, Surface
from withdrawcurve.config import ScenarioInputs, derive_config
from withdrawcurve.session import EditorSession

# 800x400 surface: axis line at y=325, default points at x=25/150/400/650/775.
AXIS_Y = 325.0
DEFAULT_XS = [25.0, 150.0, 400.0, 650.0, 775.0]


@pytest.fixture()
def short_config():
    return derive_config(
        ScenarioInputs(
            current_age=60,
            start_year=2025,
            plan_duration_years=5,
            reference_withdraw_percent=4.0,
        )
    )


@pytest.fixture()
def axis(short_config) -> AxisMapping:
    return AxisMapping(short_config, Surface(800, 400))


@pytest.fixture()
def session() -> EditorSession:
    return EditorSession(Surface(800, 400))


@pytest.fixture()
def short_session(short_config) -> EditorSession:
    return EditorSession(Surface(800, 400), short_config)
