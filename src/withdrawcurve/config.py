"""Scenario configuration and layout constants for withdrawcurve."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict

MIN_WITHDRAW_PERCENT = 0.00
MAX_WITHDRAW_PERCENT = 10.00

# Layout, in surface pixels.
EDGE_MARGIN_PIXELS = 25
MIN_POINT_SEPARATION_PIXELS = 50
AXIS_BOTTOM_MARGIN_PIXELS = 75
PICK_RADIUS_PIXELS = 10
POINT_RADIUS_PIXELS = 5

DISPLAY_CURVE_STEP = 0.02

DEFAULT_SURFACE_WIDTH = 800
DEFAULT_SURFACE_HEIGHT = 400

COLORS: Dict[str, str] = {
    "GRAY": "gray",
    "LIGHT_BLUE": "lightblue",
    "BLACK": "black",
}


class ScenarioError(ValueError):
    """Raised when scenario inputs cannot produce a valid configuration."""


@dataclass(frozen=True)
class ScenarioInputs:
    """Raw values supplied by the settings form on every submit."""

    current_age: int
    start_year: int
    plan_duration_years: int
    reference_withdraw_percent: float


DEFAULT_INPUTS = ScenarioInputs(
    current_age=60,
    start_year=2025,
    plan_duration_years=30,
    reference_withdraw_percent=4.00,
)


@dataclass(frozen=True)
class ScenarioConfig:
    """Scenario bounds; construction fails unless the plan spans at least a year
    and the reference rate lies in ``(min_withdraw_percent, max_withdraw_percent]``."""

    current_age: int
    start_year: int
    plan_duration_years: int
    reference_withdraw_percent: float
    min_withdraw_percent: float = MIN_WITHDRAW_PERCENT
    max_withdraw_percent: float = MAX_WITHDRAW_PERCENT
    edge_margin_pixels: int = EDGE_MARGIN_PIXELS
    min_point_separation_pixels: int = MIN_POINT_SEPARATION_PIXELS

    def __post_init__(self) -> None:
        if self.plan_duration_years <= 0:
            raise ScenarioError(
                f"Plan duration must be at least one year (got {self.plan_duration_years})"
            )
        low, high = self.min_withdraw_percent, self.max_withdraw_percent
        if not low < self.reference_withdraw_percent <= high:
            raise ScenarioError(
                f"Reference rate {self.reference_withdraw_percent:.2f}% must be above"
                f" {low:.2f}% and at most {high:.2f}%"
            )

    @property
    def min_year(self) -> int:
        return self.start_year

    @property
    def max_year(self) -> int:
        return self.start_year + self.plan_duration_years

    @property
    def plan_end_age(self) -> int:
        return self.current_age + self.plan_duration_years


def derive_config(inputs: ScenarioInputs) -> ScenarioConfig:
    """Build a fresh, immutable configuration from form inputs."""

    return ScenarioConfig(
        current_age=int(inputs.current_age),
        start_year=int(inputs.start_year),
        plan_duration_years=int(inputs.plan_duration_years),
        reference_withdraw_percent=float(inputs.reference_withdraw_percent),
    )


__all__ = [
    "AXIS_BOTTOM_MARGIN_PIXELS",
    "COLORS",
    "DEFAULT_INPUTS",
    "DEFAULT_SURFACE_HEIGHT",
    "DEFAULT_SURFACE_WIDTH",
    "DISPLAY_CURVE_STEP",
    "EDGE_MARGIN_PIXELS",
    "MAX_WITHDRAW_PERCENT",
    "MIN_POINT_SEPARATION_PIXELS",
    "MIN_WITHDRAW_PERCENT",
    "PICK_RADIUS_PIXELS",
    "POINT_RADIUS_PIXELS",
    "ScenarioConfig",
    "ScenarioError",
    "ScenarioInputs",
    "derive_config",
]
