"""Editor state owned by one window or one CLI run."""
from __future__ import annotations

import logging
from typing import List, Optional, Tuple

from .axis import AxisMapping, DisplayMode, Surface
from .config import (
    DEFAULT_INPUTS,
    ScenarioConfig,
    ScenarioError,
    ScenarioInputs,
    derive_config,
)
from .curve import CurveModel
from .interpolation import CurveInterpolator
from .table import RateRow, generate_rate_table

logger = logging.getLogger(__name__)


class EditorSession:
    """Scenario, axis mapping, curve and display mode for one drawing surface.

    Submitting a scenario replaces all of them at once; an edited curve is
    discarded, never merged into the new scenario.
    """

    def __init__(self, surface: Optional[Surface] = None, config: Optional[ScenarioConfig] = None) -> None:
        self.surface = surface or Surface()
        self.display_mode = DisplayMode.CALENDAR_YEAR
        self.config: ScenarioConfig
        self.axis: AxisMapping
        self.curve: CurveModel
        self.reset_scenario(config or derive_config(DEFAULT_INPUTS))

    def reset_scenario(self, config: ScenarioConfig) -> None:
        axis = AxisMapping(config, self.surface)
        curve = CurveModel.initial(axis)
        self.config, self.axis, self.curve = config, axis, curve
        logger.info(
            "Scenario reset: age %d, %d-%d, reference %.2f%%",
            config.current_age,
            config.min_year,
            config.max_year,
            config.reference_withdraw_percent,
        )

    def submit(self, inputs: ScenarioInputs) -> ScenarioConfig:
        """Derive a configuration from form inputs and reset to it.

        Invalid inputs raise :class:`ScenarioError` and leave the current
        scenario and curve untouched.
        """

        try:
            config = derive_config(inputs)
        except ScenarioError as exc:
            logger.warning("Rejected scenario %s: %s", inputs, exc)
            raise
        self.reset_scenario(config)
        return config

    def set_display_mode(self, mode: DisplayMode) -> None:
        self.display_mode = DisplayMode(mode)

    # ---------- pointer input ----------
    def press(self, x_pixel: float, y_pixel: float) -> Optional[int]:
        return self.curve.begin_drag(x_pixel, y_pixel)

    def move(self, x_pixel: float, y_pixel: float) -> bool:
        return self.curve.drag_to(x_pixel, y_pixel)

    def release(self) -> None:
        self.curve.end_drag()

    # ---------- views for renderers ----------
    @property
    def reference_pixel_y(self) -> float:
        return self.axis.percent_to_vertical_pixel(self.config.reference_withdraw_percent)

    def interpolator(self) -> CurveInterpolator:
        return CurveInterpolator(self.curve.snapshot(), self.axis)

    def axis_labels(self) -> List[Tuple[float, int]]:
        return [
            (p.x, self.axis.horizontal_pixel_to_label(p.x, self.display_mode, p.slot.value))
            for p in self.curve.points()
        ]

    def point_labels(self) -> List[Tuple[float, float, str]]:
        snapshot = self.curve.snapshot()
        percents = self.interpolator().point_percents()
        return [(x, y, f"{percent:.2f}") for (x, y), percent in zip(snapshot, percents)]

    def rate_table(self) -> List[RateRow]:
        return generate_rate_table(self.config, self.axis, self.interpolator())


__all__ = ["EditorSession"]
