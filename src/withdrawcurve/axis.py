"""Mappings between surface pixels and plan years, ages and withdrawal percent."""
from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

from .config import (
    AXIS_BOTTOM_MARGIN_PIXELS,
    DEFAULT_SURFACE_HEIGHT,
    DEFAULT_SURFACE_WIDTH,
    ScenarioConfig,
)

# Slot values of the two fixed endpoints (see ``curve.Slot``).
START_SLOT = "initial"
END_SLOT = "final"


class DisplayMode(str, Enum):
    CALENDAR_YEAR = "year"
    AGE = "age"
    PLAN_YEAR = "plan"


@dataclass(frozen=True)
class Surface:
    """Pixel size of the drawing surface."""

    width: int = DEFAULT_SURFACE_WIDTH
    height: int = DEFAULT_SURFACE_HEIGHT

    @property
    def axis_pixel_y(self) -> float:
        return float(self.height - AXIS_BOTTOM_MARGIN_PIXELS)


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


class AxisMapping:
    """Pure coordinate conversions for one scenario on one surface."""

    def __init__(self, config: ScenarioConfig, surface: Surface) -> None:
        if surface.axis_pixel_y <= 0:
            raise ValueError(
                f"Surface height {surface.height} leaves no room above the axis"
                f" (bottom margin is {AXIS_BOTTOM_MARGIN_PIXELS}px)"
            )
        if surface.width <= 2 * config.edge_margin_pixels:
            raise ValueError(f"Surface width {surface.width} is narrower than its margins")
        self.config = config
        self.surface = surface

    @property
    def axis_pixel_y(self) -> float:
        return self.surface.axis_pixel_y

    @property
    def width(self) -> int:
        return self.surface.width

    @property
    def drawable_width(self) -> float:
        return float(self.surface.width - 2 * self.config.edge_margin_pixels)

    def vertical_pixel_to_percent(self, y_pixel: float) -> float:
        """Convert a vertical position to a withdrawal percent (no clamping)."""

        cfg = self.config
        axis_y = self.axis_pixel_y
        span = cfg.max_withdraw_percent - cfg.min_withdraw_percent
        return cfg.min_withdraw_percent + ((axis_y - y_pixel) / axis_y) * span

    def percent_to_vertical_pixel(self, percent: float) -> float:
        cfg = self.config
        axis_y = self.axis_pixel_y
        span = cfg.max_withdraw_percent - cfg.min_withdraw_percent
        return axis_y - ((percent - cfg.min_withdraw_percent) / span) * axis_y

    def label_range(self, mode: DisplayMode) -> Tuple[int, int]:
        """Return ``(base, span)`` of the horizontal axis for ``mode``."""

        cfg = self.config
        if mode is DisplayMode.CALENDAR_YEAR:
            return cfg.min_year, cfg.max_year - cfg.min_year
        if mode is DisplayMode.AGE:
            return cfg.current_age, cfg.plan_end_age - cfg.current_age
        if mode is DisplayMode.PLAN_YEAR:
            return 1, cfg.max_year - cfg.min_year
        raise ValueError(f"Unknown display mode {mode!r}")

    def horizontal_pixel_to_label(
        self, x_pixel: float, mode: DisplayMode, slot: Optional[str] = None
    ) -> int:
        """Label shown under ``x_pixel``; endpoints get their exact bounds."""

        base, span = self.label_range(mode)
        if slot == START_SLOT:
            return base
        if slot == END_SLOT:
            return base + span
        fraction = (x_pixel - self.config.edge_margin_pixels) / self.drawable_width
        return base + _round_half_up(fraction * span)

    def year_to_pixel(self, year: int) -> float:
        cfg = self.config
        fraction = (year - cfg.min_year) / (cfg.max_year - cfg.min_year)
        return cfg.edge_margin_pixels + fraction * self.drawable_width


__all__ = ["AxisMapping", "DisplayMode", "END_SLOT", "START_SLOT", "Surface"]
