"""Year-by-year withdrawal rate table sampled from the curve."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Tuple

from .axis import AxisMapping
from .config import ScenarioConfig
from .interpolation import CurveInterpolator

logger = logging.getLogger(__name__)

RATE_TABLE_HEADER: Tuple[str, ...] = ("Year", "Plan Year", "Age", "Withdrawal Rate (%)")


class TableGenerationError(RuntimeError):
    """Raised when a year cannot be sampled from the curve."""


@dataclass(frozen=True)
class RateRow:
    year: int
    plan_year: int
    age: int
    rate_percent: str

    def as_tuple(self) -> Tuple[int, int, int, str]:
        return (self.year, self.plan_year, self.age, self.rate_percent)


def generate_rate_table(
    config: ScenarioConfig, axis: AxisMapping, interpolator: CurveInterpolator
) -> List[RateRow]:
    """Sample one rate per calendar year, ``min_year`` to ``max_year`` inclusive.

    The whole run fails with :class:`TableGenerationError` if any year falls
    outside the control points; a partial table is never returned.
    """

    rows: List[RateRow] = []
    for year in range(config.min_year, config.max_year + 1):
        x_pixel = axis.year_to_pixel(year)
        value = interpolator.value_at_x(x_pixel)
        if value is None:
            logger.error("No curve value for %d at x=%.3f", year, x_pixel)
            raise TableGenerationError(
                f"Year {year} (x={x_pixel:.2f}px) lies outside the curve's control points"
            )
        offset = year - config.min_year
        rows.append(
            RateRow(
                year=year,
                plan_year=offset + 1,
                age=config.current_age + offset,
                rate_percent=f"{value:.2f}",
            )
        )
    logger.info("Generated %d rate rows (%d-%d)", len(rows), config.min_year, config.max_year)
    return rows


__all__ = ["RATE_TABLE_HEADER", "RateRow", "TableGenerationError", "generate_rate_table"]
