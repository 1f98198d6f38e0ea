"""Control points of the withdrawal curve and their drag constraints."""
from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from enum import Enum
from typing import List, Optional, Sequence, Tuple

from .axis import END_SLOT, START_SLOT, AxisMapping
from .config import PICK_RADIUS_PIXELS

logger = logging.getLogger(__name__)

PointXY = Tuple[float, float]


class Slot(str, Enum):
    START = START_SLOT
    MID_1 = "mid-1"
    MID_2 = "mid-2"
    MID_3 = "mid-3"
    END = END_SLOT

    @property
    def is_endpoint(self) -> bool:
        return self in (Slot.START, Slot.END)


_SLOT_ORDER: Tuple[Slot, ...] = (Slot.START, Slot.MID_1, Slot.MID_2, Slot.MID_3, Slot.END)


@dataclass(frozen=True)
class ControlPoint:
    slot: Slot
    x: float
    y: float


def default_point_xs(width: float, edge_margin: float) -> List[float]:
    mid = width / 2
    return [
        edge_margin,
        edge_margin + (mid - edge_margin) / 3,
        mid,
        mid + (width - edge_margin - mid) * 2 / 3,
        width - edge_margin,
    ]


class CurveModel:
    """The five draggable control points of one scenario.

    Points stay in slot order with strictly increasing x. Interior points keep
    at least ``min_point_separation_pixels`` from both neighbors; endpoints
    only move vertically. No point is ever dragged below the axis line.
    """

    def __init__(self, axis: AxisMapping, points: Sequence[ControlPoint]) -> None:
        if [p.slot for p in points] != list(_SLOT_ORDER):
            raise ValueError("A curve needs exactly one point per slot, in slot order")
        self.axis = axis
        self._points: List[ControlPoint] = list(points)
        self.dragging_index: Optional[int] = None

    @classmethod
    def initial(cls, axis: AxisMapping) -> "CurveModel":
        """Five evenly spread points, all at the reference withdrawal percent."""

        cfg = axis.config
        xs = default_point_xs(axis.width, cfg.edge_margin_pixels)
        separation = cfg.min_point_separation_pixels
        for left, right in zip(xs, xs[1:]):
            if right - left < separation:
                raise ValueError(
                    f"Surface width {axis.width} is too narrow for a {separation}px"
                    " minimum point separation"
                )
        y = axis.percent_to_vertical_pixel(cfg.reference_withdraw_percent)
        return cls(axis, [ControlPoint(slot, x, y) for slot, x in zip(_SLOT_ORDER, xs)])

    def points(self) -> Tuple[ControlPoint, ...]:
        return tuple(self._points)

    def snapshot(self) -> Tuple[PointXY, ...]:
        return tuple((p.x, p.y) for p in self._points)

    def begin_drag(self, x_pixel: float, y_pixel: float) -> Optional[int]:
        self.dragging_index = None
        for index, point in enumerate(self._points):
            if (
                abs(point.x - x_pixel) < PICK_RADIUS_PIXELS
                and abs(point.y - y_pixel) < PICK_RADIUS_PIXELS
            ):
                self.dragging_index = index
                logger.debug("Picked %s at (%.1f, %.1f)", point.slot.value, point.x, point.y)
                break
        return self.dragging_index

    def drag_to(self, x_pixel: float, y_pixel: float) -> bool:
        """Move the dragged point toward the cursor; False when nothing is dragged."""

        index = self.dragging_index
        if index is None:
            return False
        point = self._points[index]
        new_x = point.x
        if not point.slot.is_endpoint:
            separation = self.axis.config.min_point_separation_pixels
            min_x = self._points[index - 1].x + separation
            max_x = self._points[index + 1].x - separation
            new_x = max(min_x, min(max_x, x_pixel))
        new_y = min(y_pixel, self.axis.axis_pixel_y)
        self._points[index] = replace(point, x=new_x, y=new_y)
        return True

    def end_drag(self) -> None:
        self.dragging_index = None


__all__ = ["ControlPoint", "CurveModel", "PointXY", "Slot", "default_point_xs"]
