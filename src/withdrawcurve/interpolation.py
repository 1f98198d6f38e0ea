"""Display-curve and value-sampling views over a curve snapshot."""
from __future__ import annotations

from typing import List, Optional, Sequence, Tuple

import numpy as np

from .axis import AxisMapping
from .config import DISPLAY_CURVE_STEP
from .curve import PointXY

# Curve parameters per segment: t = 0, 0.02, ..., 0.98.
STEPS_PER_SEGMENT = int(round(1 / DISPLAY_CURVE_STEP))


def _segment_quads(points: Sequence[PointXY]) -> List[Tuple[PointXY, PointXY, PointXY, PointXY]]:
    """Return (p0, p1, p2, p3) for every segment p1->p2, duplicating the open ends."""

    last = len(points) - 1
    quads = []
    for i in range(last):
        p0 = points[i - 1] if i > 0 else points[i]
        p3 = points[i + 2] if i + 2 <= last else points[i + 1]
        quads.append((p0, points[i], points[i + 1], p3))
    return quads


def _blend(c0: float, c1: float, c2: float, c3: float, t: float) -> float:
    return 0.5 * (
        (2 * c1)
        + (-c0 + c2) * t
        + (2 * c0 - 5 * c1 + 4 * c2 - c3) * t * t
        + (-c0 + 3 * c1 - 3 * c2 + c3) * t * t * t
    )


def display_curve_py(points: Sequence[PointXY]) -> List[PointXY]:
    """Pure-Python Catmull-Rom polyline through ``points``."""

    out: List[PointXY] = []
    for p0, p1, p2, p3 in _segment_quads(points):
        for k in range(STEPS_PER_SEGMENT):
            t = k * DISPLAY_CURVE_STEP
            out.append(
                (
                    _blend(p0[0], p1[0], p2[0], p3[0], t),
                    _blend(p0[1], p1[1], p2[1], p3[1], t),
                )
            )
    return out


def display_curve_np(points: Sequence[PointXY]) -> List[PointXY]:
    """Vectorized Catmull-Rom polyline; same samples as ``display_curve_py``."""

    quads = _segment_quads(points)
    if not quads:
        return []
    ctrl = np.asarray(quads, dtype=np.float64)  # (segments, 4, 2)
    t = np.arange(STEPS_PER_SEGMENT, dtype=np.float64) * DISPLAY_CURVE_STEP
    basis = 0.5 * np.stack(
        [
            -t + 2 * t**2 - t**3,
            2 - 5 * t**2 + 3 * t**3,
            t + 4 * t**2 - 3 * t**3,
            -(t**2) + t**3,
        ],
        axis=1,
    )  # (steps, 4)
    samples = np.einsum("sk,nkc->nsc", basis, ctrl).reshape(-1, 2)
    return [(float(x), float(y)) for x, y in samples]


class CurveInterpolator:
    """Read-only evaluation of one snapshot of the control points.

    The display curve is a spline and the value sampler is piecewise linear,
    so the two only meet at the control points themselves.
    """

    def __init__(self, points: Sequence[PointXY], axis: AxisMapping) -> None:
        if len(points) < 2:
            raise ValueError("Interpolation needs at least two control points")
        self._points: Tuple[PointXY, ...] = tuple((float(x), float(y)) for x, y in points)
        self.axis = axis

    def sample_display_curve(self, use_numpy: bool = True) -> List[PointXY]:
        if use_numpy:
            return display_curve_np(self._points)
        return display_curve_py(self._points)

    def value_at_x(self, x_pixel: float) -> Optional[float]:
        """Withdrawal percent at ``x_pixel``, or ``None`` outside the points."""

        pts = self._points
        for (x1, y1), (x2, y2) in zip(pts, pts[1:]):
            if x1 <= x_pixel <= x2:
                t = (x_pixel - x1) / (x2 - x1)
                y = y1 + t * (y2 - y1)
                return self.axis.vertical_pixel_to_percent(y)
        return None

    def point_percents(self) -> List[float]:
        return [self.axis.vertical_pixel_to_percent(y) for _, y in self._points]


__all__ = [
    "CurveInterpolator",
    "STEPS_PER_SEGMENT",
    "display_curve_np",
    "display_curve_py",
]
