"""Input parsing helpers for withdrawcurve."""
from __future__ import annotations

from typing import List, NamedTuple, Optional, Union

from .axis import DisplayMode
from .config import ScenarioError, ScenarioInputs
from .session import EditorSession

Number = Union[str, int, float]


class PointEdit(NamedTuple):
    index: int
    percent: float
    year: Optional[int] = None


def _to_int(label: str, value: Number) -> int:
    try:
        return int(str(value).strip())
    except ValueError:
        raise ScenarioError(f"{label} must be a whole number (got {value!r})") from None


def _to_float(label: str, value: Number) -> float:
    try:
        return float(str(value).strip())
    except ValueError:
        raise ScenarioError(f"{label} must be a number (got {value!r})") from None


def parse_scenario(
    current_age: Number, start_year: Number, plan_duration: Number, reference_rate: Number
) -> ScenarioInputs:
    """Convert raw form values into typed scenario inputs."""

    return ScenarioInputs(
        current_age=_to_int("Current age", current_age),
        start_year=_to_int("Start year", start_year),
        plan_duration_years=_to_int("Plan duration", plan_duration),
        reference_withdraw_percent=_to_float("Reference rate", reference_rate),
    )


def parse_display_mode(text: str) -> DisplayMode:
    normalized = (text or "").strip().lower()
    try:
        return DisplayMode(normalized)
    except ValueError:
        choices = "/".join(m.value for m in DisplayMode)
        raise ValueError(f"Unknown display mode '{text}' (expected {choices})") from None


def parse_point_edits(text: str) -> List[PointEdit]:
    """Parse semicolon-separated "index:percent[@year]" edits."""

    if not text.strip():
        return []
    edits: List[PointEdit] = []
    for part in (p.strip() for p in text.split(";")):
        if not part:
            continue
        if ":" not in part:
            raise ValueError(f"Point edit '{part}' must look like 'index:percent[@year]'")
        index_s, rest = part.split(":", 1)
        year: Optional[int] = None
        if "@" in rest:
            rest, year_s = rest.split("@", 1)
            year = int(year_s)
        index = int(index_s)
        if not 0 <= index <= 4:
            raise ValueError(f"Point index {index} must be between 0 and 4")
        if year is not None and index in (0, 4):
            raise ValueError(f"Point {index} is an endpoint and cannot move to year {year}")
        edits.append(PointEdit(index, float(rest), year))
    return edits


def apply_point_edits(session: EditorSession, edits: List[PointEdit]) -> None:
    """Replay each edit as a drag gesture so the usual constraints apply."""

    axis = session.axis
    for edit in edits:
        x, y = session.curve.snapshot()[edit.index]
        picked = session.press(x, y)
        if picked != edit.index:
            # Another point sits within pick range; the gesture would grab it.
            session.release()
            raise ValueError(f"Point {edit.index} cannot be picked at ({x:.1f}, {y:.1f})")
        target_x = axis.year_to_pixel(edit.year) if edit.year is not None else x
        session.move(target_x, axis.percent_to_vertical_pixel(edit.percent))
        session.release()


__all__ = [
    "PointEdit",
    "apply_point_edits",
    "parse_display_mode",
    "parse_point_edits",
    "parse_scenario",
]
