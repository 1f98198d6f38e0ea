"""Draw the curve editor onto a matplotlib Axes in surface pixel coordinates."""
from __future__ import annotations

from matplotlib.axes import Axes
from matplotlib.patches import Circle

from .config import COLORS, POINT_RADIUS_PIXELS
from .session import EditorSession

TICK_HALF_HEIGHT = 5
LABEL_FONT_PIXELS = 16


def setup_surface_axes(ax: Axes, session: EditorSession) -> None:
    """Make data coordinates equal surface pixels, origin top-left."""

    ax.cla()
    ax.set_xlim(0, session.surface.width)
    ax.set_ylim(session.surface.height, 0)
    ax.set_axis_off()


def draw_x_axis(ax: Axes, session: EditorSession) -> None:
    axis_y = session.axis.axis_pixel_y
    ax.plot([0, session.surface.width], [axis_y, axis_y], color=COLORS["GRAY"], linewidth=1)
    for x, label in session.axis_labels():
        ax.text(x - 10, axis_y + 20, f"{label}", color=COLORS["BLACK"], va="baseline")
        ax.plot(
            [x, x],
            [axis_y - TICK_HALF_HEIGHT, axis_y + TICK_HALF_HEIGHT],
            color=COLORS["GRAY"],
            linewidth=1,
        )


def draw_reference_line(ax: Axes, session: EditorSession) -> None:
    y = session.reference_pixel_y
    ax.plot([0, session.surface.width], [y, y], color=COLORS["LIGHT_BLUE"], linewidth=1)


def draw_withdraw_curve(ax: Axes, session: EditorSession) -> None:
    snapshot = session.curve.snapshot()
    samples = [snapshot[0]] + session.interpolator().sample_display_curve()
    xs = [x for x, _ in samples]
    ys = [y for _, y in samples]
    ax.plot(xs, ys, color=COLORS["BLACK"], linewidth=1)


def label_font_points(ax: Axes) -> float:
    """Point size that renders LABEL_FONT_PIXELS tall at the figure's dpi."""

    return LABEL_FONT_PIXELS * 72 / ax.figure.dpi


def plot_points(ax: Axes, session: EditorSession) -> None:
    for x, y, text in session.point_labels():
        ax.add_patch(Circle((x, y), POINT_RADIUS_PIXELS, color=COLORS["BLACK"]))
        ax.text(
            x - 20,
            y - 10,
            text,
            color=COLORS["BLACK"],
            fontsize=label_font_points(ax),
            va="baseline",
        )


def draw_editor(ax: Axes, session: EditorSession) -> None:
    setup_surface_axes(ax, session)
    draw_x_axis(ax, session)
    draw_reference_line(ax, session)
    draw_withdraw_curve(ax, session)
    plot_points(ax, session)


__all__ = ["draw_editor", "setup_surface_axes"]
