"""Command-line interface for withdrawcurve."""
from __future__ import annotations

import argparse
import logging
import sys

import matplotlib.pyplot as plt

from .axis import Surface
from .config import (
    DEFAULT_INPUTS,
    DEFAULT_SURFACE_HEIGHT,
    DEFAULT_SURFACE_WIDTH,
    ScenarioError,
)
from .logging_config import setup_logging
from .parsing import apply_point_edits, parse_display_mode, parse_point_edits, parse_scenario
from .render import draw_editor
from .reporting import export_csv, format_rate_table
from .session import EditorSession
from .table import TableGenerationError


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="withdrawcurve")
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument("--cli", action="store_true", help="Run in CLI mode")
    mode.add_argument("--gui", action="store_true", help="Run GUI")
    parser.add_argument("--current-age", default=str(DEFAULT_INPUTS.current_age))
    parser.add_argument("--start-year", default=str(DEFAULT_INPUTS.start_year))
    parser.add_argument(
        "--duration",
        default=str(DEFAULT_INPUTS.plan_duration_years),
        help="Plan duration in years",
    )
    parser.add_argument(
        "--reference-rate",
        default=f"{DEFAULT_INPUTS.reference_withdraw_percent:.2f}",
        help="Reference withdrawal rate in % (all points start here)",
    )
    parser.add_argument(
        "--mode",
        default="year",
        help="Axis labels for --plot: year, age or plan",
    )
    parser.add_argument(
        "--points",
        default="",
        help="Semicolon-separated point edits 'index:percent[@year]' (e.g., '2:3.5@2040;4:2')",
    )
    parser.add_argument("--csv", default="", help="Write the rate table to this CSV path")
    parser.add_argument("--plot", action="store_true", help="Show the edited curve (CLI)")
    parser.add_argument("--width", type=int, default=DEFAULT_SURFACE_WIDTH, help="Surface width in px")
    parser.add_argument("--height", type=int, default=DEFAULT_SURFACE_HEIGHT, help="Surface height in px")
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="WARNING",
    )
    return parser


def run_cli(args: argparse.Namespace) -> int:
    setup_logging(getattr(logging, args.log_level))
    parser = build_parser()

    try:
        inputs = parse_scenario(args.current_age, args.start_year, args.duration, args.reference_rate)
        display_mode = parse_display_mode(args.mode)
        edits = parse_point_edits(args.points)
    except ValueError as exc:
        parser.error(str(exc))

    try:
        session = EditorSession(Surface(args.width, args.height))
        session.submit(inputs)
        apply_point_edits(session, edits)
    except ScenarioError as exc:
        parser.error(str(exc))
    except ValueError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    session.set_display_mode(display_mode)

    try:
        rows = session.rate_table()
    except TableGenerationError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    cfg = session.config
    print(format_rate_table(rows, f"WITHDRAWAL RATES ({cfg.min_year}-{cfg.max_year})"), end="")

    if args.csv:
        export_csv(args.csv, rows)
        print(f"\nCSV exported to {args.csv}")

    if args.plot:
        dpi = 100
        fig = plt.figure(figsize=(args.width / dpi, args.height / dpi), dpi=dpi)
        ax = fig.add_axes([0, 0, 1, 1])
        draw_editor(ax, session)
        plt.show()
    return 0


__all__ = ["build_parser", "run_cli"]
