"""withdrawcurve package entry points."""
from __future__ import annotations

import logging
import sys

from .cli import build_parser, run_cli

__all__ = ["build_parser", "run_cli", "run_gui", "main", "main_cli"]


def run_gui(log_level: int = logging.WARNING) -> None:
    # Tk is imported on demand.
    from .gui.app import run

    run(log_level)


def main(argv=None) -> None:
    """Console entry point supporting both CLI and GUI modes."""

    parser = build_parser()
    default_args = parser.parse_args([])
    args = parser.parse_args(argv)

    log_level = getattr(logging, args.log_level)
    if args.gui:
        run_gui(log_level)
        return

    if args.cli:
        sys.exit(run_cli(args))

    cli_fields = [
        "current_age",
        "start_year",
        "duration",
        "reference_rate",
        "mode",
        "points",
        "csv",
        "plot",
        "width",
        "height",
    ]
    if any(getattr(args, field) != getattr(default_args, field) for field in cli_fields):
        parser.error("CLI options require --cli; add --cli to run command-line mode.")

    run_gui(log_level)


def main_cli(argv=None) -> None:
    """Dedicated console entry point for CLI usage."""

    parser = build_parser()
    args = parser.parse_args(argv)
    if not args.cli:
        args.cli = True
    sys.exit(run_cli(args))
