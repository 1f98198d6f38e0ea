"""Reporting helpers such as CSV export."""
from __future__ import annotations

import csv
from typing import Iterable, List, Sequence

from .table import RATE_TABLE_HEADER, RateRow


def export_csv(path: str, rows: Iterable[RateRow], header: Sequence[str] = RATE_TABLE_HEADER):
    """Write the rate table to a CSV file; rates keep their two decimals."""

    with open(path, "w", newline="") as f:
        writer = csv.writer(f)
        writer.writerow(list(header))
        for row in rows:
            writer.writerow(row.as_tuple())


def format_rate_table(rows: Sequence[RateRow], title: str = "WITHDRAWAL RATES") -> str:
    """Render rows as a plain-text table, numbers right-aligned."""

    header = list(RATE_TABLE_HEADER)
    formatted: List[List[str]] = [[str(cell) for cell in row.as_tuple()] for row in rows]
    widths = [len(col) for col in header]
    for row in formatted:
        for idx, text in enumerate(row):
            widths[idx] = max(widths[idx], len(text))

    lines = [title]
    lines.append(" | ".join(col.ljust(widths[idx]) for idx, col in enumerate(header)))
    lines.append("-+-".join("-" * w for w in widths))
    for row in formatted:
        lines.append(
            " | ".join(
                cell.ljust(widths[idx]) if idx == 0 else cell.rjust(widths[idx])
                for idx, cell in enumerate(row)
            )
        )
    return "\n".join(lines) + "\n"


__all__ = ["export_csv", "format_rate_table"]
