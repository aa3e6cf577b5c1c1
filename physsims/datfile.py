"""Writing whitespace- or comma-separated data tables for the simulations."""

from __future__ import annotations

import os
from collections.abc import Iterable, Sequence

DEFAULT_PRECISION = 6


def format_number(value: float, precision: int = DEFAULT_PRECISION) -> str:
    """Format a number with ``precision`` significant digits, %g style."""
    if precision < 0:
        raise ValueError("precision must not be negative")
    return f"{float(value):.{precision}g}"


def write_table(
    path: str | os.PathLike[str],
    columns: Sequence[str],
    rows: Iterable[Sequence[float]],
    separator: str = " ",
    precision: int = DEFAULT_PRECISION,
    width: int = 0,
) -> int:
    """Write a header line and one line per row; return the number of rows.

    Each field is right-aligned to ``width`` characters when ``width`` is
    positive.
    """
    columns = list(columns)
    if not columns:
        raise ValueError("a table needs at least one column")

    def line(fields: Iterable[str]) -> str:
        return separator.join(field.rjust(width) for field in fields) + "\n"

    count = 0
    with open(path, "w", encoding="utf-8", newline="\n") as handle:
        handle.write(line(columns))
        for row in rows:
            values = list(row)
            if len(values) != len(columns):
                raise ValueError(
                    f"row {count} has {len(values)} values, "
                    f"expected {len(columns)}"
                )
            handle.write(line(format_number(v, precision) for v in values))
            count += 1
    return count