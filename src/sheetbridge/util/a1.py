"""A1 notation and name helpers for the Sheets API."""

from __future__ import annotations

from typing import Any, Sequence


def column_letter(index: int) -> str:
    """Return the column letters for a 1-based column index (1 -> A, 27 -> AA)."""
    if index < 1:
        raise ValueError("column index must be >= 1")

    letters = ""
    n = index
    while n > 0:
        n, rem = divmod(n - 1, 26)
        letters = chr(ord("A") + rem) + letters
    return letters


def quote_sheet_title(title: str) -> str:
    """Quote a sheet title for use in an A1 range ('It''s' style escaping)."""
    return "'" + title.replace("'", "''") + "'"


def sheet_range(title: str, cell_range: str | None = None) -> str:
    """Build 'Title'!A1:B2, or just 'Title' for the whole sheet."""
    quoted = quote_sheet_title(title)
    if not cell_range:
        return quoted
    return f"{quoted}!{cell_range}"


def block_range(title: str, rows: int, columns: int) -> str:
    """A1 range of a rows x columns block anchored at A1."""
    if rows < 1 or columns < 1:
        raise ValueError("rows and columns must be >= 1")
    return sheet_range(title, f"A1:{column_letter(columns)}{rows}")


def grid_extent(values: Sequence[Sequence[Any]]) -> tuple[int, int]:
    """Return (rows, columns) of a possibly ragged grid."""
    rows = len(values)
    columns = max((len(row) for row in values), default=0)
    return rows, columns


def pad_grid(values: Sequence[Sequence[Any]], fill: Any = "") -> list[list[Any]]:
    """Pad ragged rows so every row has the same number of columns."""
    _, columns = grid_extent(values)
    return [list(row) + [fill] * (columns - len(row)) for row in values]


def strip_extension(name: str) -> str:
    """Drop the last extension from a file name ('data.2024.csv' -> 'data.2024')."""
    head, dot, _ = name.rpartition(".")
    if not dot or not head:
        return name
    return head
