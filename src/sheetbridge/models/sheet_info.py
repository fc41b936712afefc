"""Data model for a single tab of a spreadsheet."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(slots=True)
class SheetInfo:
    """Sheet properties as reported by spreadsheets.get."""

    sheet_id: int
    title: str
    index: int
    row_count: int = 0
    column_count: int = 0

    @classmethod
    def from_properties(cls, props: dict[str, Any]) -> "SheetInfo":
        grid = props.get("gridProperties", {}) or {}
        return cls(
            sheet_id=int(props.get("sheetId", 0)),
            title=str(props.get("title", "")),
            index=int(props.get("index", 0)),
            row_count=int(grid.get("rowCount", 0)),
            column_count=int(grid.get("columnCount", 0)),
        )
