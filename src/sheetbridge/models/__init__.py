"""Public model exports for sheetbridge."""

from __future__ import annotations

from .file_info import FileInfo
from .options import (
    ConvertOptions,
    Destination,
    DestinationKind,
    LatestFileField,
    SheetSelector,
    UpsertOptions,
)
from .sheet_info import SheetInfo

__all__ = [
    "FileInfo",
    "SheetInfo",
    "Destination",
    "DestinationKind",
    "SheetSelector",
    "LatestFileField",
    "ConvertOptions",
    "UpsertOptions",
]
