from .a1 import (
    block_range,
    column_letter,
    grid_extent,
    pad_grid,
    quote_sheet_title,
    sheet_range,
    strip_extension,
)
from .mime import (
    FOLDER_MIME,
    SPREADSHEET_MIME,
    FileKind,
    classify_file,
    is_folder,
    is_native_spreadsheet,
)
from .time import EARLIEST, normalize_dt, parse_rfc3339

__all__ = [
    "column_letter",
    "quote_sheet_title",
    "sheet_range",
    "block_range",
    "grid_extent",
    "pad_grid",
    "strip_extension",
    "FOLDER_MIME",
    "SPREADSHEET_MIME",
    "FileKind",
    "classify_file",
    "is_folder",
    "is_native_spreadsheet",
    "EARLIEST",
    "parse_rfc3339",
    "normalize_dt",
]
