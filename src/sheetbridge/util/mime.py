"""MIME constants and file-kind classification for Drive items."""

from __future__ import annotations

from enum import Enum

FOLDER_MIME: str = "application/vnd.google-apps.folder"
SPREADSHEET_MIME: str = "application/vnd.google-apps.spreadsheet"

CSV_MIMES: set[str] = {
    "text/csv",
    "application/csv",
    "text/comma-separated-values",
}

# Workbook formats Drive can convert into a native spreadsheet.
WORKBOOK_MIMES: set[str] = {
    "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
    "application/vnd.ms-excel",
    "application/vnd.ms-excel.sheet.macroEnabled.12",
    "application/vnd.oasis.opendocument.spreadsheet",
}

WORKBOOK_EXTENSIONS: tuple[str, ...] = (".xlsx", ".xls", ".xlsm", ".ods")


class FileKind(str, Enum):
    """How a file's tabular content is read."""

    CSV = "CSV"
    NATIVE_SHEET = "NATIVE_SHEET"
    WORKBOOK = "WORKBOOK"
    UNKNOWN = "UNKNOWN"


def is_folder(mime_type: str) -> bool:
    return mime_type == FOLDER_MIME


def is_native_spreadsheet(mime_type: str) -> bool:
    return mime_type == SPREADSHEET_MIME


def classify_file(mime_type: str, name: str = "") -> FileKind:
    """
    Classify a Drive file by MIME type, falling back to the file extension.

    Drive often reports uploads as 'application/octet-stream', so the
    extension decides when the MIME type is not conclusive.
    """
    if is_native_spreadsheet(mime_type):
        return FileKind.NATIVE_SHEET
    if mime_type in CSV_MIMES:
        return FileKind.CSV
    if mime_type in WORKBOOK_MIMES:
        return FileKind.WORKBOOK

    lowered = name.lower()
    if lowered.endswith(".csv"):
        return FileKind.CSV
    if lowered.endswith(WORKBOOK_EXTENSIONS):
        return FileKind.WORKBOOK
    return FileKind.UNKNOWN
