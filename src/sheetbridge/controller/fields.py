"""Field masks for Google Drive and Sheets API responses."""

from __future__ import annotations

FILE_FIELDS: str = (
    "id,"
    "name,"
    "mimeType,"
    "parents,"
    "trashed,"
    "modifiedTime,"
    "createdTime,"
    "size"
)

LIST_FIELDS: str = f"nextPageToken,files({FILE_FIELDS})"

SHEET_PROPERTIES_FIELDS: str = (
    "spreadsheetId,"
    "properties.title,"
    "sheets.properties(sheetId,title,index,gridProperties(rowCount,columnCount))"
)
