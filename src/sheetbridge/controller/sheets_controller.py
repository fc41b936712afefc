"""Google Sheets API controller (internal use only)."""

from __future__ import annotations

import logging
from typing import Any, Optional, Sequence

from sheetbridge.models import SheetInfo

from .base import BaseController, RetryPolicy
from .fields import SHEET_PROPERTIES_FIELDS

logger = logging.getLogger(__name__)

TEXT_NUMBER_FORMAT: dict[str, str] = {"type": "TEXT"}


class GoogleSheetsController(BaseController):
    """
    Sheets v4 controller (internal only).

    Ranges are A1 strings for value calls and sheetId-based grid ranges for
    formatting calls.
    """

    def __init__(
        self,
        service: Any,
        *,
        retry_policy: Optional[RetryPolicy] = None,
    ) -> None:
        self._service = service
        self._retry_policy = retry_policy or RetryPolicy()

    @classmethod
    def from_service(
        cls,
        service: Any,
        *,
        retry_policy: Optional[RetryPolicy] = None,
    ) -> "GoogleSheetsController":
        """Create controller from a pre-built Sheets service (useful for tests)."""
        return cls(service, retry_policy=retry_policy)

    # ----------------------------
    # Metadata
    # ----------------------------
    def list_sheets(self, spreadsheet_id: str) -> list[SheetInfo]:
        """Return the spreadsheet's tabs ordered by index."""
        req = self._service.spreadsheets().get(
            spreadsheetId=spreadsheet_id,
            fields=SHEET_PROPERTIES_FIELDS,
        )
        data = self._execute(req.execute)
        sheets = [
            SheetInfo.from_properties(s.get("properties", {}))
            for s in data.get("sheets", [])
        ]
        return sorted(sheets, key=lambda s: s.index)

    # ----------------------------
    # Values
    # ----------------------------
    def get_values(
        self,
        spreadsheet_id: str,
        a1_range: str,
        *,
        value_render_option: str = "UNFORMATTED_VALUE",
        date_time_render_option: str = "FORMATTED_STRING",
    ) -> list[list[Any]]:
        """Read a range. Trailing empty rows/cells are omitted by the API."""
        req = self._service.spreadsheets().values().get(
            spreadsheetId=spreadsheet_id,
            range=a1_range,
            valueRenderOption=value_render_option,
            dateTimeRenderOption=date_time_render_option,
            majorDimension="ROWS",
        )
        data = self._execute(req.execute)
        return [list(row) for row in data.get("values", [])]

    def update_values(
        self,
        spreadsheet_id: str,
        a1_range: str,
        values: Sequence[Sequence[Any]],
        *,
        value_input_option: str = "RAW",
    ) -> dict[str, Any]:
        body = {
            "range": a1_range,
            "majorDimension": "ROWS",
            "values": [list(row) for row in values],
        }
        req = self._service.spreadsheets().values().update(
            spreadsheetId=spreadsheet_id,
            range=a1_range,
            valueInputOption=value_input_option,
            body=body,
        )
        return self._execute(req.execute)

    # ----------------------------
    # Structure / formatting
    # ----------------------------
    def add_sheet(
        self,
        spreadsheet_id: str,
        title: str,
        *,
        row_count: Optional[int] = None,
        column_count: Optional[int] = None,
    ) -> SheetInfo:
        props: dict[str, Any] = {"title": title}
        grid: dict[str, int] = {}
        if row_count:
            grid["rowCount"] = row_count
        if column_count:
            grid["columnCount"] = column_count
        if grid:
            props["gridProperties"] = grid

        reply = self._batch_update(spreadsheet_id, [{"addSheet": {"properties": props}}])
        added = reply.get("replies", [{}])[0].get("addSheet", {})
        info = SheetInfo.from_properties(added.get("properties", {}))
        logger.info("Added sheet %r (%s) to %s", title, info.sheet_id, spreadsheet_id)
        return info

    def clear_sheet(self, spreadsheet_id: str, sheet_id: int) -> None:
        """Clear values and formatting of every cell of the sheet."""
        self._batch_update(
            spreadsheet_id,
            [{"updateCells": {"range": {"sheetId": sheet_id}, "fields": "*"}}],
        )

    def resize_sheet(
        self,
        spreadsheet_id: str,
        sheet_id: int,
        *,
        row_count: int,
        column_count: int,
    ) -> None:
        self._batch_update(
            spreadsheet_id,
            [
                {
                    "updateSheetProperties": {
                        "properties": {
                            "sheetId": sheet_id,
                            "gridProperties": {
                                "rowCount": row_count,
                                "columnCount": column_count,
                            },
                        },
                        "fields": "gridProperties.rowCount,gridProperties.columnCount",
                    }
                }
            ],
        )

    def set_text_format(
        self,
        spreadsheet_id: str,
        sheet_id: int,
        *,
        rows: int,
        columns: int,
    ) -> None:
        """Apply the plain-text number format to the rows x columns block at A1."""
        grid_range = {
            "sheetId": sheet_id,
            "startRowIndex": 0,
            "endRowIndex": rows,
            "startColumnIndex": 0,
            "endColumnIndex": columns,
        }
        self._batch_update(
            spreadsheet_id,
            [
                {
                    "repeatCell": {
                        "range": grid_range,
                        "cell": {"userEnteredFormat": {"numberFormat": TEXT_NUMBER_FORMAT}},
                        "fields": "userEnteredFormat.numberFormat",
                    }
                }
            ],
        )

    # ----------------------------
    # Internals
    # ----------------------------
    def _batch_update(
        self,
        spreadsheet_id: str,
        requests: list[dict[str, Any]],
    ) -> dict[str, Any]:
        req = self._service.spreadsheets().batchUpdate(
            spreadsheetId=spreadsheet_id,
            body={"requests": requests},
        )
        return self._execute(req.execute)
