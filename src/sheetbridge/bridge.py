"""FileSheetBridge: shallow Drive/Sheets helpers for moving tabular data around."""

from __future__ import annotations

import csv
import io
import logging
from typing import Any, Optional, Sequence, Union

from sheetbridge.auth import AuthInfo, OAuthClient
from sheetbridge.controller import (
    ROOT_FOLDER_ID,
    GoogleDriveController,
    GoogleSheetsController,
    RetryPolicy,
)
from sheetbridge.errors import NotFoundError, UnsupportedFileTypeError
from sheetbridge.models import (
    ConvertOptions,
    Destination,
    DestinationKind,
    FileInfo,
    LatestFileField,
    SheetInfo,
    SheetSelector,
    UpsertOptions,
)
from sheetbridge.selection import last_item, pick_latest_file
from sheetbridge.util.a1 import (
    block_range,
    grid_extent,
    pad_grid,
    sheet_range,
    strip_extension,
)
from sheetbridge.util.mime import FileKind, classify_file

logger = logging.getLogger(__name__)

Grid = list[list[Any]]


class FileSheetBridge:
    """Drive/Sheets toolkit: convert, look up, extract and upsert tabular files."""

    DEFAULT_SCOPES: tuple[str, ...] = (
        "https://www.googleapis.com/auth/drive",
        "https://www.googleapis.com/auth/spreadsheets",
    )

    def __init__(
        self,
        auth_info: AuthInfo,
        *,
        scopes: Optional[Sequence[str]] = None,
        supports_all_drives: bool = True,
        retry_policy: Optional[RetryPolicy] = None,
    ) -> None:
        use_scopes = list(scopes) if scopes is not None else list(self.DEFAULT_SCOPES)
        client = OAuthClient(auth_info)
        creds = client.get_credentials(use_scopes, ensure_valid=True)

        self._drive = GoogleDriveController(
            client.build_service("drive", "v3", use_scopes, credentials=creds),
            supports_all_drives=supports_all_drives,
            retry_policy=retry_policy,
        )
        self._sheets = GoogleSheetsController(
            client.build_service("sheets", "v4", use_scopes, credentials=creds),
            retry_policy=retry_policy,
        )

    @classmethod
    def from_controllers(
        cls,
        drive: GoogleDriveController,
        sheets: GoogleSheetsController,
    ) -> "FileSheetBridge":
        """Create bridge with injected controllers (useful for tests)."""
        obj = cls.__new__(cls)
        obj._drive = drive
        obj._sheets = sheets
        return obj

    # ----------------------------
    # Lookups
    # ----------------------------
    def get_file(self, file_id: str) -> FileInfo:
        return self._drive.get(file_id)

    def resolve_folder(self, name: str, parent_id: Optional[str] = None) -> FileInfo:
        """
        Find a folder by exact name under parent_id (default: My Drive root),
        creating it when missing.

        When several folders share the name, the last one in listing order wins.
        """
        parent = parent_id if parent_id is not None else ROOT_FOLDER_ID
        found = last_item(self._drive.iter_folders_named(name, parent))
        if found is not None:
            logger.debug("Resolved folder %r to %s", name, found.file_id)
            return found
        return self._drive.create_folder(name, parent)

    def read_cell(self, spreadsheet_id: str, sheet_name: str, cell: str) -> str:
        """Return one cell of the named sheet as text ('' for an empty cell)."""
        sheet = self._select_sheet(spreadsheet_id, SheetSelector.by_name(sheet_name))
        values = self._sheets.get_values(spreadsheet_id, sheet_range(sheet.title, cell))
        if not values or not values[0]:
            return ""
        return str(values[0][0])

    def latest_file_in_folder(
        self,
        folder_id: str,
        selector: Union[LatestFileField, str, None] = LatestFileField.NAME,
    ) -> Union[FileInfo, str, None]:
        """Most recently modified non-folder child of folder_id (see pick_latest_file)."""
        files = self._drive.iter_children(folder_id, include_folders=False)
        return pick_latest_file(files, selector)

    # ----------------------------
    # Conversion
    # ----------------------------
    def convert_to_native_sheet(
        self,
        source: FileInfo,
        options: Optional[ConvertOptions] = None,
    ) -> FileInfo:
        """
        Convert a workbook file (xlsx/xls/ods) into a Google Sheet with the same name.

        The copy is moved explicitly into the destination after creation.
        With the default options the source is trashed afterwards.
        """
        opts = options or ConvertOptions()
        folder_id = self._destination_folder(source, opts.destination)

        converted = self._drive.copy_as_spreadsheet(
            source.file_id,
            name=source.name,
            parent_id=folder_id,
        )
        logger.info("Converted %r (%s) to sheet %s", source.name, source.file_id, converted.file_id)

        if folder_id is not None:
            converted = self._drive.move(converted.file_id, folder_id)

        if opts.delete_source:
            self._drive.trash(source.file_id)
        return converted

    # ----------------------------
    # Sheets
    # ----------------------------
    def format_column_as_text(
        self,
        spreadsheet_id: str,
        selector: Optional[SheetSelector] = None,
    ) -> None:
        """Apply the plain-text number format to the data range of one sheet."""
        sheet = self._select_sheet(spreadsheet_id, selector or SheetSelector())
        values = self._sheets.get_values(spreadsheet_id, sheet_range(sheet.title))
        rows, columns = grid_extent(values)
        if rows == 0 or columns == 0:
            logger.debug("Sheet %r is empty; nothing to format", sheet.title)
            return
        self._sheets.set_text_format(spreadsheet_id, sheet.sheet_id, rows=rows, columns=columns)

    def extract_tabular_data(
        self,
        source: FileInfo,
        selector: Optional[SheetSelector] = None,
    ) -> Grid:
        """
        Read a CSV file, a Google Sheet or a workbook file into a 2-D grid.

        Workbooks are converted into a scratch sheet that is permanently
        deleted once read.

        Raises:
            UnsupportedFileTypeError: for any other file type.
        """
        use_selector = selector or SheetSelector()
        kind = classify_file(source.mime_type, source.name)

        if kind is FileKind.CSV:
            return parse_csv(self._drive.download_bytes(source.file_id))

        if kind is FileKind.NATIVE_SHEET:
            return self._read_sheet_grid(source.file_id, use_selector)

        if kind is FileKind.WORKBOOK:
            scratch = self.convert_to_native_sheet(
                source,
                ConvertOptions(destination=Destination.scratch(), delete_source=False),
            )
            try:
                return self._read_sheet_grid(scratch.file_id, use_selector)
            finally:
                self._drive.delete_permanently(scratch.file_id)

        raise UnsupportedFileTypeError(
            "File is not CSV, a Google Sheet or a supported workbook",
            details={"file_id": source.file_id, "name": source.name, "mime_type": source.mime_type},
        )

    def upsert_sheet(
        self,
        spreadsheet_id: str,
        data_file: FileInfo,
        options: Optional[UpsertOptions] = None,
    ) -> SheetInfo:
        """
        Replace (or create) a sheet in spreadsheet_id with the data of data_file.

        The target sheet is named after the data file without its extension
        unless options.target_sheet_name is set. An existing target (matched
        case-insensitively, as Sheets does) is fully cleared first and keeps
        its title; an empty data grid leaves it empty.
        """
        opts = options or UpsertOptions()
        target_name = opts.target_sheet_name
        if target_name is None:
            target_name = strip_extension(data_file.name)

        grid = pad_grid(self.extract_tabular_data(data_file, opts.source_sheet))
        rows, columns = grid_extent(grid)

        sheet = self._find_sheet(spreadsheet_id, target_name)
        if sheet is None:
            sheet = self._sheets.add_sheet(
                spreadsheet_id,
                target_name,
                row_count=rows or None,
                column_count=columns or None,
            )
        else:
            self._sheets.clear_sheet(spreadsheet_id, sheet.sheet_id)
            if rows > sheet.row_count or columns > sheet.column_count:
                self._sheets.resize_sheet(
                    spreadsheet_id,
                    sheet.sheet_id,
                    row_count=max(rows, sheet.row_count),
                    column_count=max(columns, sheet.column_count),
                )

        if rows == 0 or columns == 0:
            logger.warning("No data in %r; sheet %r left empty", data_file.name, target_name)
        else:
            a1 = block_range(sheet.title, rows, columns)
            if opts.infer_data_types:
                self._sheets.update_values(spreadsheet_id, a1, grid, value_input_option="USER_ENTERED")
            else:
                self._sheets.set_text_format(spreadsheet_id, sheet.sheet_id, rows=rows, columns=columns)
                self._sheets.update_values(spreadsheet_id, a1, grid, value_input_option="RAW")
            logger.info("Wrote %dx%d values to sheet %r of %s", rows, columns, sheet.title, spreadsheet_id)

        if opts.delete_data_file_after_import:
            self._drive.trash(data_file.file_id)
        return sheet

    # ----------------------------
    # Internals
    # ----------------------------
    def _destination_folder(self, source: FileInfo, destination: Destination) -> Optional[str]:
        if destination.kind is DestinationKind.FOLDER:
            return destination.folder_id
        if destination.kind is DestinationKind.SCRATCH:
            return None
        if not source.parents:
            logger.warning(
                "Source %s has no visible parent; converted copy stays in the default location",
                source.file_id,
            )
            return None
        return source.parents[0]

    def _find_sheet(self, spreadsheet_id: str, title: str) -> Optional[SheetInfo]:
        # Tab titles are unique regardless of case.
        wanted = title.casefold()
        for sheet in self._sheets.list_sheets(spreadsheet_id):
            if sheet.title.casefold() == wanted:
                return sheet
        return None

    def _select_sheet(self, spreadsheet_id: str, selector: SheetSelector) -> SheetInfo:
        sheets = self._sheets.list_sheets(spreadsheet_id)
        if selector.name is not None:
            for sheet in sheets:
                if sheet.title == selector.name:
                    return sheet
            raise NotFoundError(
                "Sheet not found",
                details={"spreadsheet_id": spreadsheet_id, "sheet_name": selector.name},
            )

        if selector.index >= len(sheets):
            raise NotFoundError(
                "Sheet index out of range",
                details={
                    "spreadsheet_id": spreadsheet_id,
                    "sheet_index": selector.index,
                    "sheet_count": len(sheets),
                },
            )
        return sheets[selector.index]

    def _read_sheet_grid(self, spreadsheet_id: str, selector: SheetSelector) -> Grid:
        sheet = self._select_sheet(spreadsheet_id, selector)
        values = self._sheets.get_values(spreadsheet_id, sheet_range(sheet.title))
        return pad_grid(values)


def parse_csv(content: bytes, *, encoding: str = "utf-8-sig") -> Grid:
    """Parse CSV bytes with standard comma/double-quote rules. Values stay strings."""
    text = content.decode(encoding)
    return list(csv.reader(io.StringIO(text, newline="")))
