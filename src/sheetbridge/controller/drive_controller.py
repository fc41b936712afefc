"""Google Drive API controller (internal use only)."""

from __future__ import annotations

import io
import logging
from typing import Any, Iterator, Optional

from sheetbridge.errors import AuthError
from sheetbridge.models import FileInfo
from sheetbridge.util.mime import FOLDER_MIME, SPREADSHEET_MIME
from sheetbridge.util.time import parse_rfc3339

from .base import BaseController, RetryPolicy
from .fields import FILE_FIELDS, LIST_FIELDS

logger = logging.getLogger(__name__)

ROOT_FOLDER_ID = "root"


class GoogleDriveController(BaseController):
    """
    Drive v3 controller (internal only).

    Notes:
        - The Drive `service` object is NOT exposed.
        - `supports_all_drives` is applied to all requests consistently.
        - Listings are lazy: pages are fetched while the caller iterates.
    """

    def __init__(
        self,
        service: Any,
        *,
        supports_all_drives: bool = True,
        retry_policy: Optional[RetryPolicy] = None,
    ) -> None:
        self._service = service
        self._supports_all_drives = supports_all_drives
        self._retry_policy = retry_policy or RetryPolicy()

    @classmethod
    def from_service(
        cls,
        service: Any,
        *,
        supports_all_drives: bool = True,
        retry_policy: Optional[RetryPolicy] = None,
    ) -> "GoogleDriveController":
        """Create controller from a pre-built Drive service (useful for tests)."""
        return cls(
            service,
            supports_all_drives=supports_all_drives,
            retry_policy=retry_policy,
        )

    # ----------------------------
    # Public API
    # ----------------------------
    def get(self, file_id: str) -> FileInfo:
        req = self._service.files().get(
            fileId=file_id,
            fields=FILE_FIELDS,
            **self._common_get_kwargs(),
        )
        data = self._execute(req.execute)
        return _file_dict_to_file_info(data)

    def iter_children(
        self,
        parent_id: str,
        *,
        include_folders: bool = True,
        include_trashed: bool = False,
    ) -> Iterator[FileInfo]:
        """Lazily yield the immediate children of parent_id."""
        q = _build_parent_query(parent_id, include_trashed=include_trashed)
        if not include_folders:
            q = f"({q}) and mimeType != '{FOLDER_MIME}'"
        return self.iter_query(q)

    def iter_folders_named(self, name: str, parent_id: str) -> Iterator[FileInfo]:
        """Lazily yield non-trashed folders named exactly `name` directly under parent_id."""
        q = " and ".join(
            [
                f"mimeType = '{FOLDER_MIME}'",
                f"name = '{escape_query_value(name)}'",
                f"'{parent_id}' in parents",
                "trashed = false",
            ]
        )
        return self.iter_query(q)

    def iter_query(self, q: str) -> Iterator[FileInfo]:
        """Yield every file matching a Drive query, one page at a time."""
        page_token: Optional[str] = None

        while True:
            req = self._service.files().list(
                q=q,
                fields=LIST_FIELDS,
                pageToken=page_token,
                **self._common_list_kwargs(),
            )
            data = self._execute(req.execute)
            for f in data.get("files", []):
                yield _file_dict_to_file_info(f)

            page_token = data.get("nextPageToken")
            if not page_token:
                break

    def create_folder(self, name: str, parent_id: str) -> FileInfo:
        body = {"name": name, "mimeType": FOLDER_MIME, "parents": [parent_id]}
        req = self._service.files().create(
            body=body,
            fields=FILE_FIELDS,
            **self._common_write_kwargs(),
        )
        data = self._execute(req.execute)
        info = _file_dict_to_file_info(data)
        logger.info("Created folder %r (%s) under %s", name, info.file_id, parent_id)
        return info

    def copy_as_spreadsheet(
        self,
        file_id: str,
        *,
        name: str,
        parent_id: Optional[str] = None,
    ) -> FileInfo:
        """
        Copy a workbook file as a native Google Sheet (Drive performs the conversion).

        Without parent_id the copy lands in the caller's default location.
        """
        body: dict[str, Any] = {"name": name, "mimeType": SPREADSHEET_MIME}
        if parent_id is not None:
            body["parents"] = [parent_id]

        req = self._service.files().copy(
            fileId=file_id,
            body=body,
            fields=FILE_FIELDS,
            **self._common_write_kwargs(),
        )
        data = self._execute(req.execute)
        return _file_dict_to_file_info(data)

    def move(self, file_id: str, new_parent_id: str) -> FileInfo:
        """Replace all current parents with new_parent_id."""
        current = self._service.files().get(
            fileId=file_id,
            fields="parents",
            **self._common_get_kwargs(),
        )
        current_data = self._execute(current.execute)
        old_parents = [p for p in current_data.get("parents", []) if p != new_parent_id]
        remove_parents = ",".join(old_parents)

        req = self._service.files().update(
            fileId=file_id,
            addParents=new_parent_id,
            removeParents=remove_parents or None,
            fields=FILE_FIELDS,
            **self._common_write_kwargs(),
        )
        data = self._execute(req.execute)
        return _file_dict_to_file_info(data)

    def trash(self, file_id: str) -> None:
        body = {"trashed": True}
        req = self._service.files().update(
            fileId=file_id,
            body=body,
            fields="id",
            **self._common_write_kwargs(),
        )
        self._execute(req.execute)
        logger.info("Trashed file %s", file_id)

    def delete_permanently(self, file_id: str) -> None:
        req = self._service.files().delete(
            fileId=file_id,
            **self._common_write_kwargs(),
        )
        self._execute(req.execute)
        logger.info("Permanently deleted file %s", file_id)

    def download_bytes(self, file_id: str) -> bytes:
        """Download the binary content of a (non Google-apps) file."""
        try:
            from googleapiclient.http import MediaIoBaseDownload
        except Exception as exc:  # pragma: no cover
            raise AuthError(
                "google-api-python-client is not available",
                cause=exc,
            ) from exc

        req = self._service.files().get_media(
            fileId=file_id,
            **self._common_get_kwargs(),
        )

        buffer = io.BytesIO()
        downloader = MediaIoBaseDownload(buffer, req)
        done = False
        while not done:
            _status, done = self._execute(downloader.next_chunk)
        return buffer.getvalue()

    # ----------------------------
    # Internals
    # ----------------------------
    def _common_get_kwargs(self) -> dict[str, Any]:
        if not self._supports_all_drives:
            return {}
        return {"supportsAllDrives": True}

    def _common_list_kwargs(self) -> dict[str, Any]:
        if not self._supports_all_drives:
            return {}
        return {"supportsAllDrives": True, "includeItemsFromAllDrives": True}

    def _common_write_kwargs(self) -> dict[str, Any]:
        if not self._supports_all_drives:
            return {}
        return {"supportsAllDrives": True}


def escape_query_value(value: str) -> str:
    """Escape a string literal for use inside a Drive `q` expression."""
    return value.replace("\\", "\\\\").replace("'", "\\'")


def _build_parent_query(parent_id: str, *, include_trashed: bool) -> str:
    q = f"'{parent_id}' in parents"
    if not include_trashed:
        q = f"({q}) and trashed=false"
    return q


def _file_dict_to_file_info(data: dict[str, Any]) -> FileInfo:
    file_id = data.get("id")
    name = data.get("name", "")
    mime_type = data.get("mimeType", "")
    parents = data.get("parents", []) or []
    trashed = bool(data.get("trashed", False))

    modified_time = None
    created_time = None

    if isinstance(data.get("modifiedTime"), str):
        try:
            modified_time = parse_rfc3339(data["modifiedTime"])
        except ValueError:
            modified_time = None

    if isinstance(data.get("createdTime"), str):
        try:
            created_time = parse_rfc3339(data["createdTime"])
        except ValueError:
            created_time = None

    size = None
    if isinstance(data.get("size"), str) and data["size"].isdigit():
        size = int(data["size"])
    elif isinstance(data.get("size"), int):
        size = data["size"]

    return FileInfo(
        file_id=file_id if isinstance(file_id, str) else "",
        name=name if isinstance(name, str) else "",
        mime_type=mime_type if isinstance(mime_type, str) else "",
        parents=list(parents) if isinstance(parents, list) else [],
        trashed=trashed,
        modified_time=modified_time,
        created_time=created_time,
        size=size,
    )
