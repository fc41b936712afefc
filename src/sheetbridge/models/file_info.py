"""Data model for Drive items."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from sheetbridge.util.mime import is_folder


@dataclass(slots=True)
class FileInfo:
    """
    A Drive file or folder as returned by the Drive API.

    Notes:
        - parents may be empty for items shared with the caller.
        - modified_time is tz-aware UTC when Drive reports it.
    """

    file_id: str
    name: str
    mime_type: str
    parents: list[str] = field(default_factory=list)

    trashed: bool = False
    modified_time: Optional[datetime] = None
    created_time: Optional[datetime] = None
    size: Optional[int] = None

    @property
    def is_folder(self) -> bool:
        return is_folder(self.mime_type)
