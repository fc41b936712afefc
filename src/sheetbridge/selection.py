"""Pure selection helpers over Drive listings."""

from __future__ import annotations

from typing import Iterable, Optional, TypeVar, Union

from sheetbridge.models import FileInfo, LatestFileField
from sheetbridge.util.time import EARLIEST

T = TypeVar("T")


def pick_latest_file(
    files: Iterable[FileInfo],
    selector: Union[LatestFileField, str, None] = LatestFileField.NAME,
) -> Union[FileInfo, str, None]:
    """
    Return the most recently modified file of a single-pass sequence.

    A file wins only when its modified_time is strictly later than the best
    seen so far, so on ties the earlier file is kept. Files without a
    modified_time never win.

    selector:
        "id"   -> the winner's file_id
        "file" -> the FileInfo itself
        other  -> the winner's name

    Returns None when the sequence is empty.
    """
    latest_time = EARLIEST
    latest: Optional[FileInfo] = None

    for info in files:
        modified = info.modified_time
        if modified is not None and modified > latest_time:
            latest_time = modified
            latest = info

    if latest is None:
        return None
    if selector == LatestFileField.ID:
        return latest.file_id
    if selector == LatestFileField.FILE:
        return latest
    return latest.name


def last_item(items: Iterable[T]) -> Optional[T]:
    """Consume the iterable and return its last item (None when empty)."""
    last: Optional[T] = None
    for item in items:
        last = item
    return last
