"""Explicit option models for bridge operations."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional


class DestinationKind(str, Enum):
    """Where a converted spreadsheet ends up."""

    SOURCE_PARENT = "SOURCE_PARENT"
    FOLDER = "FOLDER"
    SCRATCH = "SCRATCH"


@dataclass(frozen=True, slots=True)
class Destination:
    """
    Destination of a conversion.

    - SOURCE_PARENT: the source file's first parent.
    - FOLDER: an explicit folder id.
    - SCRATCH: wherever Drive puts the copy; no relocation.
    """

    kind: DestinationKind = DestinationKind.SOURCE_PARENT
    folder_id: Optional[str] = None

    def __post_init__(self) -> None:
        if self.kind is DestinationKind.FOLDER and not self.folder_id:
            raise ValueError("Destination.folder() requires a folder_id")
        if self.kind is not DestinationKind.FOLDER and self.folder_id is not None:
            raise ValueError(f"folder_id is not allowed for {self.kind.value}")

    @classmethod
    def source_parent(cls) -> "Destination":
        return cls(DestinationKind.SOURCE_PARENT)

    @classmethod
    def folder(cls, folder_id: str) -> "Destination":
        return cls(DestinationKind.FOLDER, folder_id)

    @classmethod
    def scratch(cls) -> "Destination":
        return cls(DestinationKind.SCRATCH)


@dataclass(frozen=True, slots=True)
class SheetSelector:
    """Select a sheet by exact title, or by zero-based position when no title is set."""

    name: Optional[str] = None
    index: int = 0

    def __post_init__(self) -> None:
        if self.index < 0:
            raise ValueError("SheetSelector.index must be >= 0")

    @classmethod
    def by_name(cls, name: str) -> "SheetSelector":
        return cls(name=name)

    @classmethod
    def by_index(cls, index: int) -> "SheetSelector":
        return cls(index=index)


class LatestFileField(str, Enum):
    """What pick_latest_file returns for the winning file."""

    NAME = "name"
    ID = "id"
    FILE = "file"


@dataclass(frozen=True, slots=True)
class ConvertOptions:
    destination: Destination = field(default_factory=Destination.source_parent)
    delete_source: bool = True


@dataclass(frozen=True, slots=True)
class UpsertOptions:
    """
    Options for upsert_sheet.

    target_sheet_name defaults to the data file's name without extension.
    infer_data_types=False keeps every value as literal text.
    """

    source_sheet: SheetSelector = field(default_factory=SheetSelector)
    target_sheet_name: Optional[str] = None
    infer_data_types: bool = False
    delete_data_file_after_import: bool = False
