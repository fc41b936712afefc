"""sheetbridge public API."""

from __future__ import annotations

from sheetbridge.auth import AuthInfo, OAuthClient
from sheetbridge.bridge import FileSheetBridge, parse_csv
from sheetbridge.controller import RetryPolicy
from sheetbridge.errors import (
    ApiError,
    AuthError,
    ConflictError,
    HttpErrorInfo,
    InvalidArgumentError,
    NetworkError,
    NotFoundError,
    PermissionError,
    QuotaExceededError,
    RateLimitError,
    SheetBridgeError,
    UnsupportedFileTypeError,
    map_http_error,
)
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
from sheetbridge.selection import pick_latest_file

__all__ = [
    # High-level
    "FileSheetBridge",
    "pick_latest_file",
    "parse_csv",
    # Auth / config
    "AuthInfo",
    "OAuthClient",
    "RetryPolicy",
    # Models / options
    "FileInfo",
    "SheetInfo",
    "Destination",
    "DestinationKind",
    "SheetSelector",
    "LatestFileField",
    "ConvertOptions",
    "UpsertOptions",
    # Errors
    "SheetBridgeError",
    "AuthError",
    "PermissionError",
    "InvalidArgumentError",
    "UnsupportedFileTypeError",
    "NotFoundError",
    "ConflictError",
    "RateLimitError",
    "QuotaExceededError",
    "NetworkError",
    "ApiError",
    "HttpErrorInfo",
    "map_http_error",
]
