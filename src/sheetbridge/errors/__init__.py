"""Public error exports for sheetbridge."""

from __future__ import annotations

from .exceptions import (
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

__all__ = [
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
