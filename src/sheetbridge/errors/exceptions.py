"""Errors raised by sheetbridge, and how Drive/Sheets HTTP failures map onto them."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional


class SheetBridgeError(Exception):
    """
    Root of every error the bridge raises.

    Attributes:
        details: Context for the failure, such as status_code, reason,
            file_id or spreadsheet_id and sheet_name.
        cause: The googleapiclient/google-auth exception underneath, if any.
    """

    def __init__(
        self,
        message: str,
        *,
        details: Optional[dict[str, Any]] = None,
        cause: Optional[BaseException] = None,
    ) -> None:
        super().__init__(message)
        self.details = details or {}
        self.cause = cause


class AuthError(SheetBridgeError):
    """Credentials could not be loaded, refreshed or turned into a service (HTTP 401 too)."""


class PermissionError(SheetBridgeError):
    """The caller cannot read or change the file/spreadsheet (HTTP 403)."""


class InvalidArgumentError(SheetBridgeError):
    """Drive or Sheets rejected the request, e.g. a bad A1 range or duplicate tab (HTTP 400)."""


class UnsupportedFileTypeError(InvalidArgumentError):
    """The data file is not CSV, a Google Sheet or a convertible workbook."""


class NotFoundError(SheetBridgeError):
    """A Drive file/folder is missing (HTTP 404), or no tab matches the sheet name or index."""


class ConflictError(SheetBridgeError):
    """Drive reported a concurrent modification (HTTP 409/412)."""


class RateLimitError(SheetBridgeError):
    """Too many requests per user/project (HTTP 429)."""


class QuotaExceededError(SheetBridgeError):
    """Storage or usage quota is exhausted (HTTP 403 with a quota reason)."""


class NetworkError(SheetBridgeError):
    """The request never got a response (socket error or timeout)."""


class ApiError(SheetBridgeError):
    """Any other API failure, including 5xx responses."""


@dataclass(frozen=True)
class HttpErrorInfo:
    """Status, reason and message pulled out of a googleapiclient HttpError."""

    status_code: int
    reason: str | None = None
    message: str | None = None
    details: dict[str, Any] | None = None


# Substrings of the 403 reason that mean quota, not permission.
_QUOTA_REASON_KEYWORDS: tuple[str, ...] = (
    "quota",
    "rateLimitExceeded",
    "userRateLimitExceeded",
    "dailyLimitExceeded",
    "usageLimits",
    "storageQuotaExceeded",
)


def _is_quota_reason(reason: str | None) -> bool:
    if not reason:
        return False
    lowered = reason.lower()
    return any(key.lower() in lowered for key in _QUOTA_REASON_KEYWORDS)


def map_http_error(
    info: HttpErrorInfo,
    *,
    cause: Optional[BaseException] = None,
) -> SheetBridgeError:
    """
    Turn a Drive v3 or Sheets v4 HTTP failure into a SheetBridgeError.

    400 is InvalidArgumentError, 401 AuthError, 403 PermissionError (or
    QuotaExceededError for quota reasons), 404 NotFoundError, 409/412
    ConflictError, 429 RateLimitError. Anything else is ApiError.
    """
    details: dict[str, Any] = {
        "status_code": info.status_code,
        "reason": info.reason,
    }
    if info.details:
        details.update(info.details)

    message = info.message or f"HTTP error {info.status_code}"
    status = info.status_code

    if status == 403:
        if _is_quota_reason(info.reason):
            return QuotaExceededError(message, details=details, cause=cause)
        return PermissionError(message, details=details, cause=cause)

    error_cls = _STATUS_ERRORS.get(status, ApiError)
    return error_cls(message, details=details, cause=cause)


_STATUS_ERRORS: dict[int, type[SheetBridgeError]] = {
    400: InvalidArgumentError,
    401: AuthError,
    404: NotFoundError,
    409: ConflictError,
    412: ConflictError,
    429: RateLimitError,
}
