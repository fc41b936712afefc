"""Internal controller exports for sheetbridge."""

from __future__ import annotations

from .base import RetryPolicy
from .drive_controller import ROOT_FOLDER_ID, GoogleDriveController
from .sheets_controller import GoogleSheetsController

__all__ = [
    "GoogleDriveController",
    "GoogleSheetsController",
    "RetryPolicy",
    "ROOT_FOLDER_ID",
]
