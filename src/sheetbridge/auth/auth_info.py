"""Authentication information for sheetbridge."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Any

_REQUIRED_KEYS: dict[str, tuple[str, ...]] = {
    "oauth": ("client_secrets_file", "token_file"),
    "service_account": ("service_account_file",),
}

ENV_PREFIX = "SHEETBRIDGE"


@dataclass(slots=True, frozen=True)
class AuthInfo:
    """
    Authentication information.

    Supported kinds:
        kind = "oauth", data must include:
            - client_secrets_file
            - token_file
        kind = "service_account", data must include:
            - service_account_file
    """

    kind: str
    data: dict[str, Any]

    def __post_init__(self) -> None:
        if self.kind not in _REQUIRED_KEYS:
            raise ValueError("AuthInfo.kind must be 'oauth' or 'service_account'")

        if not isinstance(self.data, dict):
            raise TypeError("AuthInfo.data must be a dict")

        for key in _REQUIRED_KEYS[self.kind]:
            value = self.data.get(key)
            if not isinstance(value, str) or not value.strip():
                raise ValueError(f"AuthInfo.data['{key}'] must be a non-empty string")

    @classmethod
    def from_env(cls, prefix: str = ENV_PREFIX) -> "AuthInfo":
        """
        Build AuthInfo from environment variables.

        <prefix>_SERVICE_ACCOUNT_FILE selects a service account; otherwise
        <prefix>_CLIENT_SECRETS and <prefix>_TOKEN_FILE are used for OAuth.
        """
        sa_file = os.environ.get(f"{prefix}_SERVICE_ACCOUNT_FILE", "").strip()
        if sa_file:
            return cls(kind="service_account", data={"service_account_file": sa_file})

        return cls(
            kind="oauth",
            data={
                "client_secrets_file": os.environ.get(f"{prefix}_CLIENT_SECRETS", "").strip(),
                "token_file": os.environ.get(f"{prefix}_TOKEN_FILE", "").strip(),
            },
        )

    @property
    def client_secrets_file(self) -> str:
        """Path to OAuth client secrets JSON."""
        return str(self.data["client_secrets_file"])

    @property
    def token_file(self) -> str:
        """Path to OAuth token JSON (authorized user)."""
        return str(self.data["token_file"])

    @property
    def service_account_file(self) -> str:
        """Path to a service account key JSON."""
        return str(self.data["service_account_file"])
