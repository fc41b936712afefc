import os
import unittest
from unittest.mock import patch

from sheetbridge.auth import AuthInfo


class TestAuthInfo(unittest.TestCase):
    def test_auth_info_valid_oauth(self) -> None:
        info = AuthInfo(
            kind="oauth",
            data={
                "client_secrets_file": "/tmp/client_secrets.json",
                "token_file": "/tmp/token.json",
            },
        )
        self.assertEqual(info.kind, "oauth")
        self.assertEqual(info.token_file, "/tmp/token.json")

    def test_auth_info_valid_service_account(self) -> None:
        info = AuthInfo(kind="service_account", data={"service_account_file": "/tmp/sa.json"})
        self.assertEqual(info.service_account_file, "/tmp/sa.json")

    def test_auth_info_invalid_kind(self) -> None:
        with self.assertRaises(ValueError):
            AuthInfo(kind="api_key", data={})

    def test_auth_info_missing_keys(self) -> None:
        with self.assertRaises(ValueError):
            AuthInfo(kind="oauth", data={"client_secrets_file": "x"})
        with self.assertRaises(ValueError):
            AuthInfo(kind="service_account", data={"service_account_file": "  "})

    def test_from_env_prefers_service_account(self) -> None:
        env = {
            "SHEETBRIDGE_SERVICE_ACCOUNT_FILE": "/keys/sa.json",
            "SHEETBRIDGE_CLIENT_SECRETS": "/keys/client.json",
            "SHEETBRIDGE_TOKEN_FILE": "/keys/token.json",
        }
        with patch.dict(os.environ, env, clear=True):
            info = AuthInfo.from_env()
        self.assertEqual(info.kind, "service_account")

    def test_from_env_oauth(self) -> None:
        env = {
            "SHEETBRIDGE_CLIENT_SECRETS": "/keys/client.json",
            "SHEETBRIDGE_TOKEN_FILE": "/keys/token.json",
        }
        with patch.dict(os.environ, env, clear=True):
            info = AuthInfo.from_env()
        self.assertEqual(info.kind, "oauth")
        self.assertEqual(info.client_secrets_file, "/keys/client.json")

    def test_from_env_missing_raises(self) -> None:
        with patch.dict(os.environ, {}, clear=True):
            with self.assertRaises(ValueError):
                AuthInfo.from_env()


if __name__ == "__main__":
    unittest.main()
