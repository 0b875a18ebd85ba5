"""Tests for services.credentials — auth material and the headers it yields."""

import base64

from config.settings import Settings
from services.credentials import Credentials


def _basic(user: str, secret: str) -> str:
    return "Basic " + base64.b64encode(f"{user}:{secret}".encode()).decode()


# ── has_* ─────────────────────────────────────────────────────


def test_empty_credentials():
    creds = Credentials()
    assert not creds.has_credentials()
    assert not creds.has_api_key()
    assert not creds.has_iam_access_token()
    assert not creds.has_watson_authentication_token()
    assert creds.auth_headers() == {}


def test_username_without_password_is_not_credentials():
    assert not Credentials(username="user").has_credentials()


# ── auth_headers ──────────────────────────────────────────────


def test_basic_auth_from_username_password():
    creds = Credentials(username="user", password="secret")
    assert creds.auth_headers() == {"Authorization": _basic("user", "secret")}


def test_basic_auth_from_api_key():
    creds = Credentials(api_key="k-123")
    assert creds.auth_headers() == {"Authorization": _basic("apikey", "k-123")}


def test_bearer_token_wins():
    creds = Credentials(username="user", password="secret", api_key="k", iam_access_token="tok")
    assert creds.auth_headers() == {"Authorization": "Bearer tok"}


def test_watson_token_header():
    creds = Credentials(watson_authentication_token="wt", api_key="k")
    assert creds.auth_headers() == {"X-Watson-Authorization-Token": "wt"}


def test_update_iam_access_token():
    creds = Credentials(iam_access_token="old")
    creds.update_iam_access_token("new")
    assert creds.auth_headers() == {"Authorization": "Bearer new"}


# ── from_settings ─────────────────────────────────────────────


def test_from_settings():
    settings = Settings(
        assistant_url="https://eu.example.com/assistant/api",
        assistant_apikey="k-1",
        _env_file=None,
    )
    creds = Credentials.from_settings(settings)

    assert creds.url == "https://eu.example.com/assistant/api"
    assert creds.api_key == "k-1"
    assert creds.has_api_key()
