"""Pydantic Settings — typed configuration with .env auto-loading."""

from __future__ import annotations

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_ASSISTANT_URL = "https://gateway.watsonplatform.net/assistant/api"


class Settings(BaseSettings):
    """Client configuration loaded from environment / .env file."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # ── Service ──────────────────────────────────────────────
    assistant_url: str = DEFAULT_ASSISTANT_URL
    assistant_version_date: str = ""  # yyyy-mm-dd, sent as ?version=

    # ── Credentials ──────────────────────────────────────────
    assistant_username: str = ""
    assistant_password: str = ""
    assistant_apikey: str = ""
    assistant_iam_access_token: str = ""

    # ── Transport ────────────────────────────────────────────
    assistant_timeout: float = 30  # seconds
    assistant_disable_ssl_verification: bool = False
    assistant_max_connections: int = 5
    assistant_log_response_time: float = 5.0  # slower responses are logged as warnings


@lru_cache
def get_settings() -> Settings:
    """Singleton accessor for client settings."""
    return Settings()
