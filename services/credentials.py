"""Service credentials — base URL plus the auth material a connector attaches.

Obtaining tokens (IAM exchange, token refresh) is out of scope: a caller that
uses IAM supplies the access token and replaces it via
:meth:`Credentials.update_iam_access_token` when it rotates.
"""

from __future__ import annotations

import base64
import logging
from dataclasses import dataclass

from config.settings import Settings, get_settings

logger = logging.getLogger(__name__)


@dataclass
class Credentials:
    url: str = ""
    username: str = ""
    password: str = ""
    api_key: str = ""
    iam_access_token: str = ""
    watson_authentication_token: str = ""

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> Credentials:
        """Build credentials from ``ASSISTANT_*`` settings."""
        settings = settings or get_settings()
        return cls(
            url=settings.assistant_url,
            username=settings.assistant_username,
            password=settings.assistant_password,
            api_key=settings.assistant_apikey,
            iam_access_token=settings.assistant_iam_access_token,
        )

    def has_credentials(self) -> bool:
        return bool(self.username and self.password)

    def has_api_key(self) -> bool:
        return bool(self.api_key)

    def has_iam_access_token(self) -> bool:
        return bool(self.iam_access_token)

    def has_watson_authentication_token(self) -> bool:
        return bool(self.watson_authentication_token)

    def update_iam_access_token(self, token: str) -> None:
        """Hot-swap the bearer token; picked up by the next request."""
        self.iam_access_token = token
        logger.info("IAM access token updated")

    def create_authorization(self) -> str:
        """Return the HTTP basic ``Authorization`` value."""
        if self.has_credentials():
            user, secret = self.username, self.password
        else:
            user, secret = "apikey", self.api_key
        token = base64.b64encode(f"{user}:{secret}".encode()).decode("ascii")
        return f"Basic {token}"

    def auth_headers(self) -> dict[str, str]:
        """Headers authenticating a request, strongest credential first."""
        if self.has_iam_access_token():
            return {"Authorization": f"Bearer {self.iam_access_token}"}
        if self.has_watson_authentication_token():
            return {"X-Watson-Authorization-Token": self.watson_authentication_token}
        if self.has_credentials() or self.has_api_key():
            return {"Authorization": self.create_authorization()}
        return {}
