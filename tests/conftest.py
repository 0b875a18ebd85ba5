"""Shared pytest fixtures for the Assistant client tests.

Provides:
- ``spy_connector``: records every sent request instead of performing it
- ``service``: an AssistantService wired to the spy connector
- ``recorder``: success / failure continuations that record their calls
"""

from __future__ import annotations

import json
from typing import Any

import pytest

from services.assistant import AssistantService
from services.credentials import Credentials
from services.http_transport import RestResponse
from services.rest_connector import RestRequest

VERSION = "2019-02-28"
SERVICE_URL = "https://assistant.example.com/api"


class SpyConnector:
    """Connector stand-in: keeps requests so tests can inspect and answer them."""

    def __init__(self) -> None:
        self.sent: list[RestRequest] = []

    def send(self, request: RestRequest) -> bool:
        self.sent.append(request)
        return True

    @property
    def last(self) -> RestRequest:
        return self.sent[-1]

    def respond(
        self,
        request: RestRequest | None = None,
        *,
        status: int = 200,
        body: Any = None,
        headers: dict[str, str] | None = None,
        success: bool | None = None,
        error: Exception | None = None,
    ) -> RestResponse:
        """Feed a response to *request* (default: the last one sent)."""
        request = request or self.last
        if body is None:
            data = b""
        elif isinstance(body, bytes):
            data = body
        elif isinstance(body, str):
            data = body.encode()
        else:
            data = json.dumps(body).encode()
        response = RestResponse(
            success=status < 400 if success is None else success,
            status_code=status,
            data=data,
            headers=headers or {"content-type": "application/json"},
            error=error,
        )
        request.on_response(request, response)
        return response


class Recorder:
    """Success and failure continuations that remember what they received."""

    def __init__(self) -> None:
        self.successes: list[tuple[Any, dict[str, Any]]] = []
        self.failures: list[tuple[Exception, dict[str, Any]]] = []

    def on_success(self, result: Any, custom_data: dict[str, Any]) -> None:
        self.successes.append((result, custom_data))

    def on_fail(self, error: Exception, custom_data: dict[str, Any]) -> None:
        self.failures.append((error, custom_data))


@pytest.fixture
def spy_connector() -> SpyConnector:
    return SpyConnector()


@pytest.fixture
def service(spy_connector: SpyConnector) -> AssistantService:
    """AssistantService whose requests land in ``spy_connector``."""
    return AssistantService(
        VERSION,
        Credentials(url=SERVICE_URL, api_key="test-key"),
        connector_factory=lambda credentials, url: spy_connector,
    )


@pytest.fixture
def recorder() -> Recorder:
    return Recorder()
