"""Pooled HTTP transport used by :class:`~services.rest_connector.RESTConnector`.

Wraps ``httpx.AsyncClient`` with:
- one connection pool per TLS-verification mode, created on first use
- normalization of network, timeout and HTTP-status failures into a failed
  :class:`RestResponse` (``exchange`` never raises for those)
- request timing logs, with slow responses logged as warnings
- explicit pool shutdown via :meth:`HttpTransport.close`

No retries: every failure is reported to the caller.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from typing import Any

import httpx

from config.settings import get_settings
from errors.exceptions import TransportError

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Module-level singleton
# ---------------------------------------------------------------------------
_transport: HttpTransport | None = None


@dataclass
class RestResponse:
    """The outcome of one exchange, successful or not."""

    success: bool = False
    status_code: int = 0
    data: bytes = b""
    headers: dict[str, str] = field(default_factory=dict)
    error: TransportError | None = None
    elapsed_time: float = 0.0  # seconds

    @property
    def text(self) -> str:
        return self.data.decode("utf-8", errors="replace")


def _error_message(response: httpx.Response) -> str:
    """Pull the service's ``error`` field out of a failed response, if any."""
    try:
        body = response.json()
    except ValueError:
        return response.reason_phrase or f"HTTP {response.status_code}"
    if isinstance(body, dict) and body.get("error"):
        return str(body["error"])
    return response.reason_phrase or f"HTTP {response.status_code}"


class HttpTransport:
    """Async HTTP transport with pooled connections and failure normalization."""

    def __init__(self) -> None:
        settings = get_settings()
        self._timeout = settings.assistant_timeout
        self._max_connections = settings.assistant_max_connections
        self._log_response_time = settings.assistant_log_response_time
        self._clients: dict[bool, httpx.AsyncClient] = {}

    # -- lifecycle -----------------------------------------------------------

    def _client(self, verify: bool) -> httpx.AsyncClient:
        client = self._clients.get(verify)
        if client is None:
            client = httpx.AsyncClient(
                timeout=httpx.Timeout(self._timeout),
                verify=verify,
                limits=httpx.Limits(
                    max_connections=self._max_connections,
                    max_keepalive_connections=self._max_connections,
                ),
            )
            self._clients[verify] = client
            logger.info("HttpTransport pool started — verify=%s", verify)
        return client

    async def close(self) -> None:
        """Gracefully close every connection pool."""
        for client in self._clients.values():
            await client.aclose()
        if self._clients:
            logger.info("HttpTransport closed")
        self._clients.clear()

    # -- public API ----------------------------------------------------------

    async def exchange(
        self,
        method: str,
        url: str,
        *,
        params: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
        content: bytes | None = None,
        timeout: float | None = None,
        verify: bool = True,
    ) -> RestResponse:
        """Perform one HTTP exchange and describe its outcome.

        Network errors and timeouts yield ``error_code == 0``; 4xx/5xx
        responses yield the status as ``error_code`` and keep the raw body.
        """
        client = self._client(verify)
        t0 = time.monotonic()
        try:
            response = await client.request(
                method,
                url,
                params=params,
                headers=headers,
                content=content,
                timeout=timeout if timeout is not None else httpx.USE_CLIENT_DEFAULT,
            )
        except httpx.TimeoutException:
            elapsed = time.monotonic() - t0
            logger.error("%s %s → timed out (%.0fms)", method, url, elapsed * 1000)
            return RestResponse(
                error=TransportError(url=url, error_code=0, error_message="Timeout"),
                elapsed_time=elapsed,
            )
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            elapsed = time.monotonic() - t0
            logger.warning(
                "%s %s → network error (%.0fms): %s", method, url, elapsed * 1000, exc
            )
            return RestResponse(
                error=TransportError(url=url, error_code=0, error_message=str(exc)),
                elapsed_time=elapsed,
            )

        elapsed = time.monotonic() - t0
        logger.info("%s %s → %d (%.0fms)", method, url, response.status_code, elapsed * 1000)
        if elapsed > self._log_response_time:
            logger.warning("%s %s completed in %.1fs", method, url, elapsed)

        response_headers = dict(response.headers)
        result = RestResponse(
            success=not response.is_error,
            status_code=response.status_code,
            data=response.content,
            headers=response_headers,
            elapsed_time=elapsed,
        )
        if response.is_error:
            result.error = TransportError(
                url=str(response.url),
                error_code=response.status_code,
                error_message=_error_message(response),
                response=response.text,
                response_headers=response_headers,
            )
        return result


# ---------------------------------------------------------------------------
# Singleton accessor
# ---------------------------------------------------------------------------

def get_http_transport() -> HttpTransport:
    """Return the module-level HttpTransport singleton (create if needed)."""
    global _transport
    if _transport is None:
        _transport = HttpTransport()
    return _transport
