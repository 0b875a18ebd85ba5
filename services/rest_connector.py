"""REST connector — accepts a request object, sends it asynchronously and
hands the outcome back to the request's response handler.

``send`` never blocks: the exchange is scheduled as a task on the running
event loop and ``send`` returns ``True`` straight away.  Completion is
push-based via ``request.on_response(request, response)``.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, field
from typing import Any, Callable

from errors.exceptions import ArgumentError, TransportError
from services.credentials import Credentials
from services.http_transport import HttpTransport, RestResponse, get_http_transport

logger = logging.getLogger(__name__)

ResponseHandler = Callable[["RestRequest", RestResponse], None]


@dataclass
class RestRequest:
    """One outbound exchange, relative to the connector's base URL."""

    method: str = "GET"
    function: str = ""
    parameters: dict[str, Any] = field(default_factory=dict)
    headers: dict[str, str] = field(default_factory=dict)
    body: bytes | None = None
    timeout: float | None = None
    disable_ssl_verification: bool = False
    on_response: ResponseHandler | None = None
    url: str = ""  # filled in by the connector when sent


class RESTConnector:
    """Sends :class:`RestRequest` objects to one base URL."""

    def __init__(
        self,
        url: str,
        credentials: Credentials | None = None,
        transport: HttpTransport | None = None,
    ) -> None:
        self.url = url.rstrip("/")
        self.credentials = credentials
        self._transport = transport
        self._pending: set[asyncio.Task] = set()

    @classmethod
    def get_connector(cls, credentials: Credentials | None, url: str) -> RESTConnector | None:
        """Resolve a connector for *url*, falling back to ``credentials.url``.

        Returns ``None`` when neither yields a base URL.
        """
        base = url or (credentials.url if credentials else "")
        if not base:
            logger.error("No URL available to build a connector")
            return None
        return cls(base, credentials)

    @property
    def pending(self) -> int:
        return len(self._pending)

    def send(self, request: RestRequest | None) -> bool:
        """Schedule *request* on the running loop and return immediately.

        Raises:
            ArgumentError: *request* is ``None``.
            RuntimeError: no event loop is running in this thread.
        """
        if request is None:
            raise ArgumentError("request", "send")

        loop = asyncio.get_running_loop()
        request.url = f"{self.url}{request.function}"
        if self.credentials is not None:
            request.headers = {**self.credentials.auth_headers(), **request.headers}

        task = loop.create_task(self._process(request))
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)
        return True

    async def _process(self, request: RestRequest) -> None:
        try:
            transport = self._transport or get_http_transport()
            response = await transport.exchange(
                request.method,
                request.url,
                params=request.parameters,
                headers=request.headers,
                content=request.body,
                timeout=request.timeout,
                verify=not request.disable_ssl_verification,
            )
        except Exception as exc:
            logger.exception("%s %s failed before a response", request.method, request.url)
            response = RestResponse(
                error=TransportError(url=request.url, error_code=0, error_message=str(exc)),
            )
        if request.on_response is None:
            return
        try:
            request.on_response(request, response)
        except Exception:
            logger.exception(
                "Response handler for %s %s raised", request.method, request.url
            )

    async def wait_for_pending(self) -> None:
        """Wait until every scheduled exchange has been delivered."""
        while self._pending:
            await asyncio.gather(*list(self._pending), return_exceptions=True)
