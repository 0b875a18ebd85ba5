"""Shared plumbing for Watson service clients.

Every operation reduces to the same steps:

1. check the continuations and required arguments (``ArgumentError``)
2. build path, query string, headers and JSON body
3. hand a :class:`PendingOperation` to a connector
4. when the exchange completes, deserialize the payload and fire exactly one
   of the caller's continuations with the ``custom_data`` side channel
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Generic, TypeVar
from urllib.parse import quote

from pydantic import BaseModel, TypeAdapter, ValidationError

from errors.exceptions import ArgumentError, DeserializationError, TransportError
from models.base import AssistantModel
from services.credentials import Credentials
from services.http_transport import RestResponse
from services.rest_connector import RESTConnector, RestRequest

logger = logging.getLogger(__name__)

T = TypeVar("T")

SuccessCallback = Callable[[T, dict[str, Any]], None]
FailCallback = Callable[[TransportError, dict[str, Any]], None]
ConnectorFactory = Callable[[Credentials | None, str], RESTConnector | None]

ANALYTICS_HEADER = "X-IBMCloud-SDK-Analytics"


@dataclass
class PendingOperation(RestRequest, Generic[T]):
    """A sent request together with everything needed to deliver its result."""

    operation: str = ""
    response_model: Any = None
    success_callback: SuccessCallback | None = None
    fail_callback: FailCallback | None = None
    custom_data: dict[str, Any] = field(default_factory=dict)
    completed: bool = False


def encode_path(value: str) -> str:
    """Percent-encode one path segment (``/`` included)."""
    return quote(str(value), safe="")


_adapters: dict[Any, TypeAdapter] = {}


def _validate(response_model: Any, payload: Any) -> Any:
    if isinstance(response_model, type) and issubclass(response_model, BaseModel):
        return response_model.model_validate(payload)
    adapter = _adapters.get(response_model)
    if adapter is None:
        adapter = _adapters[response_model] = TypeAdapter(response_model)
    return adapter.validate_python(payload)


def _operation_id(operation: str) -> str:
    return "".join(part.capitalize() for part in operation.split("_"))


class WatsonService:
    """Base class of a versioned Watson REST service client."""

    service_name = ""
    service_version = ""
    default_url = ""

    def __init__(
        self,
        version_date: str,
        credentials: Credentials | None = None,
        *,
        disable_ssl_verification: bool = False,
        connector_factory: ConnectorFactory | None = None,
    ) -> None:
        if not version_date:
            raise ArgumentError("version_date", type(self).__name__)
        self.version_date = version_date
        self.credentials = credentials
        self.service_url = (credentials.url if credentials and credentials.url else self.default_url)
        self.disable_ssl_verification = disable_ssl_verification
        self._connector_factory = connector_factory or RESTConnector.get_connector
        self._custom_request_headers: dict[str, str] = {}

    # -- headers -------------------------------------------------------------

    def add_custom_request_header(self, name: str, value: str) -> None:
        """Attach a header to the next request only."""
        self._custom_request_headers[name] = value

    def _take_custom_request_headers(self) -> dict[str, str]:
        headers, self._custom_request_headers = self._custom_request_headers, {}
        return headers

    def _sdk_headers(self, operation: str) -> dict[str, str]:
        return {
            ANALYTICS_HEADER: (
                f"service_name={self.service_name};"
                f"service_version={self.service_version};"
                f"operation_id={_operation_id(operation)}"
            ),
        }

    # -- request side --------------------------------------------------------

    @staticmethod
    def _require(operation: str, **arguments: Any) -> None:
        """Raise ``ArgumentError`` for the first missing (``None``/empty) argument."""
        for name, value in arguments.items():
            if value is None or (isinstance(value, str) and not value):
                raise ArgumentError(name, operation)

    def _submit(
        self,
        operation: str,
        method: str,
        path: str,
        response_model: Any,
        success_callback: SuccessCallback,
        fail_callback: FailCallback,
        *,
        params: dict[str, Any] | None = None,
        body: AssistantModel | None = None,
        custom_data: dict[str, Any] | None = None,
    ) -> bool:
        query: dict[str, Any] = {"version": self.version_date}
        for key, value in (params or {}).items():
            if value is None or (isinstance(value, str) and not value):
                continue
            if isinstance(value, bool):
                value = "true" if value else "false"
            query[key] = value

        headers = {"Accept": "application/json", **self._sdk_headers(operation)}
        headers.update(self._take_custom_request_headers())

        content = None
        if body is not None:
            headers["Content-Type"] = "application/json"
            content = json.dumps(body.to_body()).encode("utf-8")

        connector = self._connector_factory(self.credentials, self.service_url)
        if connector is None:
            logger.error("%s: no connector available for %s", operation, self.service_url)
            return False

        request: PendingOperation[Any] = PendingOperation(
            method=method,
            function=path,
            parameters=query,
            headers=headers,
            body=content,
            disable_ssl_verification=self.disable_ssl_verification,
            on_response=self._on_response,
            operation=operation,
            response_model=response_model,
            success_callback=success_callback,
            fail_callback=fail_callback,
            custom_data=dict(custom_data or {}),
        )
        return connector.send(request)

    # -- response side -------------------------------------------------------

    def _on_response(self, request: PendingOperation[Any], response: RestResponse) -> None:
        if request.completed:
            logger.warning("%s: response delivered twice, ignoring", request.operation)
            return
        request.completed = True

        custom_data = request.custom_data
        custom_data["response"] = response.text
        custom_data["headers"] = response.headers
        custom_data["status_code"] = response.status_code

        result = None
        if response.success:
            try:
                payload = json.loads(response.data) if response.data.strip() else {}
                custom_data["json"] = payload
                result = _validate(request.response_model, payload)
            except (ValueError, ValidationError) as exc:
                logger.error("%s: could not deserialize response: %s", request.operation, exc)
                response.success = False
                response.error = DeserializationError(
                    url=request.url,
                    error_code=response.status_code,
                    error_message=str(exc),
                    response=response.text,
                    response_headers=response.headers,
                )

        if response.success:
            request.success_callback(result, custom_data)
        else:
            if response.error is None:
                response.error = TransportError(
                    url=request.url,
                    error_code=response.status_code,
                    error_message="Request failed",
                    response=response.text,
                    response_headers=response.headers,
                )
            request.fail_callback(response.error, custom_data)
