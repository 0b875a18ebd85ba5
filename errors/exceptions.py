"""Domain-specific exceptions for the Assistant client.

These exceptions let callers distinguish between the failure modes of an
operation:

- argument problems are raised synchronously, before any request is sent;
- transport and deserialization failures are never raised by an operation,
  they are delivered to the caller's failure continuation.
"""

from __future__ import annotations


class AssistantError(Exception):
    """Base class for all Assistant client errors."""


class ArgumentError(AssistantError, ValueError):
    """A required argument (continuation, path parameter, body) is missing."""

    def __init__(self, argument: str, operation: str = "") -> None:
        self.argument = argument
        self.operation = operation
        where = f" for `{operation}`" if operation else ""
        super().__init__(f"`{argument}` is required{where}")


class TransportError(AssistantError):
    """The exchange with the service failed.

    Covers connection, DNS, TLS and timeout failures (``error_code == 0``) as
    well as non-2xx HTTP responses (``error_code`` is the status).  The raw
    response body and headers are kept so callers can inspect the wire-level
    detail.
    """

    def __init__(
        self,
        url: str,
        error_code: int,
        error_message: str,
        response: str = "",
        response_headers: dict[str, str] | None = None,
    ) -> None:
        self.url = url
        self.error_code = error_code
        self.error_message = error_message
        self.response = response
        self.response_headers = response_headers or {}
        super().__init__(
            f"URL: {url}, ErrorCode: {error_code}, Error: {error_message}, "
            f"Response: {response}"
        )


class DeserializationError(TransportError):
    """The service answered successfully but the body is not the expected model.

    Raised for non-JSON bodies and for JSON that does not validate against the
    operation's response model.  Surfaced through the same failure path as
    :class:`TransportError`.
    """
