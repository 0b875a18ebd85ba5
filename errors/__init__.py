"""Custom exception hierarchy for the Assistant client."""

from errors.exceptions import (
    ArgumentError,
    AssistantError,
    DeserializationError,
    TransportError,
)

__all__ = ["ArgumentError", "AssistantError", "DeserializationError", "TransportError"]
