"""Base model shared by every Assistant request and response record."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class AssistantModel(BaseModel):
    """All Assistant models use the service's snake_case JSON names as-is.

    Unknown keys in server payloads are ignored; every field is optional and
    ``None`` means "absent", so :meth:`to_body` can emit sparse JSON.
    """

    model_config = ConfigDict(populate_by_name=True)

    def to_body(self) -> dict[str, Any]:
        """Serialize for a request body, omitting absent fields at every level."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


def server_field(**kwargs: Any) -> Any:
    """A server-assigned field: populated by the deserializer, frozen afterwards."""
    return Field(default=None, frozen=True, **kwargs)
