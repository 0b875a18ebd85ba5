"""Runtime recognition models — user input, detected intents and entities.

Shared by ``MessageRequest`` / ``MessageResponse`` and by the option values of
generic dialog responses.
"""

from __future__ import annotations

from typing import Any

from pydantic import ConfigDict

from models.base import AssistantModel, server_field


class MessageInput(AssistantModel):
    """The user input of a conversational turn.

    Extra keys are kept so that client-specific input properties survive a
    round trip.
    """

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    text: str | None = None
    spelling_suggestions: bool | None = None
    spelling_auto_correct: bool | None = None


class MessageResponseInput(MessageInput):
    """The user input as echoed by the service, with spelling corrections.

    Passed back in a :class:`~models.message.MessageRequest`, it serializes as
    a plain :class:`MessageInput`.
    """

    suggested_text: str | None = server_field()
    original_text: str | None = server_field()


class RuntimeIntent(AssistantModel):
    """An intent recognized from the user input."""

    intent: str | None = None
    confidence: float | None = None


class CaptureGroup(AssistantModel):
    group: str | None = None
    location: list[int] | None = None


class Granularity:
    """Documented values for :attr:`RuntimeEntityInterpretation.granularity`."""

    DAY = "day"
    FORTNIGHT = "fortnight"
    HOUR = "hour"
    INSTANT = "instant"
    MINUTE = "minute"
    MONTH = "month"
    QUARTER = "quarter"
    SECOND = "second"
    WEEK = "week"
    WEEKEND = "weekend"
    YEAR = "year"


class RuntimeEntityInterpretation(AssistantModel):
    """Interpretation of a ``@sys-date`` / ``@sys-time`` / ``@sys-number`` mention."""

    calendar_type: str | None = None
    datetime_link: str | None = None
    festival: str | None = None
    granularity: str | None = None
    range_link: str | None = None
    range_modifier: str | None = None
    relative_day: float | None = None
    relative_month: float | None = None
    relative_week: float | None = None
    relative_weekend: float | None = None
    relative_year: float | None = None
    specific_day: float | None = None
    specific_day_of_week: str | None = None
    specific_month: float | None = None
    specific_quarter: float | None = None
    specific_year: float | None = None
    numeric_value: float | None = None
    subtype: str | None = None
    part_of_day: str | None = None
    relative_hour: float | None = None
    relative_minute: float | None = None
    relative_second: float | None = None
    specific_hour: float | None = None
    specific_minute: float | None = None
    specific_second: float | None = None
    timezone: str | None = None


class RuntimeEntityAlternative(AssistantModel):
    value: str | None = None
    confidence: float | None = None


class RuntimeEntityRole(AssistantModel):
    type: str | None = None


class RuntimeEntity(AssistantModel):
    """An entity value detected in the user input."""

    entity: str | None = None
    location: list[int] | None = None
    value: str | None = None
    confidence: float | None = None
    metadata: dict[str, Any] | None = None
    groups: list[CaptureGroup] | None = None
    interpretation: RuntimeEntityInterpretation | None = None
    alternatives: list[RuntimeEntityAlternative] | None = None
    role: RuntimeEntityRole | None = None
