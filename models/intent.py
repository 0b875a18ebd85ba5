"""Intent, example and counterexample models."""

from __future__ import annotations

import re
from datetime import datetime

from pydantic import field_validator

from models.base import AssistantModel, server_field
from models.pagination import Pagination

RESERVED_PREFIX = "sys-"

# Unicode alphanumerics, underscore, hyphen and dot; at most 128 characters.
_INTENT_NAME_RE = re.compile(r"^[\w.\-]{1,128}$")


def check_resource_name(name: str | None, pattern: re.Pattern[str], kind: str) -> str | None:
    """Validate an intent/entity name against the service's naming rules."""
    if name is None:
        return name
    if not pattern.match(name):
        raise ValueError(f"invalid {kind} name {name!r}")
    if name.startswith(RESERVED_PREFIX):
        raise ValueError(f"{kind} name {name!r} must not start with {RESERVED_PREFIX!r}")
    return name


class Mention(AssistantModel):
    """An entity mention annotated inside an intent example."""

    entity: str | None = None
    location: list[int] | None = None


# ── Examples ──────────────────────────────────────────────────


class Example(AssistantModel):
    text: str | None = None
    mentions: list[Mention] | None = None
    created: datetime | None = server_field()
    updated: datetime | None = server_field()


class CreateExample(AssistantModel):
    text: str
    mentions: list[Mention] | None = None


class UpdateExample(AssistantModel):
    text: str | None = None
    mentions: list[Mention] | None = None


class ExampleCollection(AssistantModel):
    examples: list[Example] | None = None
    pagination: Pagination | None = None


# ── Intents ───────────────────────────────────────────────────


class Intent(AssistantModel):
    intent: str | None = None
    description: str | None = None
    examples: list[Example] | None = None
    created: datetime | None = server_field()
    updated: datetime | None = server_field()


class CreateIntent(AssistantModel):
    """Body of ``create_intent``, also used inside workspace create/update."""

    intent: str
    description: str | None = None
    examples: list[CreateExample] | None = None

    @field_validator("intent")
    @classmethod
    def _check_name(cls, value: str) -> str:
        return check_resource_name(value, _INTENT_NAME_RE, "intent")


class UpdateIntent(AssistantModel):
    """Body of ``update_intent``; ``intent`` renames the intent."""

    intent: str | None = None
    description: str | None = None
    examples: list[CreateExample] | None = None

    @field_validator("intent")
    @classmethod
    def _check_name(cls, value: str | None) -> str | None:
        return check_resource_name(value, _INTENT_NAME_RE, "intent")


class IntentCollection(AssistantModel):
    intents: list[Intent] | None = None
    pagination: Pagination | None = None


# ── Counterexamples ───────────────────────────────────────────


class Counterexample(AssistantModel):
    """User input marked as irrelevant to every intent of the workspace."""

    text: str | None = None
    created: datetime | None = server_field()
    updated: datetime | None = server_field()


class CreateCounterexample(AssistantModel):
    text: str


class UpdateCounterexample(AssistantModel):
    text: str | None = None


class CounterexampleCollection(AssistantModel):
    counterexamples: list[Counterexample] | None = None
    pagination: Pagination | None = None
