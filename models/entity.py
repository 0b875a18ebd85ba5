"""Entity, value, synonym and mention models.

A value is matched either by a list of synonyms or by a list of regular
expression patterns, never both; the request models reject payloads that set
both lists.
"""

from __future__ import annotations

import re
from datetime import datetime
from typing import Any

from pydantic import field_validator, model_validator

from models.base import AssistantModel, server_field
from models.intent import check_resource_name
from models.pagination import Pagination

# Unicode alphanumerics, underscore and hyphen; at most 128 characters.
_ENTITY_NAME_RE = re.compile(r"^[\w\-]{1,128}$")


class ValueType:
    """Documented values for ``Value.type``."""

    SYNONYMS = "synonyms"
    PATTERNS = "patterns"


# ── Synonyms ──────────────────────────────────────────────────


class Synonym(AssistantModel):
    synonym: str | None = None
    created: datetime | None = server_field()
    updated: datetime | None = server_field()


class CreateSynonym(AssistantModel):
    synonym: str


class UpdateSynonym(AssistantModel):
    synonym: str | None = None


class SynonymCollection(AssistantModel):
    synonyms: list[Synonym] | None = None
    pagination: Pagination | None = None


# ── Values ────────────────────────────────────────────────────


class Value(AssistantModel):
    value: str | None = None
    metadata: dict[str, Any] | None = None
    type: str | None = None
    synonyms: list[str] | None = None
    patterns: list[str] | None = None
    created: datetime | None = server_field()
    updated: datetime | None = server_field()


class _ValueBody(AssistantModel):
    metadata: dict[str, Any] | None = None
    type: str | None = None
    synonyms: list[str] | None = None
    patterns: list[str] | None = None

    @model_validator(mode="after")
    def _synonyms_or_patterns(self) -> _ValueBody:
        if self.synonyms is not None and self.patterns is not None:
            raise ValueError("a value has either synonyms or patterns, not both")
        return self


class CreateValue(_ValueBody):
    """Body of ``create_value``, also used inside entity create/update."""

    value: str


class UpdateValue(_ValueBody):
    """Body of ``update_value``; ``value`` renames the value."""

    value: str | None = None


class ValueCollection(AssistantModel):
    values: list[Value] | None = None
    pagination: Pagination | None = None


# ── Entities ──────────────────────────────────────────────────


class Entity(AssistantModel):
    entity: str | None = None
    description: str | None = None
    metadata: dict[str, Any] | None = None
    fuzzy_match: bool | None = None
    values: list[Value] | None = None
    created: datetime | None = server_field()
    updated: datetime | None = server_field()


class CreateEntity(AssistantModel):
    entity: str
    description: str | None = None
    metadata: dict[str, Any] | None = None
    fuzzy_match: bool | None = None
    values: list[CreateValue] | None = None

    @field_validator("entity")
    @classmethod
    def _check_name(cls, value: str) -> str:
        return check_resource_name(value, _ENTITY_NAME_RE, "entity")


class UpdateEntity(AssistantModel):
    entity: str | None = None
    description: str | None = None
    metadata: dict[str, Any] | None = None
    fuzzy_match: bool | None = None
    values: list[CreateValue] | None = None

    @field_validator("entity")
    @classmethod
    def _check_name(cls, value: str | None) -> str | None:
        return check_resource_name(value, _ENTITY_NAME_RE, "entity")


class EntityCollection(AssistantModel):
    entities: list[Entity] | None = None
    pagination: Pagination | None = None


# ── Mentions ──────────────────────────────────────────────────


class EntityMention(AssistantModel):
    """An annotated mention of an entity inside an intent example."""

    text: str | None = None
    intent: str | None = None
    location: list[int] | None = None


class EntityMentionCollection(AssistantModel):
    examples: list[EntityMention] | None = None
    pagination: Pagination | None = None
