"""Workspace models — the container of intents, entities and dialog."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from models.base import AssistantModel, server_field
from models.dialog_node import CreateDialogNode, DialogNode
from models.entity import CreateEntity, Entity
from models.intent import Counterexample, CreateCounterexample, CreateIntent, Intent
from models.pagination import Pagination


class WorkspaceStatus:
    NON_EXISTENT = "Non Existent"
    TRAINING = "Training"
    FAILED = "Failed"
    AVAILABLE = "Available"
    UNAVAILABLE = "Unavailable"


class DisambiguationSensitivity:
    AUTO = "auto"
    HIGH = "high"
    MEDIUM_HIGH = "medium_high"
    MEDIUM = "medium"
    MEDIUM_LOW = "medium_low"
    LOW = "low"


# ── System settings ───────────────────────────────────────────


class WorkspaceSystemSettingsTooling(AssistantModel):
    store_generic_responses: bool | None = None


class WorkspaceSystemSettingsDisambiguation(AssistantModel):
    prompt: str | None = None
    none_of_the_above_prompt: str | None = None
    enabled: bool | None = None
    sensitivity: str | None = None
    randomize: bool | None = None
    max_suggestions: int | None = None
    suggestion_text_policy: str | None = None


class WorkspaceSystemSettingsOffTopic(AssistantModel):
    enabled: bool | None = None


class WorkspaceSystemSettingsSystemEntities(AssistantModel):
    enabled: bool | None = None


class WorkspaceSystemSettings(AssistantModel):
    tooling: WorkspaceSystemSettingsTooling | None = None
    disambiguation: WorkspaceSystemSettingsDisambiguation | None = None
    human_agent_assist: dict[str, Any] | None = None
    spelling_suggestions: bool | None = None
    spelling_auto_correct: bool | None = None
    system_entities: WorkspaceSystemSettingsSystemEntities | None = None
    off_topic: WorkspaceSystemSettingsOffTopic | None = None


# ── Webhooks ──────────────────────────────────────────────────


class WebhookHeader(AssistantModel):
    name: str | None = None
    value: str | None = None


class Webhook(AssistantModel):
    """A webhook callable from dialog nodes of the workspace."""

    url: str | None = None
    name: str | None = None
    headers: list[WebhookHeader] | None = None


# ── Request / response ────────────────────────────────────────


class Workspace(AssistantModel):
    """A workspace as returned by the service.

    ``intents``, ``entities``, ``dialog_nodes`` and ``counterexamples`` are
    only populated when the workspace is fetched with ``export=True``.
    """

    workspace_id: str | None = server_field()
    name: str | None = None
    description: str | None = None
    language: str | None = None
    metadata: dict[str, Any] | None = None
    learning_opt_out: bool | None = None
    system_settings: WorkspaceSystemSettings | None = None
    status: str | None = server_field()
    webhooks: list[Webhook] | None = None
    intents: list[Intent] | None = None
    entities: list[Entity] | None = None
    dialog_nodes: list[DialogNode] | None = None
    counterexamples: list[Counterexample] | None = None
    created: datetime | None = server_field()
    updated: datetime | None = server_field()


class CreateWorkspace(AssistantModel):
    """Body of ``create_workspace``; everything is optional."""

    name: str | None = None
    description: str | None = None
    language: str | None = None
    metadata: dict[str, Any] | None = None
    learning_opt_out: bool | None = None
    system_settings: WorkspaceSystemSettings | None = None
    intents: list[CreateIntent] | None = None
    entities: list[CreateEntity] | None = None
    dialog_nodes: list[CreateDialogNode] | None = None
    counterexamples: list[CreateCounterexample] | None = None
    webhooks: list[Webhook] | None = None


class UpdateWorkspace(CreateWorkspace):
    """Body of ``update_workspace``.

    Collections that are set replace the existing ones unless the operation is
    called with ``append=True``.
    """


class WorkspaceCollection(AssistantModel):
    workspaces: list[Workspace] | None = None
    pagination: Pagination | None = None
