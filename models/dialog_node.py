"""Dialog node models — the ordered dialog tree of a workspace."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import ConfigDict

from models.base import AssistantModel, server_field
from models.generic import DialogNodeOutputGeneric
from models.pagination import Pagination


# ── Documented values ─────────────────────────────────────────


class DialogNodeType:
    STANDARD = "standard"
    EVENT_HANDLER = "event_handler"
    FRAME = "frame"
    SLOT = "slot"
    RESPONSE_CONDITION = "response_condition"
    FOLDER = "folder"


class DialogNodeEventName:
    FOCUS = "focus"
    INPUT = "input"
    FILLED = "filled"
    VALIDATE = "validate"
    FILLED_MULTIPLE = "filled_multiple"
    GENERIC = "generic"
    NOMATCH = "nomatch"
    NOMATCH_RESPONSES_DEPLETED = "nomatch_responses_depleted"
    DIGRESSION_RETURN_PROMPT = "digression_return_prompt"


class DigressIn:
    NOT_AVAILABLE = "not_available"
    RETURNS = "returns"
    DOES_NOT_RETURN = "does_not_return"


class DigressOut:
    ALLOW_RETURNING = "allow_returning"
    ALLOW_ALL = "allow_all"
    ALLOW_ALL_NEVER_RETURN = "allow_all_never_return"


class DigressOutSlots:
    NOT_ALLOWED = "not_allowed"
    ALLOW_RETURNING = "allow_returning"
    ALLOW_ALL = "allow_all"


class NextStepBehavior:
    GET_USER_INPUT = "get_user_input"
    SKIP_USER_INPUT = "skip_user_input"
    JUMP_TO = "jump_to"
    REPROMPT = "reprompt"
    SKIP_SLOT = "skip_slot"
    SKIP_ALL_SLOTS = "skip_all_slots"


class NextStepSelector:
    CONDITION = "condition"
    CLIENT = "client"
    USER_INPUT = "user_input"
    BODY = "body"


class DialogNodeActionType:
    CLIENT = "client"
    SERVER = "server"
    CLOUD_FUNCTION = "cloud_function"
    WEB_ACTION = "web_action"
    WEBHOOK = "webhook"


# ── Parts ─────────────────────────────────────────────────────


class DialogNodeNextStep(AssistantModel):
    """What happens after the node is processed.

    ``dialog_node`` is required by the service when ``behavior`` is
    ``jump_to``.
    """

    behavior: str | None = None
    dialog_node: str | None = None
    selector: str | None = None


class DialogNodeAction(AssistantModel):
    """A programmatic call (client, cloud function, webhook) made by the node."""

    name: str | None = None
    type: str | None = None
    parameters: dict[str, Any] | None = None
    result_variable: str | None = None
    credentials: str | None = None


class DialogNodeOutputModifiers(AssistantModel):
    overwrite: bool | None = None


class DialogNodeOutput(AssistantModel):
    """The output of a dialog node.

    Besides the typed ``generic`` items the service accepts arbitrary
    properties here (legacy ``text`` blocks, client data), so extra keys are
    kept.
    """

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    generic: list[DialogNodeOutputGeneric] | None = None
    modifiers: DialogNodeOutputModifiers | None = None


# ── Request / response ────────────────────────────────────────


class _DialogNodeFields(AssistantModel):
    dialog_node: str | None = None
    description: str | None = None
    conditions: str | None = None
    parent: str | None = None
    previous_sibling: str | None = None
    output: DialogNodeOutput | None = None
    context: dict[str, Any] | None = None
    metadata: dict[str, Any] | None = None
    next_step: DialogNodeNextStep | None = None
    title: str | None = None
    type: str | None = None
    event_name: str | None = None
    variable: str | None = None
    actions: list[DialogNodeAction] | None = None
    digress_in: str | None = None
    digress_out: str | None = None
    digress_out_slots: str | None = None
    user_label: str | None = None
    disambiguation_opt_out: bool | None = None


class DialogNode(_DialogNodeFields):
    """A dialog node as returned by the service."""

    disabled: bool | None = server_field()
    created: datetime | None = server_field()
    updated: datetime | None = server_field()


class CreateDialogNode(_DialogNodeFields):
    """Body of ``create_dialog_node``."""

    dialog_node: str


class UpdateDialogNode(_DialogNodeFields):
    """Body of ``update_dialog_node``; only the fields that are set change."""


class DialogNodeCollection(AssistantModel):
    dialog_nodes: list[DialogNode] | None = None
    pagination: Pagination | None = None
