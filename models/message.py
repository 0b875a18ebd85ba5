"""Message models — one conversational turn.

The ``context`` bag is opaque state owned by the dialog: the client never
interprets it, it only echoes the previous response's context into the next
request.  Unknown keys are therefore preserved on both ``Context`` and
``OutputData``.
"""

from __future__ import annotations

from typing import Any

from pydantic import ConfigDict

from models.base import AssistantModel, server_field
from models.dialog_node import DialogNodeAction
from models.generic import RuntimeResponseGeneric
from models.runtime import MessageInput, MessageResponseInput, RuntimeEntity, RuntimeIntent


class LogLevel:
    INFO = "info"
    ERROR = "error"
    WARN = "warn"


class MessageContextMetadata(AssistantModel):
    deployment: str | None = None
    user_id: str | None = None


class Context(AssistantModel):
    """Conversation state carried across turns."""

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    conversation_id: str | None = None
    system: dict[str, Any] | None = None
    metadata: MessageContextMetadata | None = None


class LogMessage(AssistantModel):
    level: str | None = None
    msg: str | None = None


class DialogNodeVisitedDetails(AssistantModel):
    dialog_node: str | None = None
    title: str | None = None
    conditions: str | None = None


class OutputData(AssistantModel):
    """What the dialog produced for the turn."""

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    nodes_visited: list[str] | None = None
    nodes_visited_details: list[DialogNodeVisitedDetails] | None = None
    log_messages: list[LogMessage] | None = None
    text: list[str] | None = None
    generic: list[RuntimeResponseGeneric] | None = None


class MessageRequest(AssistantModel):
    """Body of ``message``.

    To continue a conversation, pass the ``context`` of the previous
    :class:`MessageResponse`; to keep already recognized intents or entities,
    pass them back as well.
    """

    input: MessageInput | None = None
    intents: list[RuntimeIntent] | None = None
    entities: list[RuntimeEntity] | None = None
    alternate_intents: bool | None = None
    context: Context | None = None
    output: OutputData | None = None
    user_id: str | None = None


class MessageResponse(AssistantModel):
    input: MessageResponseInput | None = None
    intents: list[RuntimeIntent] | None = None
    entities: list[RuntimeEntity] | None = None
    alternate_intents: bool | None = None
    context: Context | None = None
    output: OutputData | None = None
    actions: list[DialogNodeAction] | None = server_field()
    user_id: str | None = None
