"""Polymorphic "generic" response items.

Dialog node outputs (``DialogNodeOutputGeneric``) and message responses
(``RuntimeResponseGeneric``) carry a list of response items whose shape
depends on the ``response_type`` discriminator.  Each family is a tagged
union: the discriminator is read first, the matching variant is validated,
and anything unrecognized (including a missing ``response_type``) falls back
to an ``Unknown*`` variant holding only the common fields plus the raw
payload, so newer server response types never break deserialization.
"""

from __future__ import annotations

from collections.abc import Callable, Collection
from typing import Annotated, Any, Literal, Union

from pydantic import (
    Discriminator,
    Field,
    SerializerFunctionWrapHandler,
    Tag,
    TypeAdapter,
    model_serializer,
    model_validator,
)

from models.base import AssistantModel
from models.runtime import MessageInput, RuntimeEntity, RuntimeIntent

UNKNOWN = "unknown"


# ── Documented values ─────────────────────────────────────────


class ResponseType:
    """Documented ``response_type`` discriminator values."""

    TEXT = "text"
    PAUSE = "pause"
    IMAGE = "image"
    OPTION = "option"
    CONNECT_TO_AGENT = "connect_to_agent"
    SEARCH_SKILL = "search_skill"
    SUGGESTION = "suggestion"
    CHANNEL_TRANSFER = "channel_transfer"


class SelectionPolicy:
    SEQUENTIAL = "sequential"
    RANDOM = "random"
    MULTILINE = "multiline"


class Preference:
    DROPDOWN = "dropdown"
    BUTTON = "button"


class QueryType:
    NATURAL_LANGUAGE = "natural_language"
    DISCOVERY_QUERY_LANGUAGE = "discovery_query_language"


# ── Shared parts ──────────────────────────────────────────────


class ResponseGenericChannel(AssistantModel):
    """A channel the response is intended for (e.g. ``slack``)."""

    channel: str | None = None


class DialogNodeOutputTextValuesElement(AssistantModel):
    text: str | None = None


class DialogNodeOutputOptionsElementValue(AssistantModel):
    """The input sent back to the assistant when the user picks an option."""

    input: MessageInput | None = None
    intents: list[RuntimeIntent] | None = None
    entities: list[RuntimeEntity] | None = None


class DialogNodeOutputOptionsElement(AssistantModel):
    label: str | None = None
    value: DialogNodeOutputOptionsElementValue | None = None


class AgentAvailabilityMessage(AssistantModel):
    message: str | None = None


class DialogNodeOutputConnectToAgentTransferInfo(AssistantModel):
    target: dict[str, dict[str, Any]] | None = None


class ChannelTransferTargetChat(AssistantModel):
    url: str | None = None


class ChannelTransferTarget(AssistantModel):
    chat: ChannelTransferTargetChat | None = None


class ChannelTransferInfo(AssistantModel):
    target: ChannelTransferTarget | None = None


class DialogSuggestionValue(AssistantModel):
    input: MessageInput | None = None
    intents: list[RuntimeIntent] | None = None
    entities: list[RuntimeEntity] | None = None


class DialogSuggestion(AssistantModel):
    """One disambiguation suggestion offered to the user."""

    label: str | None = None
    value: DialogSuggestionValue | None = None
    output: dict[str, Any] | None = None
    dialog_node: str | None = None


class _GenericItem(AssistantModel):
    channels: list[ResponseGenericChannel] | None = None


class _UnknownGenericItem(_GenericItem):
    """Fallback for an unrecognized ``response_type``.

    Only the common fields are exposed as attributes; the whole original
    object is kept in :attr:`raw` and written back on serialization.
    """

    response_type: str | None = None
    raw: dict[str, Any] = Field(default_factory=dict, exclude=True, repr=False)

    @model_validator(mode="before")
    @classmethod
    def _keep_raw(cls, data: Any) -> Any:
        if isinstance(data, dict):
            return {**data, "raw": dict(data)}
        return data

    @model_serializer(mode="wrap")
    def _merge_raw(self, handler: SerializerFunctionWrapHandler) -> dict[str, Any]:
        return {**self.raw, **handler(self)}


def _discriminate(known: Collection[str]) -> Callable[[Any], str]:
    def response_type_of(value: Any) -> str:
        if isinstance(value, dict):
            response_type = value.get("response_type")
        else:
            response_type = getattr(value, "response_type", None)
        return response_type if response_type in known else UNKNOWN

    return response_type_of


# ── DialogNodeOutputGeneric ───────────────────────────────────


class DialogNodeOutputText(_GenericItem):
    response_type: Literal["text"] = "text"
    values: list[DialogNodeOutputTextValuesElement] | None = None
    selection_policy: str | None = None
    delimiter: str | None = None


class DialogNodeOutputPause(_GenericItem):
    response_type: Literal["pause"] = "pause"
    time: int | None = None
    typing: bool | None = None


class DialogNodeOutputImage(_GenericItem):
    response_type: Literal["image"] = "image"
    source: str | None = None
    title: str | None = None
    description: str | None = None


class DialogNodeOutputOption(_GenericItem):
    response_type: Literal["option"] = "option"
    title: str | None = None
    description: str | None = None
    preference: str | None = None
    options: list[DialogNodeOutputOptionsElement] | None = None


class DialogNodeOutputConnectToAgent(_GenericItem):
    response_type: Literal["connect_to_agent"] = "connect_to_agent"
    message_to_human_agent: str | None = None
    agent_available: AgentAvailabilityMessage | None = None
    agent_unavailable: AgentAvailabilityMessage | None = None
    transfer_info: DialogNodeOutputConnectToAgentTransferInfo | None = None


class DialogNodeOutputSearchSkill(_GenericItem):
    response_type: Literal["search_skill"] = "search_skill"
    query: str | None = None
    query_type: str | None = None
    filter: str | None = None
    discovery_version: str | None = None


class DialogNodeOutputChannelTransfer(_GenericItem):
    response_type: Literal["channel_transfer"] = "channel_transfer"
    message_to_user: str | None = None
    transfer_info: ChannelTransferInfo | None = None


class UnknownDialogNodeOutputGeneric(_UnknownGenericItem):
    pass


_DIALOG_NODE_OUTPUT_TYPES = frozenset({
    ResponseType.TEXT,
    ResponseType.PAUSE,
    ResponseType.IMAGE,
    ResponseType.OPTION,
    ResponseType.CONNECT_TO_AGENT,
    ResponseType.SEARCH_SKILL,
    ResponseType.CHANNEL_TRANSFER,
})

DialogNodeOutputGeneric = Annotated[
    Union[
        Annotated[DialogNodeOutputText, Tag(ResponseType.TEXT)],
        Annotated[DialogNodeOutputPause, Tag(ResponseType.PAUSE)],
        Annotated[DialogNodeOutputImage, Tag(ResponseType.IMAGE)],
        Annotated[DialogNodeOutputOption, Tag(ResponseType.OPTION)],
        Annotated[DialogNodeOutputConnectToAgent, Tag(ResponseType.CONNECT_TO_AGENT)],
        Annotated[DialogNodeOutputSearchSkill, Tag(ResponseType.SEARCH_SKILL)],
        Annotated[DialogNodeOutputChannelTransfer, Tag(ResponseType.CHANNEL_TRANSFER)],
        Annotated[UnknownDialogNodeOutputGeneric, Tag(UNKNOWN)],
    ],
    Discriminator(_discriminate(_DIALOG_NODE_OUTPUT_TYPES)),
]


# ── RuntimeResponseGeneric ────────────────────────────────────


class RuntimeResponseText(_GenericItem):
    response_type: Literal["text"] = "text"
    text: str | None = None


class RuntimeResponsePause(_GenericItem):
    response_type: Literal["pause"] = "pause"
    time: int | None = None
    typing: bool | None = None


class RuntimeResponseImage(_GenericItem):
    response_type: Literal["image"] = "image"
    source: str | None = None
    title: str | None = None
    description: str | None = None


class RuntimeResponseOption(_GenericItem):
    response_type: Literal["option"] = "option"
    title: str | None = None
    description: str | None = None
    preference: str | None = None
    options: list[DialogNodeOutputOptionsElement] | None = None


class RuntimeResponseConnectToAgent(_GenericItem):
    response_type: Literal["connect_to_agent"] = "connect_to_agent"
    message_to_human_agent: str | None = None
    agent_available: AgentAvailabilityMessage | None = None
    agent_unavailable: AgentAvailabilityMessage | None = None
    transfer_info: DialogNodeOutputConnectToAgentTransferInfo | None = None
    topic: str | None = None
    dialog_node: str | None = None


class RuntimeResponseSuggestion(_GenericItem):
    response_type: Literal["suggestion"] = "suggestion"
    title: str | None = None
    suggestions: list[DialogSuggestion] | None = None


class RuntimeResponseChannelTransfer(_GenericItem):
    response_type: Literal["channel_transfer"] = "channel_transfer"
    message_to_user: str | None = None
    transfer_info: ChannelTransferInfo | None = None


class UnknownRuntimeResponseGeneric(_UnknownGenericItem):
    pass


_RUNTIME_RESPONSE_TYPES = frozenset({
    ResponseType.TEXT,
    ResponseType.PAUSE,
    ResponseType.IMAGE,
    ResponseType.OPTION,
    ResponseType.CONNECT_TO_AGENT,
    ResponseType.SUGGESTION,
    ResponseType.CHANNEL_TRANSFER,
})

RuntimeResponseGeneric = Annotated[
    Union[
        Annotated[RuntimeResponseText, Tag(ResponseType.TEXT)],
        Annotated[RuntimeResponsePause, Tag(ResponseType.PAUSE)],
        Annotated[RuntimeResponseImage, Tag(ResponseType.IMAGE)],
        Annotated[RuntimeResponseOption, Tag(ResponseType.OPTION)],
        Annotated[RuntimeResponseConnectToAgent, Tag(ResponseType.CONNECT_TO_AGENT)],
        Annotated[RuntimeResponseSuggestion, Tag(ResponseType.SUGGESTION)],
        Annotated[RuntimeResponseChannelTransfer, Tag(ResponseType.CHANNEL_TRANSFER)],
        Annotated[UnknownRuntimeResponseGeneric, Tag(UNKNOWN)],
    ],
    Discriminator(_discriminate(_RUNTIME_RESPONSE_TYPES)),
]


_dialog_node_output_adapter: TypeAdapter[Any] = TypeAdapter(DialogNodeOutputGeneric)
_runtime_response_adapter: TypeAdapter[Any] = TypeAdapter(RuntimeResponseGeneric)


def parse_dialog_node_output_generic(data: dict[str, Any]) -> Any:
    """Validate a single dialog-node output item into its variant."""
    return _dialog_node_output_adapter.validate_python(data)


def parse_runtime_response_generic(data: dict[str, Any]) -> Any:
    """Validate a single runtime response item into its variant."""
    return _runtime_response_adapter.validate_python(data)
