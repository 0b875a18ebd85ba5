"""Watson Assistant V1 client — one method per REST operation.

Every operation is non-blocking: it validates its arguments, schedules the
exchange on the running event loop and returns ``True`` (``False`` when no
connector could be resolved).  Exactly one of ``success_callback(result,
custom_data)`` / ``fail_callback(error, custom_data)`` fires later.

``custom_data`` is a copy of the caller's dict, enriched with the raw
``response`` text, response ``headers``, ``status_code`` and, when the body
parsed, the ``json`` payload.

Example::

    service = AssistantService("2019-02-28", Credentials(api_key="..."))
    service.message(on_reply, on_error, "my-workspace",
                    MessageRequest(input=MessageInput(text="hello")))
"""

from __future__ import annotations

import logging
from typing import Any

from config.settings import DEFAULT_ASSISTANT_URL, get_settings
from models.dialog_node import CreateDialogNode, DialogNode, DialogNodeCollection, UpdateDialogNode
from models.entity import (
    CreateEntity,
    CreateSynonym,
    CreateValue,
    Entity,
    EntityCollection,
    EntityMentionCollection,
    Synonym,
    SynonymCollection,
    UpdateEntity,
    UpdateSynonym,
    UpdateValue,
    Value,
    ValueCollection,
)
from models.intent import (
    Counterexample,
    CounterexampleCollection,
    CreateCounterexample,
    CreateExample,
    CreateIntent,
    Example,
    ExampleCollection,
    Intent,
    IntentCollection,
    UpdateCounterexample,
    UpdateExample,
    UpdateIntent,
)
from models.log import LogCollection
from models.message import MessageRequest, MessageResponse
from models.workspace import CreateWorkspace, UpdateWorkspace, Workspace, WorkspaceCollection
from services.credentials import Credentials
from services.watson_service import FailCallback, SuccessCallback, WatsonService, encode_path as _p

logger = logging.getLogger(__name__)

# Delete operations answer with an empty JSON object.
Empty = dict[str, Any]

# ---------------------------------------------------------------------------
# Module-level singleton
# ---------------------------------------------------------------------------
_service: AssistantService | None = None


class AssistantService(WatsonService):
    """Client for the Watson Assistant V1 API."""

    service_name = "conversation"
    service_version = "V1"
    default_url = DEFAULT_ASSISTANT_URL

    # ── Message ─────────────────────────────────────────────────

    def message(
        self,
        success_callback: SuccessCallback[MessageResponse],
        fail_callback: FailCallback,
        workspace_id: str,
        body: MessageRequest | None = None,
        *,
        nodes_visited_details: bool | None = None,
        custom_data: dict[str, Any] | None = None,
    ) -> bool:
        """Send user input to a workspace and get the dialog's response.

        Conversation state lives in ``body.context``: to continue a
        conversation, send the ``context`` from the previous response.
        """
        self._require("message", success_callback=success_callback,
                      fail_callback=fail_callback, workspace_id=workspace_id)
        return self._submit(
            "message", "POST", f"/v1/workspaces/{_p(workspace_id)}/message",
            MessageResponse, success_callback, fail_callback,
            params={"nodes_visited_details": nodes_visited_details},
            body=body if body is not None else MessageRequest(),
            custom_data=custom_data,
        )

    # ── Workspaces ──────────────────────────────────────────────

    def list_workspaces(
        self,
        success_callback: SuccessCallback[WorkspaceCollection],
        fail_callback: FailCallback,
        *,
        page_limit: int | None = None,
        include_count: bool | None = None,
        sort: str | None = None,
        cursor: str | None = None,
        include_audit: bool | None = None,
        custom_data: dict[str, Any] | None = None,
    ) -> bool:
        """List the workspaces associated with the service instance."""
        self._require("list_workspaces", success_callback=success_callback,
                      fail_callback=fail_callback)
        return self._submit(
            "list_workspaces", "GET", "/v1/workspaces",
            WorkspaceCollection, success_callback, fail_callback,
            params={"page_limit": page_limit, "include_count": include_count, "sort": sort,
                    "cursor": cursor, "include_audit": include_audit},
            custom_data=custom_data,
        )

    def create_workspace(
        self,
        success_callback: SuccessCallback[Workspace],
        fail_callback: FailCallback,
        body: CreateWorkspace | None = None,
        *,
        custom_data: dict[str, Any] | None = None,
    ) -> bool:
        """Create a workspace, optionally with its intents, entities and dialog.

        Every field of ``body`` is optional; an omitted body creates an empty
        workspace with server defaults.
        """
        self._require("create_workspace", success_callback=success_callback,
                      fail_callback=fail_callback)
        return self._submit(
            "create_workspace", "POST", "/v1/workspaces",
            Workspace, success_callback, fail_callback,
            body=body if body is not None else CreateWorkspace(),
            custom_data=custom_data,
        )

    def get_workspace(
        self,
        success_callback: SuccessCallback[Workspace],
        fail_callback: FailCallback,
        workspace_id: str,
        *,
        export: bool | None = None,
        include_audit: bool | None = None,
        sort: str | None = None,
        custom_data: dict[str, Any] | None = None,
    ) -> bool:
        """Get a workspace; with ``export=True`` its full content is included."""
        self._require("get_workspace", success_callback=success_callback,
                      fail_callback=fail_callback, workspace_id=workspace_id)
        return self._submit(
            "get_workspace", "GET", f"/v1/workspaces/{_p(workspace_id)}",
            Workspace, success_callback, fail_callback,
            params={"export": export, "include_audit": include_audit, "sort": sort},
            custom_data=custom_data,
        )

    def update_workspace(
        self,
        success_callback: SuccessCallback[Workspace],
        fail_callback: FailCallback,
        workspace_id: str,
        body: UpdateWorkspace | None = None,
        *,
        append: bool | None = None,
        custom_data: dict[str, Any] | None = None,
    ) -> bool:
        """Update a workspace.

        Fields omitted from ``body`` are left unchanged.  Collections that are
        set replace the existing ones, unless ``append=True``, in which case
        new elements are added and existing ones updated.
        """
        self._require("update_workspace", success_callback=success_callback,
                      fail_callback=fail_callback, workspace_id=workspace_id)
        return self._submit(
            "update_workspace", "POST", f"/v1/workspaces/{_p(workspace_id)}",
            Workspace, success_callback, fail_callback,
            params={"append": append},
            body=body if body is not None else UpdateWorkspace(),
            custom_data=custom_data,
        )

    def delete_workspace(
        self,
        success_callback: SuccessCallback[Empty],
        fail_callback: FailCallback,
        workspace_id: str,
        *,
        custom_data: dict[str, Any] | None = None,
    ) -> bool:
        self._require("delete_workspace", success_callback=success_callback,
                      fail_callback=fail_callback, workspace_id=workspace_id)
        return self._submit(
            "delete_workspace", "DELETE", f"/v1/workspaces/{_p(workspace_id)}",
            Empty, success_callback, fail_callback,
            custom_data=custom_data,
        )

    # ── Intents ─────────────────────────────────────────────────

    def list_intents(
        self,
        success_callback: SuccessCallback[IntentCollection],
        fail_callback: FailCallback,
        workspace_id: str,
        *,
        export: bool | None = None,
        page_limit: int | None = None,
        include_count: bool | None = None,
        sort: str | None = None,
        cursor: str | None = None,
        include_audit: bool | None = None,
        custom_data: dict[str, Any] | None = None,
    ) -> bool:
        self._require("list_intents", success_callback=success_callback,
                      fail_callback=fail_callback, workspace_id=workspace_id)
        return self._submit(
            "list_intents", "GET", f"/v1/workspaces/{_p(workspace_id)}/intents",
            IntentCollection, success_callback, fail_callback,
            params={"export": export, "page_limit": page_limit, "include_count": include_count,
                    "sort": sort, "cursor": cursor, "include_audit": include_audit},
            custom_data=custom_data,
        )

    def create_intent(
        self,
        success_callback: SuccessCallback[Intent],
        fail_callback: FailCallback,
        workspace_id: str,
        body: CreateIntent,
        *,
        custom_data: dict[str, Any] | None = None,
    ) -> bool:
        """Create an intent; ``body.intent`` must not start with ``sys-``."""
        self._require("create_intent", success_callback=success_callback,
                      fail_callback=fail_callback, workspace_id=workspace_id, body=body)
        return self._submit(
            "create_intent", "POST", f"/v1/workspaces/{_p(workspace_id)}/intents",
            Intent, success_callback, fail_callback,
            body=body, custom_data=custom_data,
        )

    def get_intent(
        self,
        success_callback: SuccessCallback[Intent],
        fail_callback: FailCallback,
        workspace_id: str,
        intent: str,
        *,
        export: bool | None = None,
        include_audit: bool | None = None,
        custom_data: dict[str, Any] | None = None,
    ) -> bool:
        self._require("get_intent", success_callback=success_callback,
                      fail_callback=fail_callback, workspace_id=workspace_id, intent=intent)
        return self._submit(
            "get_intent", "GET", f"/v1/workspaces/{_p(workspace_id)}/intents/{_p(intent)}",
            Intent, success_callback, fail_callback,
            params={"export": export, "include_audit": include_audit},
            custom_data=custom_data,
        )

    def update_intent(
        self,
        success_callback: SuccessCallback[Intent],
        fail_callback: FailCallback,
        workspace_id: str,
        intent: str,
        body: UpdateIntent,
        *,
        custom_data: dict[str, Any] | None = None,
    ) -> bool:
        """Update an intent.  A set ``examples`` list replaces the old one."""
        self._require("update_intent", success_callback=success_callback,
                      fail_callback=fail_callback, workspace_id=workspace_id,
                      intent=intent, body=body)
        return self._submit(
            "update_intent", "POST", f"/v1/workspaces/{_p(workspace_id)}/intents/{_p(intent)}",
            Intent, success_callback, fail_callback,
            body=body, custom_data=custom_data,
        )

    def delete_intent(
        self,
        success_callback: SuccessCallback[Empty],
        fail_callback: FailCallback,
        workspace_id: str,
        intent: str,
        *,
        custom_data: dict[str, Any] | None = None,
    ) -> bool:
        self._require("delete_intent", success_callback=success_callback,
                      fail_callback=fail_callback, workspace_id=workspace_id, intent=intent)
        return self._submit(
            "delete_intent", "DELETE", f"/v1/workspaces/{_p(workspace_id)}/intents/{_p(intent)}",
            Empty, success_callback, fail_callback,
            custom_data=custom_data,
        )

    # ── Examples ────────────────────────────────────────────────

    def list_examples(
        self,
        success_callback: SuccessCallback[ExampleCollection],
        fail_callback: FailCallback,
        workspace_id: str,
        intent: str,
        *,
        page_limit: int | None = None,
        include_count: bool | None = None,
        sort: str | None = None,
        cursor: str | None = None,
        include_audit: bool | None = None,
        custom_data: dict[str, Any] | None = None,
    ) -> bool:
        self._require("list_examples", success_callback=success_callback,
                      fail_callback=fail_callback, workspace_id=workspace_id, intent=intent)
        return self._submit(
            "list_examples", "GET",
            f"/v1/workspaces/{_p(workspace_id)}/intents/{_p(intent)}/examples",
            ExampleCollection, success_callback, fail_callback,
            params={"page_limit": page_limit, "include_count": include_count, "sort": sort,
                    "cursor": cursor, "include_audit": include_audit},
            custom_data=custom_data,
        )

    def create_example(
        self,
        success_callback: SuccessCallback[Example],
        fail_callback: FailCallback,
        workspace_id: str,
        intent: str,
        body: CreateExample,
        *,
        custom_data: dict[str, Any] | None = None,
    ) -> bool:
        self._require("create_example", success_callback=success_callback,
                      fail_callback=fail_callback, workspace_id=workspace_id,
                      intent=intent, body=body)
        return self._submit(
            "create_example", "POST",
            f"/v1/workspaces/{_p(workspace_id)}/intents/{_p(intent)}/examples",
            Example, success_callback, fail_callback,
            body=body, custom_data=custom_data,
        )

    def get_example(
        self,
        success_callback: SuccessCallback[Example],
        fail_callback: FailCallback,
        workspace_id: str,
        intent: str,
        text: str,
        *,
        include_audit: bool | None = None,
        custom_data: dict[str, Any] | None = None,
    ) -> bool:
        self._require("get_example", success_callback=success_callback,
                      fail_callback=fail_callback, workspace_id=workspace_id,
                      intent=intent, text=text)
        return self._submit(
            "get_example", "GET",
            f"/v1/workspaces/{_p(workspace_id)}/intents/{_p(intent)}/examples/{_p(text)}",
            Example, success_callback, fail_callback,
            params={"include_audit": include_audit},
            custom_data=custom_data,
        )

    def update_example(
        self,
        success_callback: SuccessCallback[Example],
        fail_callback: FailCallback,
        workspace_id: str,
        intent: str,
        text: str,
        body: UpdateExample,
        *,
        custom_data: dict[str, Any] | None = None,
    ) -> bool:
        self._require("update_example", success_callback=success_callback,
                      fail_callback=fail_callback, workspace_id=workspace_id,
                      intent=intent, text=text, body=body)
        return self._submit(
            "update_example", "POST",
            f"/v1/workspaces/{_p(workspace_id)}/intents/{_p(intent)}/examples/{_p(text)}",
            Example, success_callback, fail_callback,
            body=body, custom_data=custom_data,
        )

    def delete_example(
        self,
        success_callback: SuccessCallback[Empty],
        fail_callback: FailCallback,
        workspace_id: str,
        intent: str,
        text: str,
        *,
        custom_data: dict[str, Any] | None = None,
    ) -> bool:
        self._require("delete_example", success_callback=success_callback,
                      fail_callback=fail_callback, workspace_id=workspace_id,
                      intent=intent, text=text)
        return self._submit(
            "delete_example", "DELETE",
            f"/v1/workspaces/{_p(workspace_id)}/intents/{_p(intent)}/examples/{_p(text)}",
            Empty, success_callback, fail_callback,
            custom_data=custom_data,
        )

    # ── Counterexamples ─────────────────────────────────────────

    def list_counterexamples(
        self,
        success_callback: SuccessCallback[CounterexampleCollection],
        fail_callback: FailCallback,
        workspace_id: str,
        *,
        page_limit: int | None = None,
        include_count: bool | None = None,
        sort: str | None = None,
        cursor: str | None = None,
        include_audit: bool | None = None,
        custom_data: dict[str, Any] | None = None,
    ) -> bool:
        """List the inputs marked as irrelevant to the workspace."""
        self._require("list_counterexamples", success_callback=success_callback,
                      fail_callback=fail_callback, workspace_id=workspace_id)
        return self._submit(
            "list_counterexamples", "GET", f"/v1/workspaces/{_p(workspace_id)}/counterexamples",
            CounterexampleCollection, success_callback, fail_callback,
            params={"page_limit": page_limit, "include_count": include_count, "sort": sort,
                    "cursor": cursor, "include_audit": include_audit},
            custom_data=custom_data,
        )

    def create_counterexample(
        self,
        success_callback: SuccessCallback[Counterexample],
        fail_callback: FailCallback,
        workspace_id: str,
        body: CreateCounterexample,
        *,
        custom_data: dict[str, Any] | None = None,
    ) -> bool:
        self._require("create_counterexample", success_callback=success_callback,
                      fail_callback=fail_callback, workspace_id=workspace_id, body=body)
        return self._submit(
            "create_counterexample", "POST", f"/v1/workspaces/{_p(workspace_id)}/counterexamples",
            Counterexample, success_callback, fail_callback,
            body=body, custom_data=custom_data,
        )

    def get_counterexample(
        self,
        success_callback: SuccessCallback[Counterexample],
        fail_callback: FailCallback,
        workspace_id: str,
        text: str,
        *,
        include_audit: bool | None = None,
        custom_data: dict[str, Any] | None = None,
    ) -> bool:
        self._require("get_counterexample", success_callback=success_callback,
                      fail_callback=fail_callback, workspace_id=workspace_id, text=text)
        return self._submit(
            "get_counterexample", "GET",
            f"/v1/workspaces/{_p(workspace_id)}/counterexamples/{_p(text)}",
            Counterexample, success_callback, fail_callback,
            params={"include_audit": include_audit},
            custom_data=custom_data,
        )

    def update_counterexample(
        self,
        success_callback: SuccessCallback[Counterexample],
        fail_callback: FailCallback,
        workspace_id: str,
        text: str,
        body: UpdateCounterexample,
        *,
        custom_data: dict[str, Any] | None = None,
    ) -> bool:
        self._require("update_counterexample", success_callback=success_callback,
                      fail_callback=fail_callback, workspace_id=workspace_id,
                      text=text, body=body)
        return self._submit(
            "update_counterexample", "POST",
            f"/v1/workspaces/{_p(workspace_id)}/counterexamples/{_p(text)}",
            Counterexample, success_callback, fail_callback,
            body=body, custom_data=custom_data,
        )

    def delete_counterexample(
        self,
        success_callback: SuccessCallback[Empty],
        fail_callback: FailCallback,
        workspace_id: str,
        text: str,
        *,
        custom_data: dict[str, Any] | None = None,
    ) -> bool:
        self._require("delete_counterexample", success_callback=success_callback,
                      fail_callback=fail_callback, workspace_id=workspace_id, text=text)
        return self._submit(
            "delete_counterexample", "DELETE",
            f"/v1/workspaces/{_p(workspace_id)}/counterexamples/{_p(text)}",
            Empty, success_callback, fail_callback,
            custom_data=custom_data,
        )

    # ── Entities ────────────────────────────────────────────────

    def list_entities(
        self,
        success_callback: SuccessCallback[EntityCollection],
        fail_callback: FailCallback,
        workspace_id: str,
        *,
        export: bool | None = None,
        page_limit: int | None = None,
        include_count: bool | None = None,
        sort: str | None = None,
        cursor: str | None = None,
        include_audit: bool | None = None,
        custom_data: dict[str, Any] | None = None,
    ) -> bool:
        self._require("list_entities", success_callback=success_callback,
                      fail_callback=fail_callback, workspace_id=workspace_id)
        return self._submit(
            "list_entities", "GET", f"/v1/workspaces/{_p(workspace_id)}/entities",
            EntityCollection, success_callback, fail_callback,
            params={"export": export, "page_limit": page_limit, "include_count": include_count,
                    "sort": sort, "cursor": cursor, "include_audit": include_audit},
            custom_data=custom_data,
        )

    def create_entity(
        self,
        success_callback: SuccessCallback[Entity],
        fail_callback: FailCallback,
        workspace_id: str,
        body: CreateEntity,
        *,
        custom_data: dict[str, Any] | None = None,
    ) -> bool:
        """Create an entity; ``body.entity`` must not start with ``sys-``."""
        self._require("create_entity", success_callback=success_callback,
                      fail_callback=fail_callback, workspace_id=workspace_id, body=body)
        return self._submit(
            "create_entity", "POST", f"/v1/workspaces/{_p(workspace_id)}/entities",
            Entity, success_callback, fail_callback,
            body=body, custom_data=custom_data,
        )

    def get_entity(
        self,
        success_callback: SuccessCallback[Entity],
        fail_callback: FailCallback,
        workspace_id: str,
        entity: str,
        *,
        export: bool | None = None,
        include_audit: bool | None = None,
        custom_data: dict[str, Any] | None = None,
    ) -> bool:
        self._require("get_entity", success_callback=success_callback,
                      fail_callback=fail_callback, workspace_id=workspace_id, entity=entity)
        return self._submit(
            "get_entity", "GET", f"/v1/workspaces/{_p(workspace_id)}/entities/{_p(entity)}",
            Entity, success_callback, fail_callback,
            params={"export": export, "include_audit": include_audit},
            custom_data=custom_data,
        )

    def update_entity(
        self,
        success_callback: SuccessCallback[Entity],
        fail_callback: FailCallback,
        workspace_id: str,
        entity: str,
        body: UpdateEntity,
        *,
        custom_data: dict[str, Any] | None = None,
    ) -> bool:
        self._require("update_entity", success_callback=success_callback,
                      fail_callback=fail_callback, workspace_id=workspace_id,
                      entity=entity, body=body)
        return self._submit(
            "update_entity", "POST", f"/v1/workspaces/{_p(workspace_id)}/entities/{_p(entity)}",
            Entity, success_callback, fail_callback,
            body=body, custom_data=custom_data,
        )

    def delete_entity(
        self,
        success_callback: SuccessCallback[Empty],
        fail_callback: FailCallback,
        workspace_id: str,
        entity: str,
        *,
        custom_data: dict[str, Any] | None = None,
    ) -> bool:
        self._require("delete_entity", success_callback=success_callback,
                      fail_callback=fail_callback, workspace_id=workspace_id, entity=entity)
        return self._submit(
            "delete_entity", "DELETE", f"/v1/workspaces/{_p(workspace_id)}/entities/{_p(entity)}",
            Empty, success_callback, fail_callback,
            custom_data=custom_data,
        )

    def list_mentions(
        self,
        success_callback: SuccessCallback[EntityMentionCollection],
        fail_callback: FailCallback,
        workspace_id: str,
        entity: str,
        *,
        export: bool | None = None,
        include_audit: bool | None = None,
        custom_data: dict[str, Any] | None = None,
    ) -> bool:
        """List the user input examples that mention an entity."""
        self._require("list_mentions", success_callback=success_callback,
                      fail_callback=fail_callback, workspace_id=workspace_id, entity=entity)
        return self._submit(
            "list_mentions", "GET",
            f"/v1/workspaces/{_p(workspace_id)}/entities/{_p(entity)}/mentions",
            EntityMentionCollection, success_callback, fail_callback,
            params={"export": export, "include_audit": include_audit},
            custom_data=custom_data,
        )

    # ── Values ──────────────────────────────────────────────────

    def list_values(
        self,
        success_callback: SuccessCallback[ValueCollection],
        fail_callback: FailCallback,
        workspace_id: str,
        entity: str,
        *,
        export: bool | None = None,
        page_limit: int | None = None,
        include_count: bool | None = None,
        sort: str | None = None,
        cursor: str | None = None,
        include_audit: bool | None = None,
        custom_data: dict[str, Any] | None = None,
    ) -> bool:
        self._require("list_values", success_callback=success_callback,
                      fail_callback=fail_callback, workspace_id=workspace_id, entity=entity)
        return self._submit(
            "list_values", "GET",
            f"/v1/workspaces/{_p(workspace_id)}/entities/{_p(entity)}/values",
            ValueCollection, success_callback, fail_callback,
            params={"export": export, "page_limit": page_limit, "include_count": include_count,
                    "sort": sort, "cursor": cursor, "include_audit": include_audit},
            custom_data=custom_data,
        )

    def create_value(
        self,
        success_callback: SuccessCallback[Value],
        fail_callback: FailCallback,
        workspace_id: str,
        entity: str,
        body: CreateValue,
        *,
        custom_data: dict[str, Any] | None = None,
    ) -> bool:
        """Create an entity value with either synonyms or patterns, not both."""
        self._require("create_value", success_callback=success_callback,
                      fail_callback=fail_callback, workspace_id=workspace_id,
                      entity=entity, body=body)
        return self._submit(
            "create_value", "POST",
            f"/v1/workspaces/{_p(workspace_id)}/entities/{_p(entity)}/values",
            Value, success_callback, fail_callback,
            body=body, custom_data=custom_data,
        )

    def get_value(
        self,
        success_callback: SuccessCallback[Value],
        fail_callback: FailCallback,
        workspace_id: str,
        entity: str,
        value: str,
        *,
        export: bool | None = None,
        include_audit: bool | None = None,
        custom_data: dict[str, Any] | None = None,
    ) -> bool:
        self._require("get_value", success_callback=success_callback,
                      fail_callback=fail_callback, workspace_id=workspace_id,
                      entity=entity, value=value)
        return self._submit(
            "get_value", "GET",
            f"/v1/workspaces/{_p(workspace_id)}/entities/{_p(entity)}/values/{_p(value)}",
            Value, success_callback, fail_callback,
            params={"export": export, "include_audit": include_audit},
            custom_data=custom_data,
        )

    def update_value(
        self,
        success_callback: SuccessCallback[Value],
        fail_callback: FailCallback,
        workspace_id: str,
        entity: str,
        value: str,
        body: UpdateValue,
        *,
        custom_data: dict[str, Any] | None = None,
    ) -> bool:
        self._require("update_value", success_callback=success_callback,
                      fail_callback=fail_callback, workspace_id=workspace_id,
                      entity=entity, value=value, body=body)
        return self._submit(
            "update_value", "POST",
            f"/v1/workspaces/{_p(workspace_id)}/entities/{_p(entity)}/values/{_p(value)}",
            Value, success_callback, fail_callback,
            body=body, custom_data=custom_data,
        )

    def delete_value(
        self,
        success_callback: SuccessCallback[Empty],
        fail_callback: FailCallback,
        workspace_id: str,
        entity: str,
        value: str,
        *,
        custom_data: dict[str, Any] | None = None,
    ) -> bool:
        self._require("delete_value", success_callback=success_callback,
                      fail_callback=fail_callback, workspace_id=workspace_id,
                      entity=entity, value=value)
        return self._submit(
            "delete_value", "DELETE",
            f"/v1/workspaces/{_p(workspace_id)}/entities/{_p(entity)}/values/{_p(value)}",
            Empty, success_callback, fail_callback,
            custom_data=custom_data,
        )

    # ── Synonyms ────────────────────────────────────────────────

    def list_synonyms(
        self,
        success_callback: SuccessCallback[SynonymCollection],
        fail_callback: FailCallback,
        workspace_id: str,
        entity: str,
        value: str,
        *,
        page_limit: int | None = None,
        include_count: bool | None = None,
        sort: str | None = None,
        cursor: str | None = None,
        include_audit: bool | None = None,
        custom_data: dict[str, Any] | None = None,
    ) -> bool:
        self._require("list_synonyms", success_callback=success_callback,
                      fail_callback=fail_callback, workspace_id=workspace_id,
                      entity=entity, value=value)
        return self._submit(
            "list_synonyms", "GET",
            f"/v1/workspaces/{_p(workspace_id)}/entities/{_p(entity)}"
            f"/values/{_p(value)}/synonyms",
            SynonymCollection, success_callback, fail_callback,
            params={"page_limit": page_limit, "include_count": include_count, "sort": sort,
                    "cursor": cursor, "include_audit": include_audit},
            custom_data=custom_data,
        )

    def create_synonym(
        self,
        success_callback: SuccessCallback[Synonym],
        fail_callback: FailCallback,
        workspace_id: str,
        entity: str,
        value: str,
        body: CreateSynonym,
        *,
        custom_data: dict[str, Any] | None = None,
    ) -> bool:
        self._require("create_synonym", success_callback=success_callback,
                      fail_callback=fail_callback, workspace_id=workspace_id,
                      entity=entity, value=value, body=body)
        return self._submit(
            "create_synonym", "POST",
            f"/v1/workspaces/{_p(workspace_id)}/entities/{_p(entity)}"
            f"/values/{_p(value)}/synonyms",
            Synonym, success_callback, fail_callback,
            body=body, custom_data=custom_data,
        )

    def get_synonym(
        self,
        success_callback: SuccessCallback[Synonym],
        fail_callback: FailCallback,
        workspace_id: str,
        entity: str,
        value: str,
        synonym: str,
        *,
        include_audit: bool | None = None,
        custom_data: dict[str, Any] | None = None,
    ) -> bool:
        self._require("get_synonym", success_callback=success_callback,
                      fail_callback=fail_callback, workspace_id=workspace_id,
                      entity=entity, value=value, synonym=synonym)
        return self._submit(
            "get_synonym", "GET",
            f"/v1/workspaces/{_p(workspace_id)}/entities/{_p(entity)}"
            f"/values/{_p(value)}/synonyms/{_p(synonym)}",
            Synonym, success_callback, fail_callback,
            params={"include_audit": include_audit},
            custom_data=custom_data,
        )

    def update_synonym(
        self,
        success_callback: SuccessCallback[Synonym],
        fail_callback: FailCallback,
        workspace_id: str,
        entity: str,
        value: str,
        synonym: str,
        body: UpdateSynonym,
        *,
        custom_data: dict[str, Any] | None = None,
    ) -> bool:
        self._require("update_synonym", success_callback=success_callback,
                      fail_callback=fail_callback, workspace_id=workspace_id,
                      entity=entity, value=value, synonym=synonym, body=body)
        return self._submit(
            "update_synonym", "POST",
            f"/v1/workspaces/{_p(workspace_id)}/entities/{_p(entity)}"
            f"/values/{_p(value)}/synonyms/{_p(synonym)}",
            Synonym, success_callback, fail_callback,
            body=body, custom_data=custom_data,
        )

    def delete_synonym(
        self,
        success_callback: SuccessCallback[Empty],
        fail_callback: FailCallback,
        workspace_id: str,
        entity: str,
        value: str,
        synonym: str,
        *,
        custom_data: dict[str, Any] | None = None,
    ) -> bool:
        self._require("delete_synonym", success_callback=success_callback,
                      fail_callback=fail_callback, workspace_id=workspace_id,
                      entity=entity, value=value, synonym=synonym)
        return self._submit(
            "delete_synonym", "DELETE",
            f"/v1/workspaces/{_p(workspace_id)}/entities/{_p(entity)}"
            f"/values/{_p(value)}/synonyms/{_p(synonym)}",
            Empty, success_callback, fail_callback,
            custom_data=custom_data,
        )

    # ── Dialog nodes ────────────────────────────────────────────

    def list_dialog_nodes(
        self,
        success_callback: SuccessCallback[DialogNodeCollection],
        fail_callback: FailCallback,
        workspace_id: str,
        *,
        page_limit: int | None = None,
        include_count: bool | None = None,
        sort: str | None = None,
        cursor: str | None = None,
        include_audit: bool | None = None,
        custom_data: dict[str, Any] | None = None,
    ) -> bool:
        self._require("list_dialog_nodes", success_callback=success_callback,
                      fail_callback=fail_callback, workspace_id=workspace_id)
        return self._submit(
            "list_dialog_nodes", "GET", f"/v1/workspaces/{_p(workspace_id)}/dialog_nodes",
            DialogNodeCollection, success_callback, fail_callback,
            params={"page_limit": page_limit, "include_count": include_count, "sort": sort,
                    "cursor": cursor, "include_audit": include_audit},
            custom_data=custom_data,
        )

    def create_dialog_node(
        self,
        success_callback: SuccessCallback[DialogNode],
        fail_callback: FailCallback,
        workspace_id: str,
        body: CreateDialogNode,
        *,
        custom_data: dict[str, Any] | None = None,
    ) -> bool:
        """Create a dialog node.

        The node is placed in the tree through ``body.parent`` and
        ``body.previous_sibling``; its ``output.generic`` items are serialized
        with their ``response_type``.
        """
        self._require("create_dialog_node", success_callback=success_callback,
                      fail_callback=fail_callback, workspace_id=workspace_id, body=body)
        return self._submit(
            "create_dialog_node", "POST", f"/v1/workspaces/{_p(workspace_id)}/dialog_nodes",
            DialogNode, success_callback, fail_callback,
            body=body, custom_data=custom_data,
        )

    def get_dialog_node(
        self,
        success_callback: SuccessCallback[DialogNode],
        fail_callback: FailCallback,
        workspace_id: str,
        dialog_node: str,
        *,
        include_audit: bool | None = None,
        custom_data: dict[str, Any] | None = None,
    ) -> bool:
        self._require("get_dialog_node", success_callback=success_callback,
                      fail_callback=fail_callback, workspace_id=workspace_id,
                      dialog_node=dialog_node)
        return self._submit(
            "get_dialog_node", "GET",
            f"/v1/workspaces/{_p(workspace_id)}/dialog_nodes/{_p(dialog_node)}",
            DialogNode, success_callback, fail_callback,
            params={"include_audit": include_audit},
            custom_data=custom_data,
        )

    def update_dialog_node(
        self,
        success_callback: SuccessCallback[DialogNode],
        fail_callback: FailCallback,
        workspace_id: str,
        dialog_node: str,
        body: UpdateDialogNode,
        *,
        custom_data: dict[str, Any] | None = None,
    ) -> bool:
        self._require("update_dialog_node", success_callback=success_callback,
                      fail_callback=fail_callback, workspace_id=workspace_id,
                      dialog_node=dialog_node, body=body)
        return self._submit(
            "update_dialog_node", "POST",
            f"/v1/workspaces/{_p(workspace_id)}/dialog_nodes/{_p(dialog_node)}",
            DialogNode, success_callback, fail_callback,
            body=body, custom_data=custom_data,
        )

    def delete_dialog_node(
        self,
        success_callback: SuccessCallback[Empty],
        fail_callback: FailCallback,
        workspace_id: str,
        dialog_node: str,
        *,
        custom_data: dict[str, Any] | None = None,
    ) -> bool:
        self._require("delete_dialog_node", success_callback=success_callback,
                      fail_callback=fail_callback, workspace_id=workspace_id,
                      dialog_node=dialog_node)
        return self._submit(
            "delete_dialog_node", "DELETE",
            f"/v1/workspaces/{_p(workspace_id)}/dialog_nodes/{_p(dialog_node)}",
            Empty, success_callback, fail_callback,
            custom_data=custom_data,
        )

    # ── Logs ────────────────────────────────────────────────────

    def list_logs(
        self,
        success_callback: SuccessCallback[LogCollection],
        fail_callback: FailCallback,
        workspace_id: str,
        *,
        sort: str | None = None,
        filter: str | None = None,
        page_limit: int | None = None,
        cursor: str | None = None,
        custom_data: dict[str, Any] | None = None,
    ) -> bool:
        """List the conversation logs of one workspace."""
        self._require("list_logs", success_callback=success_callback,
                      fail_callback=fail_callback, workspace_id=workspace_id)
        return self._submit(
            "list_logs", "GET", f"/v1/workspaces/{_p(workspace_id)}/logs",
            LogCollection, success_callback, fail_callback,
            params={"sort": sort, "filter": filter, "page_limit": page_limit, "cursor": cursor},
            custom_data=custom_data,
        )

    def list_all_logs(
        self,
        success_callback: SuccessCallback[LogCollection],
        fail_callback: FailCallback,
        filter: str,
        *,
        sort: str | None = None,
        page_limit: int | None = None,
        cursor: str | None = None,
        custom_data: dict[str, Any] | None = None,
    ) -> bool:
        """List logs across workspaces.

        ``filter`` is required and must select at least one workspace, e.g.
        ``language::en,request.context.metadata.deployment::my-app``.
        """
        self._require("list_all_logs", success_callback=success_callback,
                      fail_callback=fail_callback, filter=filter)
        return self._submit(
            "list_all_logs", "GET", "/v1/logs",
            LogCollection, success_callback, fail_callback,
            params={"filter": filter, "sort": sort, "page_limit": page_limit, "cursor": cursor},
            custom_data=custom_data,
        )

    # ── User data ───────────────────────────────────────────────

    def delete_user_data(
        self,
        success_callback: SuccessCallback[Empty],
        fail_callback: FailCallback,
        customer_id: str,
        *,
        custom_data: dict[str, Any] | None = None,
    ) -> bool:
        """Delete all data associated with ``customer_id``.

        The customer id is the one attached to requests through the
        ``X-Watson-Metadata: customer_id=...`` header.
        """
        self._require("delete_user_data", success_callback=success_callback,
                      fail_callback=fail_callback, customer_id=customer_id)
        return self._submit(
            "delete_user_data", "DELETE", "/v1/user_data",
            Empty, success_callback, fail_callback,
            params={"customer_id": customer_id},
            custom_data=custom_data,
        )


# ---------------------------------------------------------------------------
# Singleton accessor
# ---------------------------------------------------------------------------

def get_assistant_service() -> AssistantService:
    """Return the module-level AssistantService built from settings."""
    global _service
    if _service is None:
        settings = get_settings()
        _service = AssistantService(
            settings.assistant_version_date,
            Credentials.from_settings(settings),
            disable_ssl_verification=settings.assistant_disable_ssl_verification,
        )
        logger.info("AssistantService configured for %s", _service.service_url)
    return _service
