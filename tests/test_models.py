"""Tests for the Assistant data models — serialization and request validation."""

import pytest
from pydantic import ValidationError

from models.dialog_node import CreateDialogNode, DialogNode, DialogNodeNextStep, NextStepBehavior
from models.entity import CreateEntity, CreateValue, UpdateValue, Value, ValueType
from models.intent import CreateIntent, Intent, UpdateIntent
from models.log import LogCollection
from models.message import MessageRequest, MessageResponse
from models.runtime import MessageInput
from models.workspace import CreateWorkspace, Workspace, WorkspaceSystemSettings


# ---------------------------------------------------------------------------
# Sparse serialization
# ---------------------------------------------------------------------------


class TestSerialization:
    def test_value_round_trip_keeps_patterns_absent(self):
        request = CreateValue(value="red", type=ValueType.SYNONYMS, synonyms=["crimson", "scarlet"])
        body = request.to_body()
        assert "patterns" not in body

        echoed = Value.model_validate({**body, "created": "2019-03-01T10:00:00Z"})

        assert echoed.value == "red"
        assert echoed.type == "synonyms"
        assert echoed.synonyms == ["crimson", "scarlet"]
        assert echoed.patterns is None
        assert "patterns" not in echoed.to_body()

    def test_nested_none_fields_are_omitted(self):
        body = CreateWorkspace(
            name="demo",
            system_settings=WorkspaceSystemSettings(spelling_auto_correct=True),
            intents=[CreateIntent(intent="greet")],
        ).to_body()

        assert body == {
            "name": "demo",
            "system_settings": {"spelling_auto_correct": True},
            "intents": [{"intent": "greet"}],
        }

    def test_message_request_only_set_fields(self):
        body = MessageRequest(input=MessageInput(text="hello"), alternate_intents=False).to_body()
        assert body == {"input": {"text": "hello"}, "alternate_intents": False}

    def test_message_input_keeps_extra_keys(self):
        message_input = MessageInput.model_validate({"text": "hi", "source": "kiosk"})
        assert message_input.to_body() == {"text": "hi", "source": "kiosk"}

    def test_next_step(self):
        node = CreateDialogNode(
            dialog_node="order",
            next_step=DialogNodeNextStep(behavior=NextStepBehavior.JUMP_TO, dialog_node="confirm",
                                         selector="body"),
        )
        assert node.to_body()["next_step"] == {
            "behavior": "jump_to", "dialog_node": "confirm", "selector": "body",
        }

    def test_logs_parse(self):
        collection = LogCollection.model_validate({
            "logs": [{
                "log_id": "l1",
                "request": {"input": {"text": "hi"}},
                "response": {"output": {"text": ["Hello"]}},
                "language": "en",
            }],
            "pagination": {"next_cursor": "abc", "matched": 1},
        })

        assert collection.logs[0].request.input.text == "hi"
        assert collection.logs[0].response.output.text == ["Hello"]
        assert collection.pagination.next_cursor == "abc"


# ---------------------------------------------------------------------------
# Server-assigned fields
# ---------------------------------------------------------------------------


class TestServerFields:
    def test_request_types_have_no_server_fields(self):
        for model in (CreateWorkspace, CreateIntent, CreateValue, CreateDialogNode):
            assert "created" not in model.model_fields
            assert "updated" not in model.model_fields
        assert "workspace_id" not in CreateWorkspace.model_fields

    def test_workspace_id_is_frozen(self):
        workspace = Workspace.model_validate({"workspace_id": "w1", "name": "demo"})

        with pytest.raises(ValidationError):
            workspace.workspace_id = "forged"
        assert workspace.workspace_id == "w1"

    def test_timestamps_are_frozen(self):
        intent = Intent.model_validate({"intent": "greet", "updated": "2019-03-01T10:00:00Z"})

        with pytest.raises(ValidationError):
            intent.updated = None

    def test_caller_fields_stay_mutable(self):
        workspace = Workspace.model_validate({"workspace_id": "w1", "name": "demo"})
        workspace.name = "renamed"
        assert workspace.name == "renamed"

    def test_dialog_node_disabled_is_frozen(self):
        node = DialogNode.model_validate({"dialog_node": "n1", "disabled": True})
        with pytest.raises(ValidationError):
            node.disabled = False

    def test_message_actions_are_frozen(self):
        response = MessageResponse.model_validate({"actions": [{"name": "lookup", "type": "client"}]})
        with pytest.raises(ValidationError):
            response.actions = []


# ---------------------------------------------------------------------------
# Request validation
# ---------------------------------------------------------------------------


class TestNames:
    @pytest.mark.parametrize("name", ["greet", "order_pizza", "pedir-café", "v1.help"])
    def test_valid_intent_names(self, name):
        assert CreateIntent(intent=name).intent == name

    @pytest.mark.parametrize("name", ["sys-number", "has space", "bad/slash", ""])
    def test_invalid_intent_names(self, name):
        with pytest.raises(ValidationError):
            CreateIntent(intent=name)

    def test_rename_checks_reserved_prefix(self):
        with pytest.raises(ValidationError):
            UpdateIntent(intent="sys-greet")
        assert UpdateIntent(description="only description").intent is None

    def test_entity_names_reject_dot(self):
        with pytest.raises(ValidationError):
            CreateEntity(entity="pizza.size")
        with pytest.raises(ValidationError):
            CreateEntity(entity="sys-date")
        assert CreateEntity(entity="pizza_size").entity == "pizza_size"

    def test_responses_accept_reserved_names(self):
        assert Intent.model_validate({"intent": "sys-anything"}).intent == "sys-anything"


class TestValues:
    def test_synonyms_and_patterns_are_exclusive(self):
        with pytest.raises(ValidationError):
            CreateValue(value="phone", synonyms=["tel"], patterns=[r"\d{3}-\d{4}"])
        with pytest.raises(ValidationError):
            UpdateValue(synonyms=["tel"], patterns=[r"\d+"])

    def test_patterns_value(self):
        body = CreateValue(value="phone", type=ValueType.PATTERNS, patterns=[r"\d{3}-\d{4}"]).to_body()
        assert body == {"value": "phone", "type": "patterns", "patterns": [r"\d{3}-\d{4}"]}

    def test_value_type_is_an_open_string(self):
        assert CreateValue(value="x", type="future_kind").type == "future_kind"

    def test_entity_values_are_validated(self):
        with pytest.raises(ValidationError):
            CreateEntity(entity="phone", values=[{"value": "x", "synonyms": ["a"], "patterns": ["b"]}])
