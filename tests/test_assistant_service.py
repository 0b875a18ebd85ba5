"""Tests for services/assistant.py — request building and result delivery."""

from __future__ import annotations

import json

import pytest

from errors.exceptions import ArgumentError, DeserializationError, TransportError
from models.dialog_node import CreateDialogNode, DialogNode, UpdateDialogNode
from models.entity import (
    CreateEntity,
    CreateSynonym,
    CreateValue,
    UpdateEntity,
    UpdateSynonym,
    UpdateValue,
    Value,
    ValueType,
)
from models.generic import RuntimeResponseText
from models.intent import (
    CreateCounterexample,
    CreateExample,
    CreateIntent,
    IntentCollection,
    UpdateCounterexample,
    UpdateExample,
    UpdateIntent,
)
from models.message import Context, MessageRequest, MessageResponse
from models.runtime import MessageInput
from models.workspace import CreateWorkspace, Workspace
from services import watson_service
from services.assistant import AssistantService, Empty
from services.credentials import Credentials
from conftest import SERVICE_URL, VERSION

# (operation, required arguments after the two continuations, method, path)
OPERATIONS = [
    ("message", ("w1",), "POST", "/v1/workspaces/w1/message"),
    ("list_workspaces", (), "GET", "/v1/workspaces"),
    ("create_workspace", (), "POST", "/v1/workspaces"),
    ("get_workspace", ("w1",), "GET", "/v1/workspaces/w1"),
    ("update_workspace", ("w1",), "POST", "/v1/workspaces/w1"),
    ("delete_workspace", ("w1",), "DELETE", "/v1/workspaces/w1"),
    ("list_intents", ("w1",), "GET", "/v1/workspaces/w1/intents"),
    ("create_intent", ("w1", CreateIntent(intent="greet")), "POST", "/v1/workspaces/w1/intents"),
    ("get_intent", ("w1", "greet"), "GET", "/v1/workspaces/w1/intents/greet"),
    ("update_intent", ("w1", "greet", UpdateIntent(description="Hi")), "POST",
     "/v1/workspaces/w1/intents/greet"),
    ("delete_intent", ("w1", "greet"), "DELETE", "/v1/workspaces/w1/intents/greet"),
    ("list_examples", ("w1", "greet"), "GET", "/v1/workspaces/w1/intents/greet/examples"),
    ("create_example", ("w1", "greet", CreateExample(text="hi")), "POST",
     "/v1/workspaces/w1/intents/greet/examples"),
    ("get_example", ("w1", "greet", "hi"), "GET", "/v1/workspaces/w1/intents/greet/examples/hi"),
    ("update_example", ("w1", "greet", "hi", UpdateExample(text="hello")), "POST",
     "/v1/workspaces/w1/intents/greet/examples/hi"),
    ("delete_example", ("w1", "greet", "hi"), "DELETE",
     "/v1/workspaces/w1/intents/greet/examples/hi"),
    ("list_counterexamples", ("w1",), "GET", "/v1/workspaces/w1/counterexamples"),
    ("create_counterexample", ("w1", CreateCounterexample(text="weather")), "POST",
     "/v1/workspaces/w1/counterexamples"),
    ("get_counterexample", ("w1", "weather"), "GET", "/v1/workspaces/w1/counterexamples/weather"),
    ("update_counterexample", ("w1", "weather", UpdateCounterexample(text="rain")), "POST",
     "/v1/workspaces/w1/counterexamples/weather"),
    ("delete_counterexample", ("w1", "weather"), "DELETE",
     "/v1/workspaces/w1/counterexamples/weather"),
    ("list_entities", ("w1",), "GET", "/v1/workspaces/w1/entities"),
    ("create_entity", ("w1", CreateEntity(entity="color")), "POST", "/v1/workspaces/w1/entities"),
    ("get_entity", ("w1", "color"), "GET", "/v1/workspaces/w1/entities/color"),
    ("update_entity", ("w1", "color", UpdateEntity(fuzzy_match=True)), "POST",
     "/v1/workspaces/w1/entities/color"),
    ("delete_entity", ("w1", "color"), "DELETE", "/v1/workspaces/w1/entities/color"),
    ("list_mentions", ("w1", "color"), "GET", "/v1/workspaces/w1/entities/color/mentions"),
    ("list_values", ("w1", "color"), "GET", "/v1/workspaces/w1/entities/color/values"),
    ("create_value", ("w1", "color", CreateValue(value="red")), "POST",
     "/v1/workspaces/w1/entities/color/values"),
    ("get_value", ("w1", "color", "red"), "GET", "/v1/workspaces/w1/entities/color/values/red"),
    ("update_value", ("w1", "color", "red", UpdateValue(synonyms=["crimson"])), "POST",
     "/v1/workspaces/w1/entities/color/values/red"),
    ("delete_value", ("w1", "color", "red"), "DELETE",
     "/v1/workspaces/w1/entities/color/values/red"),
    ("list_synonyms", ("w1", "color", "red"), "GET",
     "/v1/workspaces/w1/entities/color/values/red/synonyms"),
    ("create_synonym", ("w1", "color", "red", CreateSynonym(synonym="crimson")), "POST",
     "/v1/workspaces/w1/entities/color/values/red/synonyms"),
    ("get_synonym", ("w1", "color", "red", "crimson"), "GET",
     "/v1/workspaces/w1/entities/color/values/red/synonyms/crimson"),
    ("update_synonym", ("w1", "color", "red", "crimson", UpdateSynonym(synonym="scarlet")),
     "POST", "/v1/workspaces/w1/entities/color/values/red/synonyms/crimson"),
    ("delete_synonym", ("w1", "color", "red", "crimson"), "DELETE",
     "/v1/workspaces/w1/entities/color/values/red/synonyms/crimson"),
    ("list_dialog_nodes", ("w1",), "GET", "/v1/workspaces/w1/dialog_nodes"),
    ("create_dialog_node", ("w1", CreateDialogNode(dialog_node="welcome")), "POST",
     "/v1/workspaces/w1/dialog_nodes"),
    ("get_dialog_node", ("w1", "welcome"), "GET", "/v1/workspaces/w1/dialog_nodes/welcome"),
    ("update_dialog_node", ("w1", "welcome", UpdateDialogNode(title="Welcome")), "POST",
     "/v1/workspaces/w1/dialog_nodes/welcome"),
    ("delete_dialog_node", ("w1", "welcome"), "DELETE", "/v1/workspaces/w1/dialog_nodes/welcome"),
    ("list_logs", ("w1",), "GET", "/v1/workspaces/w1/logs"),
    ("list_all_logs", ("language::en",), "GET", "/v1/logs"),
    ("delete_user_data", ("customer-1",), "DELETE", "/v1/user_data"),
]

_IDS = [op[0] for op in OPERATIONS]


def _noop(*args):
    pass


# ---------------------------------------------------------------------------
# Preconditions
# ---------------------------------------------------------------------------

@pytest.mark.parametrize("name,args,method,path", OPERATIONS, ids=_IDS)
def test_missing_success_callback_raises(service, spy_connector, name, args, method, path):
    with pytest.raises(ArgumentError) as exc:
        getattr(service, name)(None, _noop, *args)
    assert exc.value.argument == "success_callback"
    assert spy_connector.sent == []


@pytest.mark.parametrize("name,args,method,path", OPERATIONS, ids=_IDS)
def test_missing_fail_callback_raises(service, spy_connector, name, args, method, path):
    with pytest.raises(ArgumentError) as exc:
        getattr(service, name)(_noop, None, *args)
    assert exc.value.argument == "fail_callback"
    assert spy_connector.sent == []


@pytest.mark.parametrize(
    "name,args,missing",
    [
        ("get_workspace", ("",), "workspace_id"),
        ("create_intent", ("w1", None), "body"),
        ("get_example", ("w1", "greet", ""), "text"),
        ("get_synonym", ("w1", "color", "red", None), "synonym"),
        ("get_dialog_node", ("w1", ""), "dialog_node"),
        ("list_all_logs", ("",), "filter"),
    ],
)
def test_missing_required_argument_raises(service, spy_connector, name, args, missing):
    with pytest.raises(ArgumentError) as exc:
        getattr(service, name)(_noop, _noop, *args)
    assert exc.value.argument == missing
    assert spy_connector.sent == []


def test_delete_user_data_requires_customer_id(service, spy_connector):
    with pytest.raises(ArgumentError, match="customer_id"):
        service.delete_user_data(_noop, _noop, "")
    assert spy_connector.sent == []


def test_empty_version_date_rejected():
    with pytest.raises(ArgumentError, match="version_date"):
        AssistantService("")


# ---------------------------------------------------------------------------
# Request construction
# ---------------------------------------------------------------------------

@pytest.mark.parametrize("name,args,method,path", OPERATIONS, ids=_IDS)
def test_method_path_and_version(service, spy_connector, name, args, method, path):
    assert getattr(service, name)(_noop, _noop, *args) is True

    request = spy_connector.last
    assert request.method == method
    assert request.function == path
    assert request.parameters["version"] == VERSION
    assert request.headers["Accept"] == "application/json"


@pytest.mark.parametrize("name,args,method,path", OPERATIONS, ids=_IDS)
def test_unset_optional_parameters_are_absent(service, spy_connector, name, args, method, path):
    getattr(service, name)(_noop, _noop, *args)

    params = spy_connector.last.parameters
    for key in ("page_limit", "include_count", "sort", "cursor", "include_audit",
                "export", "append", "nodes_visited_details"):
        assert key not in params


def test_empty_string_parameters_are_absent(service, spy_connector):
    service.list_workspaces(_noop, _noop, sort="", cursor="")
    assert spy_connector.last.parameters == {"version": VERSION}

    service.list_logs(_noop, _noop, "w1", filter="", sort="")
    assert spy_connector.last.parameters == {"version": VERSION}


def test_list_parameters_are_sent_when_set(service, spy_connector):
    service.list_intents(
        _noop, _noop, "w1",
        export=True, page_limit=10, include_count=False, sort="updated", cursor="abc",
    )

    assert spy_connector.last.parameters == {
        "version": VERSION,
        "export": "true",
        "page_limit": 10,
        "include_count": "false",
        "sort": "updated",
        "cursor": "abc",
    }


def test_update_workspace_append(service, spy_connector):
    service.update_workspace(_noop, _noop, "w1", append=True)
    assert spy_connector.last.parameters["append"] == "true"


def test_path_parameters_are_percent_encoded(service, spy_connector):
    service.get_example(_noop, _noop, "w1", "greet", "how are you?/now")
    assert spy_connector.last.function == (
        "/v1/workspaces/w1/intents/greet/examples/how%20are%20you%3F%2Fnow"
    )


def test_delete_user_data_sends_customer_id(service, spy_connector):
    service.delete_user_data(_noop, _noop, "customer-1")
    assert spy_connector.last.parameters == {"version": VERSION, "customer_id": "customer-1"}
    assert spy_connector.last.body is None


def test_list_all_logs_sends_filter(service, spy_connector):
    service.list_all_logs(_noop, _noop, "language::en", page_limit=5)
    assert spy_connector.last.parameters["filter"] == "language::en"
    assert spy_connector.last.parameters["page_limit"] == 5


def test_analytics_header(service, spy_connector):
    service.list_workspaces(_noop, _noop)
    assert spy_connector.last.headers["X-IBMCloud-SDK-Analytics"] == (
        "service_name=conversation;service_version=V1;operation_id=ListWorkspaces"
    )


def test_body_is_sparse_json(service, spy_connector):
    service.create_value(
        _noop, _noop, "w1", "color",
        CreateValue(value="red", type=ValueType.SYNONYMS, synonyms=["crimson"]),
    )

    request = spy_connector.last
    assert request.headers["Content-Type"] == "application/json"
    assert json.loads(request.body) == {
        "value": "red", "type": "synonyms", "synonyms": ["crimson"],
    }


def test_get_requests_have_no_body(service, spy_connector):
    service.get_intent(_noop, _noop, "w1", "greet")
    assert spy_connector.last.body is None
    assert "Content-Type" not in spy_connector.last.headers


def test_custom_headers_apply_to_next_request_only(service, spy_connector):
    service.add_custom_request_header("X-Watson-Learning-Opt-Out", "true")
    service.list_workspaces(_noop, _noop)
    service.list_workspaces(_noop, _noop)

    first, second = spy_connector.sent
    assert first.headers["X-Watson-Learning-Opt-Out"] == "true"
    assert "X-Watson-Learning-Opt-Out" not in second.headers


def test_no_connector_returns_false(recorder):
    service = AssistantService(VERSION, connector_factory=lambda credentials, url: None)

    assert service.list_workspaces(recorder.on_success, recorder.on_fail) is False
    assert recorder.successes == []
    assert recorder.failures == []


def test_service_url_defaults_and_follows_credentials():
    assert AssistantService(VERSION).service_url == AssistantService.default_url
    assert AssistantService(VERSION, Credentials(url=SERVICE_URL)).service_url == SERVICE_URL


# ---------------------------------------------------------------------------
# End-to-end scenarios
# ---------------------------------------------------------------------------

def test_create_workspace_minimal(service, spy_connector, recorder):
    service.create_workspace(recorder.on_success, recorder.on_fail, CreateWorkspace(name="demo"))

    request = spy_connector.last
    assert request.method == "POST"
    assert request.function == "/v1/workspaces"
    assert request.parameters == {"version": VERSION}
    assert json.loads(request.body) == {"name": "demo"}

    spy_connector.respond(status=201, body={
        "workspace_id": "w1",
        "name": "demo",
        "created": "2019-03-01T10:00:00.000Z",
        "updated": "2019-03-01T10:00:00.000Z",
    })

    assert recorder.failures == []
    [(workspace, custom_data)] = recorder.successes
    assert isinstance(workspace, Workspace)
    assert workspace.workspace_id == "w1"
    assert workspace.created is not None
    assert custom_data["status_code"] == 201
    assert custom_data["json"]["workspace_id"] == "w1"


def test_message_body_contains_only_set_fields(service, spy_connector):
    body = MessageRequest(input=MessageInput(text="hello"))
    service.message(_noop, _noop, "w1", body)

    assert json.loads(spy_connector.last.body) == {"input": {"text": "hello"}}


def test_message_without_body_sends_empty_object(service, spy_connector):
    service.message(_noop, _noop, "w1")
    assert json.loads(spy_connector.last.body) == {}


def test_message_response_and_context_carry_over(service, spy_connector, recorder):
    service.message(recorder.on_success, recorder.on_fail, "w1",
                    MessageRequest(input=MessageInput(text="hello")))
    spy_connector.respond(body={
        "input": {"text": "hello"},
        "intents": [{"intent": "greet", "confidence": 0.97}],
        "entities": [],
        "context": {"conversation_id": "c1", "system": {"dialog_turn_counter": 1}, "step": 2},
        "output": {
            "text": ["Hi there"],
            "generic": [{"response_type": "text", "text": "Hi there"}],
            "nodes_visited": ["welcome"],
        },
    })

    [(response, _)] = recorder.successes
    assert isinstance(response, MessageResponse)
    assert response.intents[0].intent == "greet"
    assert isinstance(response.output.generic[0], RuntimeResponseText)

    service.message(_noop, _noop, "w1",
                    MessageRequest(input=MessageInput(text="again"), context=response.context))
    context = json.loads(spy_connector.last.body)["context"]
    assert context == {"conversation_id": "c1", "system": {"dialog_turn_counter": 1}, "step": 2}


def test_echoed_input_omits_spelling_corrections(service, spy_connector, recorder):
    service.message(recorder.on_success, recorder.on_fail, "w1",
                    MessageRequest(input=MessageInput(text="helo", spelling_auto_correct=True)))
    spy_connector.respond(body={
        "input": {"text": "hello", "original_text": "helo", "suggested_text": "hello"},
        "context": {"conversation_id": "c1"},
    })

    [(response, _)] = recorder.successes
    assert response.input.original_text == "helo"
    assert response.input.suggested_text == "hello"

    service.message(_noop, _noop, "w1",
                    MessageRequest(input=response.input, context=response.context))
    assert json.loads(spy_connector.last.body)["input"] == {"text": "hello"}


def test_server_error_with_non_json_body(service, spy_connector, recorder):
    service.list_intents(recorder.on_success, recorder.on_fail, "w1",
                         custom_data={"trace": "t-1"})
    error = TransportError(SERVICE_URL, 500, "Internal Server Error", "<html>boom</html>")
    spy_connector.respond(status=500, body="<html>boom</html>", error=error)

    assert recorder.successes == []
    [(received, custom_data)] = recorder.failures
    assert received is error
    assert received.error_code == 500
    assert custom_data["response"] == "<html>boom</html>"
    assert custom_data["status_code"] == 500
    assert custom_data["trace"] == "t-1"
    assert "json" not in custom_data


def test_failure_without_error_gets_transport_error(service, spy_connector, recorder):
    service.list_entities(recorder.on_success, recorder.on_fail, "w1")
    spy_connector.respond(status=503, body="unavailable")

    [(error, _)] = recorder.failures
    assert isinstance(error, TransportError)
    assert error.error_code == 503


def test_invalid_json_on_success_becomes_failure(service, spy_connector, recorder):
    service.get_workspace(recorder.on_success, recorder.on_fail, "w1")
    response = spy_connector.respond(status=200, body="not json")

    assert recorder.successes == []
    [(error, custom_data)] = recorder.failures
    assert isinstance(error, DeserializationError)
    assert response.success is False
    assert custom_data["response"] == "not json"


def test_shape_mismatch_on_success_becomes_failure(service, spy_connector, recorder):
    service.list_intents(recorder.on_success, recorder.on_fail, "w1")
    response = spy_connector.respond(body={"intents": "not-a-list"})

    assert recorder.successes == []
    [(error, custom_data)] = recorder.failures
    assert isinstance(error, DeserializationError)
    assert response.success is False
    assert custom_data["json"] == {"intents": "not-a-list"}


def test_empty_body_on_delete_is_success(service, spy_connector, recorder):
    service.delete_intent(recorder.on_success, recorder.on_fail, "w1", "greet")
    spy_connector.respond(status=200, body=b"")

    [(result, _)] = recorder.successes
    assert result == {}


def test_response_adapter_is_reused(service, spy_connector, recorder):
    service.delete_entity(recorder.on_success, recorder.on_fail, "w1", "color")
    spy_connector.respond(status=200, body=b"")
    adapter = watson_service._adapters[Empty]

    service.delete_entity(recorder.on_success, recorder.on_fail, "w1", "size")
    spy_connector.respond(status=200, body=b"")

    assert len(recorder.successes) == 2
    assert watson_service._adapters[Empty] is adapter


def test_collection_response(service, spy_connector, recorder):
    service.list_intents(recorder.on_success, recorder.on_fail, "w1", include_count=True)
    spy_connector.respond(body={
        "intents": [{"intent": "greet", "examples": [{"text": "hi"}]}],
        "pagination": {"refresh_url": "/v1/workspaces/w1/intents", "total": 1},
    })

    [(collection, _)] = recorder.successes
    assert isinstance(collection, IntentCollection)
    assert collection.intents[0].examples[0].text == "hi"
    assert collection.pagination.total == 1


def test_dialog_node_response(service, spy_connector, recorder):
    service.get_dialog_node(recorder.on_success, recorder.on_fail, "w1", "welcome")
    spy_connector.respond(body={
        "dialog_node": "welcome",
        "conditions": "welcome",
        "output": {"generic": [{"response_type": "pause", "time": 500}]},
        "disabled": False,
    })

    [(node, _)] = recorder.successes
    assert isinstance(node, DialogNode)
    assert node.output.generic[0].time == 500


def test_value_response(service, spy_connector, recorder):
    service.get_value(recorder.on_success, recorder.on_fail, "w1", "color", "red")
    spy_connector.respond(body={"value": "red", "type": "synonyms", "synonyms": ["crimson"]})

    [(value, _)] = recorder.successes
    assert isinstance(value, Value)
    assert value.patterns is None


def test_custom_data_is_copied(service, spy_connector, recorder):
    mine = {"trace": "t-1"}
    service.list_workspaces(recorder.on_success, recorder.on_fail, custom_data=mine)
    spy_connector.respond(body={"workspaces": []})

    [(_, custom_data)] = recorder.successes
    assert custom_data["trace"] == "t-1"
    assert custom_data["headers"] == {"content-type": "application/json"}
    assert mine == {"trace": "t-1"}


def test_continuation_fires_exactly_once(service, spy_connector, recorder):
    service.list_workspaces(recorder.on_success, recorder.on_fail)
    request = spy_connector.last
    spy_connector.respond(request, body={"workspaces": []})
    spy_connector.respond(request, status=500, body="late")

    assert len(recorder.successes) == 1
    assert recorder.failures == []


def test_context_keeps_unknown_keys():
    context = Context.model_validate({"conversation_id": "c1", "custom": {"a": 1}})
    assert context.to_body() == {"conversation_id": "c1", "custom": {"a": 1}}
