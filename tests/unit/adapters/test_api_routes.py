import pytest
from fastapi.testclient import TestClient
from unittest.mock import AsyncMock
from datetime import datetime, timezone

from src.main import app
from src.adapters.primary.api.dependencies import (
    get_definition_use_case,
    get_execute_action_use_case,
    get_instance_use_case,
    get_register_definition_use_case,
    get_start_instance_use_case,
)
from src.domain.workflow.entities.definition import Action, State, WorkflowDefinition
from src.domain.workflow.entities.instance import HistoryEntry, WorkflowInstance
from src.domain.workflow.exceptions import (
    ActionNotFoundError,
    DefinitionNotFoundError,
    DuplicateDefinitionError,
    InstanceNotFoundError,
)
from src.shared.config import settings

PREFIX = settings.API_PREFIX

DEFINITION = WorkflowDefinition(
    id="wf-123",
    name="Test Workflow",
    states=(
        State(id="s0", name="Start", is_initial=True),
        State(id="s1", name="End", is_final=True),
    ),
    actions=(Action(id="a1", name="Finish", from_states=("s0",), to_state="s1"),),
)

DEFINITION_PAYLOAD = {
    "id": "wf-123",
    "name": "Test Workflow",
    "states": [
        {"id": "s0", "name": "Start", "isInitial": True, "isFinal": False, "enabled": True},
        {"id": "s1", "name": "End", "isInitial": False, "isFinal": True, "enabled": True},
    ],
    "actions": [
        {"id": "a1", "name": "Finish", "enabled": True, "fromStates": ["s0"], "toState": "s1"},
    ],
}


class TestApiRoutes:
    @pytest.fixture
    def mock_register(self):
        return AsyncMock()

    @pytest.fixture
    def mock_get_definition(self):
        return AsyncMock()

    @pytest.fixture
    def mock_start(self):
        return AsyncMock()

    @pytest.fixture
    def mock_execute(self):
        return AsyncMock()

    @pytest.fixture
    def mock_get_instance(self):
        return AsyncMock()

    @pytest.fixture
    def client(self, mock_register, mock_get_definition, mock_start, mock_execute, mock_get_instance):
        # Override dependencies
        app.dependency_overrides[get_register_definition_use_case] = lambda: mock_register
        app.dependency_overrides[get_definition_use_case] = lambda: mock_get_definition
        app.dependency_overrides[get_start_instance_use_case] = lambda: mock_start
        app.dependency_overrides[get_execute_action_use_case] = lambda: mock_execute
        app.dependency_overrides[get_instance_use_case] = lambda: mock_get_instance
        try:
            with TestClient(app) as c:
                yield c
        finally:
            app.dependency_overrides = {}

    def test_register_definition_success(self, client, mock_register):
        mock_register.execute.return_value = DEFINITION

        response = client.post(f"{PREFIX}/workflow-definitions", json=DEFINITION_PAYLOAD)

        assert response.status_code == 200
        assert response.json() == DEFINITION_PAYLOAD
        submitted = mock_register.execute.call_args.args[0]
        assert submitted == DEFINITION

    def test_register_definition_applies_defaults(self, client, mock_register):
        mock_register.execute.return_value = DEFINITION

        client.post(
            f"{PREFIX}/workflow-definitions",
            json={
                "id": "wf-min",
                "states": [{"id": "s0", "isInitial": True}],
                "actions": [{"id": "a1", "toState": "s0"}],
            },
        )

        submitted = mock_register.execute.call_args.args[0]
        assert submitted.name == ""
        assert submitted.states[0].enabled is True
        assert submitted.states[0].is_final is False
        assert submitted.actions[0].enabled is True
        assert submitted.actions[0].from_states == ()

    def test_register_definition_accepts_snake_case(self, client, mock_register):
        mock_register.execute.return_value = DEFINITION

        client.post(
            f"{PREFIX}/workflow-definitions",
            json={
                "id": "wf-snake",
                "states": [{"id": "s0", "is_initial": True}],
                "actions": [{"id": "a1", "from_states": ["s0"], "to_state": "s0"}],
            },
        )

        submitted = mock_register.execute.call_args.args[0]
        assert submitted.states[0].is_initial is True
        assert submitted.actions[0].from_states == ("s0",)

    def test_register_definition_validation_error(self, client, mock_register):
        mock_register.execute.side_effect = DuplicateDefinitionError("wf-123")

        response = client.post(f"{PREFIX}/workflow-definitions", json=DEFINITION_PAYLOAD)

        assert response.status_code == 400
        error = response.json()["error"]
        assert error["error_code"] == "DUPLICATE_DEFINITION"
        assert error["message"] == "Definition with id 'wf-123' already exists."

    def test_register_definition_malformed_payload(self, client, mock_register):
        response = client.post(f"{PREFIX}/workflow-definitions", json={"name": "no id"})

        assert response.status_code == 422
        mock_register.execute.assert_not_called()

    def test_register_definition_empty_id(self, client, mock_register):
        payload = dict(DEFINITION_PAYLOAD, id="")

        response = client.post(f"{PREFIX}/workflow-definitions", json=payload)

        assert response.status_code == 422
        mock_register.execute.assert_not_called()

    def test_get_definition_success(self, client, mock_get_definition):
        mock_get_definition.execute.return_value = DEFINITION

        response = client.get(f"{PREFIX}/workflow-definitions/wf-123")

        assert response.status_code == 200
        assert response.json()["id"] == "wf-123"
        mock_get_definition.execute.assert_awaited_once_with("wf-123")

    def test_get_definition_not_found(self, client, mock_get_definition):
        mock_get_definition.execute.side_effect = DefinitionNotFoundError("nope")

        response = client.get(f"{PREFIX}/workflow-definitions/nope")

        assert response.status_code == 404
        assert response.json()["error"]["error_code"] == "DEFINITION_NOT_FOUND"

    def test_start_instance_success(self, client, mock_start):
        mock_start.execute.return_value = WorkflowInstance(
            id="inst-1", definition_id="wf-123", current_state="s0"
        )

        response = client.post(f"{PREFIX}/workflow-instances/wf-123")

        assert response.status_code == 200
        assert response.json() == {
            "id": "inst-1",
            "definitionId": "wf-123",
            "currentState": "s0",
            "history": [],
        }

    def test_start_instance_unknown_definition(self, client, mock_start):
        mock_start.execute.side_effect = DefinitionNotFoundError("nope")

        response = client.post(f"{PREFIX}/workflow-instances/nope")

        assert response.status_code == 404

    def test_execute_action_success(self, client, mock_execute):
        timestamp = datetime(2024, 1, 1, 12, 0, tzinfo=timezone.utc)
        mock_execute.execute.return_value = WorkflowInstance(
            id="inst-1",
            definition_id="wf-123",
            current_state="s1",
            history=[HistoryEntry(action_id="a1", timestamp=timestamp)],
        )

        response = client.post(f"{PREFIX}/workflow-instances/inst-1/execute/a1")

        assert response.status_code == 200
        body = response.json()
        assert body["currentState"] == "s1"
        assert body["history"][0]["actionId"] == "a1"
        assert body["history"][0]["timestamp"].startswith("2024-01-01T12:00:00")
        mock_execute.execute.assert_awaited_once_with("inst-1", "a1")

    def test_execute_action_unknown_instance(self, client, mock_execute):
        mock_execute.execute.side_effect = InstanceNotFoundError("nope")

        response = client.post(f"{PREFIX}/workflow-instances/nope/execute/a1")

        assert response.status_code == 404
        assert response.json()["error"]["message"] == "Instance 'nope' not found."

    def test_execute_action_rejected(self, client, mock_execute):
        mock_execute.execute.side_effect = ActionNotFoundError("wf-123", "zz")

        response = client.post(f"{PREFIX}/workflow-instances/inst-1/execute/zz")

        assert response.status_code == 400
        assert response.json()["error"]["error_code"] == "ACTION_NOT_FOUND"

    def test_get_instance_success(self, client, mock_get_instance):
        mock_get_instance.execute.return_value = WorkflowInstance(
            id="inst-1", definition_id="wf-123", current_state="s0"
        )

        response = client.get(f"{PREFIX}/workflow-instances/inst-1")

        assert response.status_code == 200
        assert response.json()["currentState"] == "s0"

    def test_get_instance_not_found(self, client, mock_get_instance):
        mock_get_instance.execute.side_effect = InstanceNotFoundError("nope")

        response = client.get(f"{PREFIX}/workflow-instances/nope")

        assert response.status_code == 404

    def test_health_check(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "healthy"
        assert body["version"] == settings.APP_VERSION
        assert set(body["registries"]) == {"definitions", "instances"}

    def test_metrics_endpoint(self, client):
        response = client.get("/metrics")

        assert response.status_code == 200
        assert "workflow_definitions_registered_total" in response.text
