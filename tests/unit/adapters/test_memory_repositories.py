import pytest

from src.adapters.secondary.memory.in_memory_definition_repository import InMemoryDefinitionRepository
from src.adapters.secondary.memory.in_memory_instance_repository import InMemoryInstanceRepository
from src.domain.workflow.entities.definition import Action, State, WorkflowDefinition
from src.domain.workflow.entities.instance import WorkflowInstance
from src.domain.workflow.exceptions import InstanceNotFoundError


def make_definition(definition_id: str = "wf1") -> WorkflowDefinition:
    return WorkflowDefinition(
        id=definition_id,
        name="Test",
        states=(State(id="s0", name="Start", is_initial=True), State(id="s1", name="End")),
        actions=(Action(id="a1", name="Go", from_states=("s0",), to_state="s1"),),
    )


class TestInMemoryDefinitionRepository:
    @pytest.mark.asyncio
    async def test_save_and_get(self):
        repo = InMemoryDefinitionRepository()
        definition = make_definition()

        await repo.save(definition)

        assert await repo.get_by_id("wf1") == definition
        assert await repo.exists("wf1")
        assert await repo.count() == 1

    @pytest.mark.asyncio
    async def test_missing(self):
        repo = InMemoryDefinitionRepository()

        assert await repo.get_by_id("nope") is None
        assert not await repo.exists("nope")
        assert await repo.count() == 0


class TestInMemoryInstanceRepository:
    @pytest.mark.asyncio
    async def test_save_and_get(self):
        repo = InMemoryInstanceRepository()
        instance = WorkflowInstance(definition_id="wf1", current_state="s0")

        await repo.save(instance)
        stored = await repo.get_by_id(instance.id)

        assert stored == instance
        assert await repo.count() == 1

    @pytest.mark.asyncio
    async def test_caller_mutation_does_not_leak_without_update(self):
        repo = InMemoryInstanceRepository()
        definition = make_definition()
        instance = WorkflowInstance.start(definition)
        await repo.save(instance)

        loaded = await repo.get_by_id(instance.id)
        loaded.execute_action(definition, "a1")

        stored = await repo.get_by_id(instance.id)
        assert stored.current_state == "s0"
        assert stored.history == []

    @pytest.mark.asyncio
    async def test_update_replaces_state_and_history(self):
        repo = InMemoryInstanceRepository()
        definition = make_definition()
        instance = WorkflowInstance.start(definition)
        await repo.save(instance)

        instance.execute_action(definition, "a1")
        await repo.update(instance)

        stored = await repo.get_by_id(instance.id)
        assert stored.current_state == "s1"
        assert [e.action_id for e in stored.history] == ["a1"]

    @pytest.mark.asyncio
    async def test_update_unknown_instance(self):
        repo = InMemoryInstanceRepository()

        with pytest.raises(InstanceNotFoundError):
            await repo.update(WorkflowInstance(definition_id="wf1", current_state="s0"))

    @pytest.mark.asyncio
    async def test_missing(self):
        assert await InMemoryInstanceRepository().get_by_id("nope") is None
