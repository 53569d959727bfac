from src.domain.workflow.entities.definition import WorkflowDefinition
from src.ports.secondary.definition_repository import IDefinitionRepository


class InMemoryDefinitionRepository(IDefinitionRepository):
    """Process-lifetime definition registry. Nothing is persisted."""

    def __init__(self):
        self._definitions: dict[str, WorkflowDefinition] = {}

    async def save(self, definition: WorkflowDefinition) -> None:
        # Frozen value objects, safe to share.
        self._definitions[definition.id] = definition

    async def get_by_id(self, definition_id: str) -> WorkflowDefinition | None:
        return self._definitions.get(definition_id)

    async def exists(self, definition_id: str) -> bool:
        return definition_id in self._definitions

    async def count(self) -> int:
        return len(self._definitions)
