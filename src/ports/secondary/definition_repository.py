from abc import ABC, abstractmethod

from src.domain.workflow.entities.definition import WorkflowDefinition


class IDefinitionRepository(ABC):
    """
    Interface for the registry of Workflow Definitions.

    Definitions are immutable once saved. There is no update or delete.
    """

    @abstractmethod
    async def save(self, definition: WorkflowDefinition) -> None:
        """Registers a validated definition under its id."""
        pass

    @abstractmethod
    async def get_by_id(self, definition_id: str) -> WorkflowDefinition | None:
        """Retrieves a definition by its unique ID."""
        pass

    @abstractmethod
    async def exists(self, definition_id: str) -> bool:
        pass

    @abstractmethod
    async def count(self) -> int:
        pass
