from abc import ABC, abstractmethod

from src.domain.workflow.entities.instance import WorkflowInstance


class IInstanceRepository(ABC):
    """
    Interface for the registry of Workflow Instances.

    Instances are created by `save` and mutated in place through `update`
    after a successful action execution. There is no delete.
    """
    @abstractmethod
    async def save(self, instance: WorkflowInstance) -> None:
        """Stores a newly started instance."""
        pass

    @abstractmethod
    async def get_by_id(self, instance_id: str) -> WorkflowInstance | None:
        """Retrieves an instance by its ID."""
        pass

    @abstractmethod
    async def update(self, instance: WorkflowInstance) -> None:
        """Replaces the stored current state and history of an instance."""
        pass

    @abstractmethod
    async def count(self) -> int:
        pass
