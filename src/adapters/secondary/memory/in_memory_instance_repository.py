import copy

from src.domain.workflow.entities.instance import WorkflowInstance
from src.domain.workflow.exceptions import InstanceNotFoundError
from src.ports.secondary.instance_repository import IInstanceRepository


class InMemoryInstanceRepository(IInstanceRepository):
    """
    Process-lifetime instance registry.

    Instances are copied on the way in and out so a caller holding an
    instance cannot change the stored record without going through `update`.
    """

    def __init__(self):
        self._instances: dict[str, WorkflowInstance] = {}

    async def save(self, instance: WorkflowInstance) -> None:
        self._instances[instance.id] = copy.deepcopy(instance)

    async def get_by_id(self, instance_id: str) -> WorkflowInstance | None:
        instance = self._instances.get(instance_id)
        if instance is None:
            return None
        return copy.deepcopy(instance)

    async def update(self, instance: WorkflowInstance) -> None:
        if instance.id not in self._instances:
            raise InstanceNotFoundError(instance.id)
        self._instances[instance.id] = copy.deepcopy(instance)

    async def count(self) -> int:
        return len(self._instances)
