from src.domain.workflow.entities.instance import WorkflowInstance
from src.domain.workflow.exceptions import InstanceNotFoundError
from src.ports.secondary.instance_repository import IInstanceRepository


class GetInstanceUseCase:
    def __init__(self, instance_repository: IInstanceRepository):
        self._instance_repository = instance_repository

    async def execute(self, instance_id: str) -> WorkflowInstance:
        """
        Reads back an instance. Always permitted, including on final states.
        """
        instance = await self._instance_repository.get_by_id(instance_id)
        if not instance:
            raise InstanceNotFoundError(instance_id)
        return instance
