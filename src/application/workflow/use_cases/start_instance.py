from src.domain.workflow.entities.instance import WorkflowInstance
from src.domain.workflow.exceptions import DefinitionNotFoundError
from src.ports.secondary.definition_repository import IDefinitionRepository
from src.ports.secondary.instance_repository import IInstanceRepository
from src.ports.secondary.metrics import IMetrics
from src.shared.logger import get_logger

logger = get_logger(__name__)


class StartInstanceUseCase:
    """
    Use case for spawning a new instance of a registered definition.

    The instance starts on the definition's sole initial state with an empty
    history. No transition logic runs, so an initial state that is also final
    yields an instance that can be read but never advanced.
    """
    def __init__(
        self,
        definition_repository: IDefinitionRepository,
        instance_repository: IInstanceRepository,
        metrics: IMetrics | None = None,
    ):
        self._definition_repository = definition_repository
        self._instance_repository = instance_repository
        self._metrics = metrics

    async def execute(self, definition_id: str) -> WorkflowInstance:
        """
        Args:
            definition_id: The registered definition to run.

        Returns:
            The newly created instance.

        Raises:
            DefinitionNotFoundError: If no definition is registered under the id.
        """
        definition = await self._definition_repository.get_by_id(definition_id)
        if not definition:
            raise DefinitionNotFoundError(definition_id)

        instance = WorkflowInstance.start(definition)
        await self._instance_repository.save(instance)

        if self._metrics:
            self._metrics.record_instance_started(definition.id)
        logger.info(
            "instance_started",
            instance_id=instance.id,
            definition_id=definition.id,
            current_state=instance.current_state,
        )
        return instance
