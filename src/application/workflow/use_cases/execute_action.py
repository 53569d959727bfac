from src.domain.workflow.entities.instance import WorkflowInstance
from src.domain.workflow.exceptions import ExecutionError, InstanceNotFoundError
from src.ports.secondary.definition_repository import IDefinitionRepository
from src.ports.secondary.instance_repository import IInstanceRepository
from src.ports.secondary.metrics import IMetrics
from src.shared.locks import InstanceLockRegistry
from src.shared.logger import bind_context, get_logger, unbind_context

logger = get_logger(__name__)


class ExecuteActionUseCase:
    """
    Use case for firing one action against a running instance.

    Concurrency:
    The read of the instance, the guard checks and the write-back all happen
    while holding the instance's lock, so two executions against the same
    instance never interleave. Executions on different instances proceed
    independently.
    """
    def __init__(
        self,
        definition_repository: IDefinitionRepository,
        instance_repository: IInstanceRepository,
        locks: InstanceLockRegistry,
        metrics: IMetrics | None = None,
    ):
        self._definition_repository = definition_repository
        self._instance_repository = instance_repository
        self._locks = locks
        self._metrics = metrics

    async def execute(self, instance_id: str, action_id: str) -> WorkflowInstance:
        """
        Moves the instance along `action_id` and records it in the history.

        Process:
        1. Loads the instance (404 class error if missing) and its definition.
        2. Resolves the action: exists, enabled, fires from the current state,
           current state not final. See WorkflowInstance.resolve_action.
        3. Reassigns the current state and appends the history record
           (WorkflowInstance.execute_action).
        4. Writes the instance back.

        Raises:
            InstanceNotFoundError, ActionNotFoundError, ActionDisabledError,
            InvalidTransitionError, FinalStateTransitionDeniedError
        """
        bind_context({"instance_id": instance_id})
        try:
            async with self._locks.hold(instance_id):
                return await self._execute_locked(instance_id, action_id)
        finally:
            unbind_context("instance_id")

    async def _execute_locked(self, instance_id: str, action_id: str) -> WorkflowInstance:
        instance = await self._instance_repository.get_by_id(instance_id)
        if not instance:
            raise InstanceNotFoundError(instance_id)

        # Definitions are never deleted, so the owning definition is present.
        definition = await self._definition_repository.get_by_id(instance.definition_id)

        from_state = instance.current_state
        try:
            entry = instance.execute_action(definition, action_id)
        except ExecutionError as exc:
            logger.warning(
                "action_rejected",
                action_id=action_id,
                current_state=from_state,
                error_code=exc.error_code,
            )
            if self._metrics:
                self._metrics.record_action_rejected(exc.error_code)
            raise

        await self._instance_repository.update(instance)

        if self._metrics:
            self._metrics.record_action_executed(definition.id, entry.action_id)
        logger.info(
            "action_executed",
            action_id=entry.action_id,
            from_state=from_state,
            to_state=instance.current_state,
            history_length=len(instance.history),
        )
        return instance
