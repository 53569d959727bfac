from src.domain.workflow.entities.definition import WorkflowDefinition
from src.domain.workflow.exceptions import DefinitionValidationError
from src.domain.workflow.services.definition_validator import DefinitionValidator
from src.ports.secondary.definition_repository import IDefinitionRepository
from src.ports.secondary.metrics import IMetrics
from src.shared.logger import get_logger

logger = get_logger(__name__)


class RegisterDefinitionUseCase:
    """
    Use case for admitting a new workflow definition into the registry.

    Responsibilities:
    1. Run the structural checks (duplicate id, single initial state, state references).
    2. Register the definition so it becomes visible to lookups and instance creation.

    A rejected definition leaves the registry untouched.
    """
    def __init__(
        self,
        definition_repository: IDefinitionRepository,
        metrics: IMetrics | None = None,
        validator: DefinitionValidator | None = None,
    ):
        self._definition_repository = definition_repository
        self._metrics = metrics
        self._validator = validator or DefinitionValidator()

    async def validate(self, definition: WorkflowDefinition) -> None:
        """
        Raises the first DefinitionValidationError the definition triggers.

        Has no side effects.
        """
        already_registered = await self._definition_repository.exists(definition.id)
        self._validator.validate(definition, already_registered=already_registered)

    async def execute(self, definition: WorkflowDefinition) -> WorkflowDefinition:
        """
        Validates and registers a definition.

        Args:
            definition: The complete candidate definition.

        Returns:
            The stored definition.

        Raises:
            DuplicateDefinitionError, InvalidInitialStateCountError,
            UnknownStateReferenceError
        """
        try:
            await self.validate(definition)
        except DefinitionValidationError as exc:
            logger.warning(
                "definition_rejected",
                definition_id=definition.id,
                error_code=exc.error_code,
            )
            if self._metrics:
                self._metrics.record_definition_rejected(exc.error_code)
            raise

        await self._definition_repository.save(definition)

        if self._metrics:
            self._metrics.record_definition_registered()
        logger.info(
            "definition_registered",
            definition_id=definition.id,
            state_count=len(definition.states),
            action_count=len(definition.actions),
        )
        return definition
