from src.domain.workflow.entities.definition import WorkflowDefinition
from src.domain.workflow.exceptions import DefinitionNotFoundError
from src.ports.secondary.definition_repository import IDefinitionRepository


class GetDefinitionUseCase:
    def __init__(self, definition_repository: IDefinitionRepository):
        self._definition_repository = definition_repository

    async def execute(self, definition_id: str) -> WorkflowDefinition:
        definition = await self._definition_repository.get_by_id(definition_id)
        if not definition:
            raise DefinitionNotFoundError(definition_id)
        return definition
