from fastapi import APIRouter, Depends

from src.adapters.primary.api.dependencies import (
    get_definition_use_case,
    get_register_definition_use_case,
)
from src.adapters.primary.api.dto import ErrorResponse, WorkflowDefinitionDTO
from src.application.workflow.use_cases.get_definition import GetDefinitionUseCase
from src.application.workflow.use_cases.register_definition import RegisterDefinitionUseCase
from src.shared.config import settings

router = APIRouter(prefix=f"{settings.API_PREFIX}/workflow-definitions", tags=["Definitions"])


@router.post(
    "",
    response_model=WorkflowDefinitionDTO,
    responses={400: {"model": ErrorResponse}},
    summary="Register a workflow definition",
    description="Validate a definition of states and actions and add it to the registry.",
)
async def register_definition(
    request: WorkflowDefinitionDTO,
    use_case: RegisterDefinitionUseCase = Depends(get_register_definition_use_case),
) -> WorkflowDefinitionDTO:
    """
    Rejects duplicate ids, definitions without exactly one initial state, and
    actions that reference undeclared states. Accepted definitions are
    immutable from here on.
    """
    definition = await use_case.execute(request.to_domain())
    return WorkflowDefinitionDTO.from_domain(definition)


@router.get(
    "/{definition_id}",
    response_model=WorkflowDefinitionDTO,
    responses={404: {"model": ErrorResponse}},
    summary="Get a workflow definition",
)
async def get_definition(
    definition_id: str,
    use_case: GetDefinitionUseCase = Depends(get_definition_use_case),
) -> WorkflowDefinitionDTO:
    definition = await use_case.execute(definition_id)
    return WorkflowDefinitionDTO.from_domain(definition)
