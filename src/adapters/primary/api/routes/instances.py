from fastapi import APIRouter, Depends

from src.adapters.primary.api.dependencies import (
    get_execute_action_use_case,
    get_instance_use_case,
    get_start_instance_use_case,
)
from src.adapters.primary.api.dto import ErrorResponse, WorkflowInstanceDTO
from src.application.workflow.use_cases.execute_action import ExecuteActionUseCase
from src.application.workflow.use_cases.get_instance import GetInstanceUseCase
from src.application.workflow.use_cases.start_instance import StartInstanceUseCase
from src.shared.config import settings

router = APIRouter(prefix=f"{settings.API_PREFIX}/workflow-instances", tags=["Instances"])


@router.post(
    "/{definition_id}",
    response_model=WorkflowInstanceDTO,
    responses={404: {"model": ErrorResponse}},
    summary="Start a workflow instance",
    description="Create a new instance of a registered definition at its initial state.",
)
async def start_instance(
    definition_id: str,
    use_case: StartInstanceUseCase = Depends(get_start_instance_use_case),
) -> WorkflowInstanceDTO:
    instance = await use_case.execute(definition_id)
    return WorkflowInstanceDTO.from_domain(instance)


@router.post(
    "/{instance_id}/execute/{action_id}",
    response_model=WorkflowInstanceDTO,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
    summary="Execute an action",
    description="Fire an action against an instance and record it in the instance history.",
)
async def execute_action(
    instance_id: str,
    action_id: str,
    use_case: ExecuteActionUseCase = Depends(get_execute_action_use_case),
) -> WorkflowInstanceDTO:
    """
    Fails with 404 for an unknown instance, and with 400 when the action is
    missing from the definition, disabled, not applicable to the current
    state, or the instance already sits on a final state.
    """
    instance = await use_case.execute(instance_id, action_id)
    return WorkflowInstanceDTO.from_domain(instance)


@router.get(
    "/{instance_id}",
    response_model=WorkflowInstanceDTO,
    responses={404: {"model": ErrorResponse}},
    summary="Get a workflow instance",
)
async def get_instance(
    instance_id: str,
    use_case: GetInstanceUseCase = Depends(get_instance_use_case),
) -> WorkflowInstanceDTO:
    instance = await use_case.execute(instance_id)
    return WorkflowInstanceDTO.from_domain(instance)
