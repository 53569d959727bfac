from datetime import datetime, timezone

from fastapi import APIRouter, Depends

from src.adapters.primary.api.dependencies import (
    get_definition_repository,
    get_instance_repository,
)
from src.ports.secondary.definition_repository import IDefinitionRepository
from src.ports.secondary.instance_repository import IInstanceRepository
from src.shared.config import settings

router = APIRouter(tags=["Health"])

@router.get("/health")
async def health_check(
    definitions: IDefinitionRepository = Depends(get_definition_repository),
    instances: IInstanceRepository = Depends(get_instance_repository),
):
    return {
        "status": "healthy",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "version": settings.APP_VERSION,
        "registries": {
            "definitions": await definitions.count(),
            "instances": await instances.count(),
        }
    }
