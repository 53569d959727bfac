from src.adapters.secondary.memory.in_memory_definition_repository import InMemoryDefinitionRepository
from src.adapters.secondary.memory.in_memory_instance_repository import InMemoryInstanceRepository
from src.application.workflow.use_cases.execute_action import ExecuteActionUseCase
from src.application.workflow.use_cases.get_definition import GetDefinitionUseCase
from src.application.workflow.use_cases.get_instance import GetInstanceUseCase
from src.application.workflow.use_cases.register_definition import RegisterDefinitionUseCase
from src.application.workflow.use_cases.start_instance import StartInstanceUseCase
from src.shared.locks import instance_locks
from src.shared.metrics import metrics_registry

# Process-wide registries. They live as long as the process does.
definition_repository = InMemoryDefinitionRepository()
instance_repository = InMemoryInstanceRepository()


def get_definition_repository() -> InMemoryDefinitionRepository:
    return definition_repository


def get_instance_repository() -> InMemoryInstanceRepository:
    return instance_repository


def get_register_definition_use_case() -> RegisterDefinitionUseCase:
    return RegisterDefinitionUseCase(
        definition_repository=definition_repository,
        metrics=metrics_registry,
    )


def get_definition_use_case() -> GetDefinitionUseCase:
    return GetDefinitionUseCase(definition_repository=definition_repository)


def get_start_instance_use_case() -> StartInstanceUseCase:
    return StartInstanceUseCase(
        definition_repository=definition_repository,
        instance_repository=instance_repository,
        metrics=metrics_registry,
    )


def get_execute_action_use_case() -> ExecuteActionUseCase:
    return ExecuteActionUseCase(
        definition_repository=definition_repository,
        instance_repository=instance_repository,
        locks=instance_locks,
        metrics=metrics_registry,
    )


def get_instance_use_case() -> GetInstanceUseCase:
    return GetInstanceUseCase(instance_repository=instance_repository)
