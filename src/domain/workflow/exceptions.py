from typing import Any, Dict, Optional

class WorkflowException(Exception):
    def __init__(
        self,
        message: str,
        error_code: str = "WORKFLOW_ERROR",
        context: Optional[Dict[str, Any]] = None
    ):
        self.message = message
        self.error_code = error_code
        self.context = context or {}
        super().__init__(self.message)


# === Structural errors (raised once, at registration) ===

class DefinitionValidationError(WorkflowException):
    """Base class for definitions rejected by the validator."""


class DuplicateDefinitionError(DefinitionValidationError):
    def __init__(self, definition_id: str):
        self.definition_id = definition_id
        super().__init__(
            message=f"Definition with id '{definition_id}' already exists.",
            error_code="DUPLICATE_DEFINITION",
            context={"definition_id": definition_id}
        )

class InvalidInitialStateCountError(DefinitionValidationError):
    def __init__(self, definition_id: str, initial_count: int):
        self.definition_id = definition_id
        self.initial_count = initial_count
        super().__init__(
            message="Workflow must have exactly one initial state.",
            error_code="INVALID_INITIAL_STATE_COUNT",
            context={"definition_id": definition_id, "initial_count": initial_count}
        )

class UnknownStateReferenceError(DefinitionValidationError):
    def __init__(self, action_id: str, state_id: str, field: str):
        self.action_id = action_id
        self.state_id = state_id
        self.field = field
        if field == "toState":
            message = f"Action '{action_id}' targets unknown state '{state_id}'."
        else:
            message = f"Action '{action_id}' has unknown fromState '{state_id}'."
        super().__init__(
            message=message,
            error_code="UNKNOWN_STATE_REFERENCE",
            context={"action_id": action_id, "state_id": state_id, "field": field}
        )


# === Lookup errors ===

class DefinitionNotFoundError(WorkflowException):
    def __init__(self, definition_id: str):
        self.definition_id = definition_id
        super().__init__(
            message=f"Workflow definition '{definition_id}' not found.",
            error_code="DEFINITION_NOT_FOUND",
            context={"definition_id": definition_id}
        )

class InstanceNotFoundError(WorkflowException):
    def __init__(self, instance_id: str):
        self.instance_id = instance_id
        super().__init__(
            message=f"Instance '{instance_id}' not found.",
            error_code="INSTANCE_NOT_FOUND",
            context={"instance_id": instance_id}
        )


# === Execution errors (raised per execute call) ===

class ExecutionError(WorkflowException):
    """Base class for rejected action executions."""


class ActionNotFoundError(ExecutionError):
    def __init__(self, definition_id: str, action_id: str):
        self.definition_id = definition_id
        self.action_id = action_id
        super().__init__(
            message=f"Action '{action_id}' does not exist in workflow definition.",
            error_code="ACTION_NOT_FOUND",
            context={"definition_id": definition_id, "action_id": action_id}
        )

class ActionDisabledError(ExecutionError):
    def __init__(self, action_id: str):
        self.action_id = action_id
        super().__init__(
            message=f"Action '{action_id}' is disabled.",
            error_code="ACTION_DISABLED",
            context={"action_id": action_id}
        )

class InvalidTransitionError(ExecutionError):
    def __init__(self, action_id: str, current_state: str):
        self.action_id = action_id
        self.current_state = current_state
        super().__init__(
            message=f"Action '{action_id}' cannot be executed from state '{current_state}'.",
            error_code="INVALID_TRANSITION",
            context={"action_id": action_id, "current_state": current_state}
        )

class FinalStateTransitionDeniedError(ExecutionError):
    def __init__(self, action_id: str, current_state: str):
        self.action_id = action_id
        self.current_state = current_state
        super().__init__(
            message="Cannot execute actions on a final state.",
            error_code="FINAL_STATE_TRANSITION_DENIED",
            context={"action_id": action_id, "current_state": current_state}
        )


NOT_FOUND_ERROR_CODES = frozenset({"DEFINITION_NOT_FOUND", "INSTANCE_NOT_FOUND"})
