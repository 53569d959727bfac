from src.domain.workflow.entities.definition import WorkflowDefinition
from src.domain.workflow.exceptions import (
    DuplicateDefinitionError,
    InvalidInitialStateCountError,
    UnknownStateReferenceError,
)


class DefinitionValidator:
    """
    Structural checks a definition must pass before it enters the registry.

    Checks run in a fixed order and stop at the first failure:
    1. The definition id is not already registered.
    2. Exactly one state is initial.
    3. Every action's `to_state` and `from_states` name declared states.

    Reachability, cycles, empty source sets and duplicate state/action ids
    are not checked.
    """

    def validate(self, definition: WorkflowDefinition, already_registered: bool = False) -> None:
        if already_registered:
            raise DuplicateDefinitionError(definition.id)

        self._validate_initial_state(definition)
        self._validate_references(definition)

    def _validate_initial_state(self, definition: WorkflowDefinition) -> None:
        initial_count = len(definition.initial_states())
        if initial_count != 1:
            raise InvalidInitialStateCountError(definition.id, initial_count)

    def _validate_references(self, definition: WorkflowDefinition) -> None:
        state_ids = definition.state_ids
        for action in definition.actions:
            if action.to_state not in state_ids:
                raise UnknownStateReferenceError(action.id, action.to_state, "toState")

            for from_state in action.from_states:
                if from_state not in state_ids:
                    raise UnknownStateReferenceError(action.id, from_state, "fromStates")
