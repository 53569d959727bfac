from dataclasses import dataclass, field
from datetime import datetime, timezone
from uuid import uuid4

from src.domain.workflow.entities.definition import Action, WorkflowDefinition
from src.domain.workflow.exceptions import (
    ActionDisabledError,
    ActionNotFoundError,
    FinalStateTransitionDeniedError,
    InvalidTransitionError,
)


@dataclass(frozen=True)
class HistoryEntry:
    action_id: str
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))


@dataclass
class WorkflowInstance:
    """
    Aggregate Root representing a single run of a WorkflowDefinition.

    The instance only references its definition by id. Its position and audit
    trail change exclusively through `apply`, which reassigns the current
    state and appends the history record together.
    """
    definition_id: str
    current_state: str
    id: str = field(default_factory=lambda: str(uuid4()))
    history: list[HistoryEntry] = field(default_factory=list)

    @classmethod
    def start(cls, definition: WorkflowDefinition) -> "WorkflowInstance":
        return cls(
            definition_id=definition.id,
            current_state=definition.initial_state().id,
        )

    def resolve_action(self, definition: WorkflowDefinition, action_id: str) -> Action:
        """
        Finds the action and checks that it may fire from the current state.

        Checks, in order:
        1. The action exists somewhere in the definition.
        2. The action is enabled.
        3. The current state is one of the action's source states.
        4. The current state is not final.

        The final-state check runs after the source-state check, so a final
        state listed as a source reports the final-state denial.

        Raises:
            ActionNotFoundError, ActionDisabledError, InvalidTransitionError,
            FinalStateTransitionDeniedError
        """
        action = definition.get_action(action_id)
        if action is None:
            raise ActionNotFoundError(definition.id, action_id)

        if not action.enabled:
            raise ActionDisabledError(action_id)

        if not action.can_fire_from(self.current_state):
            raise InvalidTransitionError(action_id, self.current_state)

        state = definition.get_state(self.current_state)
        if state is not None and state.is_final:
            raise FinalStateTransitionDeniedError(action_id, self.current_state)

        return action

    def apply(self, action: Action) -> None:
        entry = HistoryEntry(action_id=action.id)
        self.current_state = action.to_state
        self.history.append(entry)

    def execute_action(self, definition: WorkflowDefinition, action_id: str) -> HistoryEntry:
        action = self.resolve_action(definition, action_id)
        self.apply(action)
        return self.history[-1]
