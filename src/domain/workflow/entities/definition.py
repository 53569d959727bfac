from dataclasses import dataclass, field
from functools import cached_property


@dataclass(frozen=True)
class State:
    """
    A node in a workflow graph.

    Attributes:
        id (str): Identifier, unique within its definition.
        name (str): Human-readable label.
        is_initial (bool): Whether instances start here. Exactly one per definition.
        is_final (bool): Whether actions are denied once an instance sits here.
        enabled (bool): Carried as data; no transition check consults it.
    """

    id: str
    name: str
    is_initial: bool = False
    is_final: bool = False
    enabled: bool = True


@dataclass(frozen=True)
class Action:
    """
    A labeled transition from any of `from_states` to `to_state`.

    Attributes:
        id (str): Identifier, unique within its definition.
        name (str): Human-readable label.
        enabled (bool): Disabled actions can never fire.
        from_states (tuple[str, ...]): Source state ids.
        to_state (str): Destination state id.
    """

    id: str
    name: str
    to_state: str
    from_states: tuple[str, ...] = ()
    enabled: bool = True

    def can_fire_from(self, state_id: str) -> bool:
        return state_id in self.from_states


@dataclass(frozen=True)
class WorkflowDefinition:
    """
    Root aggregate for a workflow definition. Immutable once constructed.

    Lookups by id go through dictionaries built in declaration order, so a
    later duplicate id shadows an earlier one.
    """

    id: str
    name: str
    states: tuple[State, ...] = field(default_factory=tuple)
    actions: tuple[Action, ...] = field(default_factory=tuple)

    @cached_property
    def _states_by_id(self) -> dict[str, State]:
        return {state.id: state for state in self.states}

    @cached_property
    def _actions_by_id(self) -> dict[str, Action]:
        return {action.id: action for action in self.actions}

    @property
    def state_ids(self) -> set[str]:
        return set(self._states_by_id)

    def initial_states(self) -> list[State]:
        return [state for state in self.states if state.is_initial]

    def initial_state(self) -> State:
        """Returns the first initial state. Registered definitions have exactly one."""
        return self.initial_states()[0]

    def get_state(self, state_id: str) -> State | None:
        return self._states_by_id.get(state_id)

    def get_action(self, action_id: str) -> Action | None:
        return self._actions_by_id.get(action_id)
