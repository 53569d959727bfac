from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from src.domain.workflow.entities.definition import Action, State, WorkflowDefinition
from src.domain.workflow.entities.instance import HistoryEntry, WorkflowInstance


class CamelModel(BaseModel):
    """Serializes camelCase on the wire and accepts either spelling on input."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class StateDTO(CamelModel):
    id: str
    name: str = ""
    is_initial: bool = False
    is_final: bool = False
    enabled: bool = True

    @classmethod
    def from_domain(cls, state: State) -> "StateDTO":
        return cls(
            id=state.id,
            name=state.name,
            is_initial=state.is_initial,
            is_final=state.is_final,
            enabled=state.enabled,
        )

    def to_domain(self) -> State:
        return State(
            id=self.id,
            name=self.name,
            is_initial=self.is_initial,
            is_final=self.is_final,
            enabled=self.enabled,
        )


class ActionDTO(CamelModel):
    id: str
    name: str = ""
    enabled: bool = True
    from_states: list[str] = Field(default_factory=list)
    to_state: str

    @classmethod
    def from_domain(cls, action: Action) -> "ActionDTO":
        return cls(
            id=action.id,
            name=action.name,
            enabled=action.enabled,
            from_states=list(action.from_states),
            to_state=action.to_state,
        )

    def to_domain(self) -> Action:
        return Action(
            id=self.id,
            name=self.name,
            enabled=self.enabled,
            from_states=tuple(self.from_states),
            to_state=self.to_state,
        )


class WorkflowDefinitionDTO(CamelModel):
    id: str = Field(..., min_length=1)
    name: str = ""
    states: list[StateDTO] = Field(default_factory=list)
    actions: list[ActionDTO] = Field(default_factory=list)

    @classmethod
    def from_domain(cls, definition: WorkflowDefinition) -> "WorkflowDefinitionDTO":
        return cls(
            id=definition.id,
            name=definition.name,
            states=[StateDTO.from_domain(s) for s in definition.states],
            actions=[ActionDTO.from_domain(a) for a in definition.actions],
        )

    def to_domain(self) -> WorkflowDefinition:
        return WorkflowDefinition(
            id=self.id,
            name=self.name,
            states=tuple(s.to_domain() for s in self.states),
            actions=tuple(a.to_domain() for a in self.actions),
        )


class HistoryEntryDTO(CamelModel):
    action_id: str
    timestamp: datetime

    @classmethod
    def from_domain(cls, entry: HistoryEntry) -> "HistoryEntryDTO":
        return cls(action_id=entry.action_id, timestamp=entry.timestamp)


class WorkflowInstanceDTO(CamelModel):
    id: str
    definition_id: str
    current_state: str
    history: list[HistoryEntryDTO] = Field(default_factory=list)

    @classmethod
    def from_domain(cls, instance: WorkflowInstance) -> "WorkflowInstanceDTO":
        return cls(
            id=instance.id,
            definition_id=instance.definition_id,
            current_state=instance.current_state,
            history=[HistoryEntryDTO.from_domain(e) for e in instance.history],
        )


class ErrorDetail(BaseModel):
    message: str
    error_code: str
    context: dict = Field(default_factory=dict)


class ErrorResponse(BaseModel):
    error: ErrorDetail
