from abc import ABC, abstractmethod


class IMetrics(ABC):
    @abstractmethod
    def record_definition_registered(self) -> None:
        pass

    @abstractmethod
    def record_definition_rejected(self, error_code: str) -> None:
        pass

    @abstractmethod
    def record_instance_started(self, definition_id: str) -> None:
        pass

    @abstractmethod
    def record_action_executed(self, definition_id: str, action_id: str) -> None:
        pass

    @abstractmethod
    def record_action_rejected(self, error_code: str) -> None:
        pass
