from prometheus_client import Counter

from src.ports.secondary.metrics import IMetrics
from src.shared.config import settings


class MetricsRegistry(IMetrics):
    """Prometheus metrics registry."""

    def __init__(self, enabled: bool = True):
        self.enabled = enabled

        # Definition metrics
        self.DEFINITIONS_REGISTERED_TOTAL = Counter(
            "workflow_definitions_registered_total",
            "Total number of workflow definitions accepted into the registry",
        )

        self.DEFINITION_REJECTIONS_TOTAL = Counter(
            "workflow_definition_rejections_total",
            "Total number of workflow definitions rejected by validation",
            ["error_code"],
        )

        # Instance metrics
        self.INSTANCES_STARTED_TOTAL = Counter(
            "workflow_instances_started_total",
            "Total number of workflow instances started",
            ["definition_id"],
        )

        self.ACTIONS_EXECUTED_TOTAL = Counter(
            "workflow_actions_executed_total",
            "Total number of successful action executions",
            ["definition_id", "action_id"],
        )

        self.ACTION_REJECTIONS_TOTAL = Counter(
            "workflow_action_rejections_total",
            "Total number of rejected action executions",
            ["error_code"],
        )

    def record_definition_registered(self):
        if self.enabled:
            self.DEFINITIONS_REGISTERED_TOTAL.inc()

    def record_definition_rejected(self, error_code: str):
        if self.enabled:
            self.DEFINITION_REJECTIONS_TOTAL.labels(error_code=error_code).inc()

    def record_instance_started(self, definition_id: str):
        if self.enabled:
            self.INSTANCES_STARTED_TOTAL.labels(definition_id=definition_id).inc()

    def record_action_executed(self, definition_id: str, action_id: str):
        if self.enabled:
            self.ACTIONS_EXECUTED_TOTAL.labels(definition_id=definition_id, action_id=action_id).inc()

    def record_action_rejected(self, error_code: str):
        if self.enabled:
            self.ACTION_REJECTIONS_TOTAL.labels(error_code=error_code).inc()


# Global registry instance for adapter/framework layer
metrics_registry = MetricsRegistry(enabled=settings.METRICS_ENABLED)
