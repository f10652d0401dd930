"""Prometheus metrics for the data-access layer."""

from prometheus_client import Counter

tenant_isolation_blocked_total = Counter(
    "tenant_isolation_blocked_total",
    "Operations blocked or hidden by tenant isolation",
    ["model", "operation"],
)

audit_log_failures_total = Counter(
    "audit_log_failures_total",
    "Activity log writes that failed",
    ["entity_type", "action"],
)


class PrometheusIsolationMetrics:
    """Prometheus-based isolation metrics implementation."""

    def inc_blocked(self, model: str, operation: str) -> None:
        """Increment blocked-access counter."""
        tenant_isolation_blocked_total.labels(model=model, operation=operation).inc()

    def inc_audit_log_failure(self, entity_type: str, action: str) -> None:
        """Increment failed activity-log counter."""
        audit_log_failures_total.labels(entity_type=entity_type, action=action).inc()
