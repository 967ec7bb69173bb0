"""Prometheus instrumentation for API calls.

Metrics are registered on a private registry unless one is supplied, so
several clients can be instrumented in the same process without colliding
on the global ``REGISTRY``.
"""

from prometheus_client import CollectorRegistry, Counter, Histogram

SUCCESS = "success"
HTTP_ERROR = "http_error"
EXPECTATION_ERROR = "expectation_error"
CONTRACT_ERROR = "contract_error"


class RequestMetrics:
    """Counts API calls by operation and outcome and times them."""

    def __init__(self, registry: CollectorRegistry | None = None):
        self.registry = registry if registry is not None else CollectorRegistry()
        self._requests = Counter(
            "animoto_api_requests",
            "Animoto API calls by operation and outcome",
            labelnames=["operation", "outcome"],
            registry=self.registry,
        )
        self._duration = Histogram(
            "animoto_api_request_duration_seconds",
            "Duration of Animoto API calls in seconds",
            labelnames=["operation"],
            registry=self.registry,
        )

    def observe(self, operation: str, outcome: str, duration: float) -> None:
        self._requests.labels(operation=operation, outcome=outcome).inc()
        self._duration.labels(operation=operation).observe(duration)
