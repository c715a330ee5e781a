# src/blm_kit/observability/base.py

from typing import Protocol

# Label keys used by the parse pipeline, e.g. {"stage": "data"}.
ParseLabels = dict[str, str]


class MetricsHook(Protocol):
    """Sink for parse metrics.

    The pipeline calls it once per parse: a read and a total duration,
    parse and record counters, and a field count gauge on success, or a
    single error counter labelled with the failing stage.
    Names live in ``observability.names``.
    """

    def record_latency(
        self, name: str, value_ms: float, labels: ParseLabels | None = None
    ) -> None: ...

    def increment(
        self, name: str, value: int = 1, labels: ParseLabels | None = None
    ) -> None: ...

    def record_gauge(
        self, name: str, value: float, labels: ParseLabels | None = None
    ) -> None: ...


class NoOpMetricsHook:
    """Default hook when the caller has no metrics backend."""

    def record_latency(
        self, name: str, value_ms: float, labels: ParseLabels | None = None
    ) -> None:
        pass

    def increment(
        self, name: str, value: int = 1, labels: ParseLabels | None = None
    ) -> None:
        pass

    def record_gauge(
        self, name: str, value: float, labels: ParseLabels | None = None
    ) -> None:
        pass
