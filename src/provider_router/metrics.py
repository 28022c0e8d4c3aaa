from __future__ import annotations

from prometheus_client import Counter, Histogram, start_http_server

selections_total = Counter(
    "router_selections_total",
    "Model selections performed by the router",
    labelnames=["provider", "status"],
)

selection_latency_seconds = Histogram(
    "router_selection_latency_seconds",
    "Time spent choosing a model",
    buckets=[0.00005, 0.0001, 0.0005, 0.001, 0.005, 0.01, 0.025],
)

rate_limit_marks_total = Counter(
    "router_rate_limit_marks_total",
    "Providers marked as rate limited",
    labelnames=["provider"],
)

errors_classified_total = Counter(
    "router_errors_classified_total",
    "Provider failures classified by error code",
    labelnames=["code"],
)

failovers_total = Counter(
    "router_failovers_total",
    "Failover decisions",
    labelnames=["outcome"],
)


def maybe_start_metrics(*, enable: bool, bind: str, port: int) -> None:
    if not enable:
        return
    start_http_server(port, addr=bind)
