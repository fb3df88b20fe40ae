"""Prometheus metrics for monitoring payload quality and receipt delivery"""

from prometheus_client import Counter, Histogram

# Normalization metrics
normalization_counter = Counter(
    "rooms_payments_normalized_total",
    "Raw payment entries processed by the normalizer",
    ["outcome"],  # accepted | rejected
)

suspicious_value_counter = Counter(
    "rooms_payments_suspicious_values_total",
    "Values rejected by sanitizers as out of policy",
    ["kind"],  # amount | date
)

# Receipt metrics
receipt_request_counter = Counter(
    "receipt_requests_total",
    "Receipt documents requested",
    ["mode"],  # view | download
)

receipt_failure_counter = Counter(
    "receipt_failures_total",
    "Receipt requests that could not be served",
)

# Service health
request_duration_histogram = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint", "status"],
)


def record_normalization(accepted: int, rejected: int) -> None:
    """Record how many raw entries survived normalization"""
    if accepted:
        normalization_counter.labels(outcome="accepted").inc(accepted)
    if rejected:
        normalization_counter.labels(outcome="rejected").inc(rejected)


def record_suspicious_value(kind: str) -> None:
    suspicious_value_counter.labels(kind=kind).inc()
