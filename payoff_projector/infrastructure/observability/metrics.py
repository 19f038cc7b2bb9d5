"""Prometheus metrics for monitoring projection volume, payoff horizons, and failures"""

from prometheus_client import Counter, Histogram

# Projection metrics
projection_counter = Counter(
    "payoff_projection_total",
    "Total payoff projections generated",
    ["mode"],  # minimum | snowball
)

projection_months_histogram = Histogram(
    "payoff_projection_months",
    "Months until every account is paid off",
    buckets=[6, 12, 24, 36, 60, 120, 240, 480, 1200],
)

projection_failure_counter = Counter(
    "payoff_projection_failures_total",
    "Projections rejected or aborted",
    ["reason"],  # validation | non_amortizing | did_not_converge
)

# Service health
request_duration_histogram = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint", "status"],
)


def record_projection(snowballing: bool, number_of_months: int) -> None:
    """Record a completed projection by mode and payoff horizon"""
    mode = "snowball" if snowballing else "minimum"
    projection_counter.labels(mode=mode).inc()
    projection_months_histogram.observe(number_of_months)


def record_projection_failure(reason: str) -> None:
    """Record a projection that raised a domain error"""
    projection_failure_counter.labels(reason=reason).inc()
