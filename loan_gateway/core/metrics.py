"""Prometheus metrics for the Loan Gateway service.

Metrics are organized into two categories:

Business Metrics (for Product/Credit):
- loan_decision_total: Decisions by outcome and decline reason
- loan_decision_invalid_total: Rejected malformed requests by error code
- loan_approved_amount: Distribution of approved amounts
- loan_approved_period_months: Distribution of approved periods

Technical Metrics (for Engineering/SRE):
- loan_decision_latency_seconds: Decision latency
- loan_http_requests_total: HTTP requests by endpoint/status
- loan_http_request_latency_seconds: HTTP latency by endpoint

Recording helpers do nothing when settings.metrics_enabled is off.
"""

import time
from contextlib import contextmanager
from typing import Generator, Optional

from prometheus_client import Counter, Histogram, REGISTRY, generate_latest
from prometheus_client.exposition import CONTENT_TYPE_LATEST

from loan_gateway.core.config import settings


# =============================================================================
# Business Metrics
# =============================================================================

decision_total = Counter(
    "loan_decision_total",
    "Total number of loan decisions made",
    ["outcome", "reason"],  # approved/declined, decline reason or "none"
)

invalid_request_total = Counter(
    "loan_decision_invalid_total",
    "Total number of loan requests rejected as malformed",
    ["error"],
)

approved_amount = Histogram(
    "loan_approved_amount",
    "Approved loan amount in euros",
    buckets=[2000, 3000, 4000, 5000, 6000, 7000, 8000, 9000, 10000],
)

approved_period = Histogram(
    "loan_approved_period_months",
    "Approved loan period in months",
    buckets=[12, 18, 24, 36, 48, 60],
)


# =============================================================================
# Technical Metrics
# =============================================================================

decision_latency = Histogram(
    "loan_decision_latency_seconds",
    "Decision latency in seconds",
    buckets=[0.0005, 0.001, 0.0025, 0.005, 0.01, 0.025, 0.05, 0.1],
)

http_requests_total = Counter(
    "loan_http_requests_total",
    "Total HTTP requests by endpoint and status",
    ["method", "endpoint", "status"],
)

http_request_latency = Histogram(
    "loan_http_request_latency_seconds",
    "HTTP request latency by endpoint",
    ["method", "endpoint"],
    buckets=[0.01, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0],
)


# =============================================================================
# Helper Functions
# =============================================================================

def record_decision(
    loan_amount: Optional[int],
    loan_period: Optional[int],
    reason: Optional[str] = None,
) -> None:
    """Record a decision in metrics (amount/period are None when declined)."""
    if not settings.metrics_enabled:
        return

    if loan_amount is None or loan_period is None:
        decision_total.labels(outcome="declined", reason=reason or "unknown").inc()
        return

    decision_total.labels(outcome="approved", reason="none").inc()
    approved_amount.observe(loan_amount)
    approved_period.observe(loan_period)


def record_invalid_request(error_code: str) -> None:
    """Record a request rejected as malformed."""
    if not settings.metrics_enabled:
        return
    invalid_request_total.labels(error=error_code).inc()


@contextmanager
def track_decision_latency() -> Generator[None, None, None]:
    """Context manager to track decision latency."""
    if not settings.metrics_enabled:
        yield
        return

    start = time.perf_counter()
    try:
        yield
    finally:
        duration = time.perf_counter() - start
        decision_latency.observe(duration)


def record_http_request(method: str, endpoint: str, status: int, duration: float) -> None:
    """Record an HTTP request."""
    if not settings.metrics_enabled:
        return
    http_requests_total.labels(method=method, endpoint=endpoint, status=str(status)).inc()
    http_request_latency.labels(method=method, endpoint=endpoint).observe(duration)


def get_metrics() -> bytes:
    """Get current metrics in Prometheus format."""
    return generate_latest(REGISTRY)


def get_metrics_content_type() -> str:
    """Get the content type for metrics response."""
    return CONTENT_TYPE_LATEST
