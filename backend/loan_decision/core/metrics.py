"""Prometheus Metrics.

This module defines and exports Prometheus metrics for monitoring the service.
Metrics include counters, gauges, histograms, and summaries for tracking:
- API requests and responses
- Loan decisions by outcome
- Approved loan amounts and periods
"""

from prometheus_client import (
    CONTENT_TYPE_LATEST,
    Counter,
    Gauge,
    Histogram,
    Info,
    Summary,
    generate_latest,
)

# ========================================
# API Metrics
# ========================================

http_requests_total = Counter(
    'http_requests_total',
    'Total HTTP requests',
    ['method', 'endpoint', 'status_code']
)

http_request_duration_seconds = Histogram(
    'http_request_duration_seconds',
    'HTTP request duration in seconds',
    ['method', 'endpoint'],
    buckets=(0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 10.0)
)

http_requests_in_progress = Gauge(
    'http_requests_in_progress',
    'Number of HTTP requests currently being processed',
    ['method', 'endpoint']
)

# ========================================
# Decision Metrics
# ========================================

loan_decisions_total = Counter(
    'loan_decisions_total',
    'Total loan decisions by outcome',
    ['outcome']
)

approved_loan_amount = Summary(
    'approved_loan_amount',
    'Summary of approved loan amounts'
)

approved_loan_period = Histogram(
    'approved_loan_period',
    'Approved loan period in months',
    buckets=(12, 18, 24, 30, 36, 42, 48, 54, 60)
)

# ========================================
# Application Info
# ========================================

app_info = Info(
    'app',
    'Application information'
)


def set_app_info(version: str, environment: str):
    """Set application information for Prometheus.

    Call this during app startup.
    """
    app_info.info({
        'version': version,
        'environment': environment,
        'service': 'loan-decision-engine'
    })


def record_decision(outcome: str, amount: int | None = None, period: int | None = None):
    """Record a decision outcome, and the offer when one was made."""
    loan_decisions_total.labels(outcome=outcome).inc()
    if amount is not None:
        approved_loan_amount.observe(amount)
    if period is not None:
        approved_loan_period.observe(period)


def get_metrics():
    """Get current Prometheus metrics in text format.

    Use this for the /metrics endpoint.
    """
    return generate_latest()


def get_content_type():
    """Get the content type for Prometheus metrics."""
    return CONTENT_TYPE_LATEST
