"""Prometheus metrics for monitoring decision outcomes and approved amounts"""

from typing import Optional
from prometheus_client import Counter, Histogram

# Decision metrics
decision_counter = Counter(
    "loan_decision_total",
    "Total loan decisions made",
    ["outcome"],  # approved | invalid_input | ineligible | no_valid_loan | error
)

approved_amount_bucket_counter = Counter(
    "loan_approved_amount_bucket",
    "Approved loan amounts by bucket",
    ["bucket"],  # 2000-4999, 5000-9999, 10000+
)

# Service health
request_duration_histogram = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint", "status"],
)


def record_decision(outcome: str, loan_amount: Optional[int] = None) -> None:
    """Record decision metrics for monitoring approval rates and offer distribution"""
    decision_counter.labels(outcome=outcome).inc()

    if loan_amount is None:
        return

    if loan_amount < 5000:
        bucket = "2000-4999"
    elif loan_amount < 10000:
        bucket = "5000-9999"
    else:
        bucket = "10000+"

    approved_amount_bucket_counter.labels(bucket=bucket).inc()
