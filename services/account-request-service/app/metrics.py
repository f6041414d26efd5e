"""Prometheus counters for account request processing."""

from __future__ import annotations

from prometheus_client import Counter

REQUESTS_TOTAL = Counter(
    "account_requests_total",
    "Account requests accepted by the service.",
)
PERSISTENCE_FAILURES_TOTAL = Counter(
    "account_request_persistence_failures_total",
    "Account requests whose database write failed.",
)
NOTIFICATION_FAILURES_TOTAL = Counter(
    "account_request_notification_failures_total",
    "Account requests whose notification email was not delivered.",
)
