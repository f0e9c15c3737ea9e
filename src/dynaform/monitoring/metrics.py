"""
Metrics Collection
Prometheus metrics for blueprint loading and form submission
"""

import time
from contextlib import contextmanager
from typing import Callable

from prometheus_client import Counter, Gauge, Histogram, generate_latest


class MetricsCollector:
    """
    Collects and exposes Prometheus metrics for the form engine.
    """

    def __init__(self) -> None:
        # Blueprint metrics
        self.blueprint_fetch_total = Counter(
            "dynaform_blueprint_fetch_total",
            "Total number of blueprint fetches",
            ["status"],
        )

        # Submission metrics
        self.submissions_total = Counter(
            "dynaform_submissions_total",
            "Total number of submit attempts by outcome",
            ["outcome"],
        )
        self.submit_duration = Histogram(
            "dynaform_submit_duration_seconds",
            "Duration of the submission POST in seconds",
            buckets=[0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 10.0],
        )
        self.field_errors_total = Counter(
            "dynaform_field_errors_total",
            "Total number of field validation errors",
            ["rule"],
        )

        # System metrics
        self.uptime = Gauge(
            "dynaform_uptime_seconds",
            "Process uptime in seconds",
        )
        self.start_time = time.time()

    def record_blueprint_fetch(self, status: str) -> None:
        """Record a blueprint fetch."""
        self.blueprint_fetch_total.labels(status=status).inc()

    def record_submission(self, outcome: str) -> None:
        """Record a submit attempt outcome."""
        self.submissions_total.labels(outcome=outcome).inc()

    def record_field_error(self, rule: str) -> None:
        """Record a field validation error."""
        self.field_errors_total.labels(rule=rule).inc()

    def update_uptime(self) -> None:
        """Update the uptime metric."""
        self.uptime.set(time.time() - self.start_time)

    @contextmanager
    def measure_duration(self, callback: Callable[[float], None]):
        """Context manager to measure operation duration."""
        start = time.time()
        try:
            yield
        finally:
            duration = time.time() - start
            callback(duration)

    def get_metrics(self) -> bytes:
        """Get metrics in Prometheus format."""
        self.update_uptime()
        return generate_latest()


# Global metrics collector instance
metrics_collector = MetricsCollector()
