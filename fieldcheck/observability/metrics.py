"""
Prometheus metrics for fieldcheck validation runs

Metrics are recorded by the glue around the engine (the CLI), never by the
validation driver itself. A run can be exported in the Prometheus text
format, e.g. for the node_exporter textfile collector.
"""
from pathlib import Path

from prometheus_client import (
    CollectorRegistry,
    Counter,
    Histogram,
    write_to_textfile,
)

from fieldcheck.core.models import ValidationResult

# Global registry for metrics
REGISTRY = CollectorRegistry()


# =======================
# VALIDATION METRICS
# =======================

records_validated_total = Counter(
    name="fieldcheck_records_validated_total",
    documentation="Total number of records validated",
    labelnames=["schema", "status"],  # status: valid, invalid
    registry=REGISTRY,
)

violations_total = Counter(
    name="fieldcheck_violations_total",
    documentation="Total number of reported violations",
    labelnames=["schema", "rule", "kind"],
    registry=REGISTRY,
)

validation_duration_seconds = Histogram(
    name="fieldcheck_validation_duration_seconds",
    documentation="Time spent validating one input file",
    labelnames=["schema", "mode"],  # mode: all, fail-fast
    buckets=[0.001, 0.01, 0.1, 0.5, 1.0, 5.0, 30.0],
    registry=REGISTRY,
)


def write_metrics(path: str | Path) -> None:
    """Write the current metrics to a file in the Prometheus text format."""
    write_to_textfile(str(path), REGISTRY)


class track_duration:
    """
    Context manager for tracking operation duration

    Usage:
        with track_duration(validation_duration_seconds, schema="signup", mode="all"):
            ...
    """

    def __init__(self, histogram: Histogram, **labels):
        self.histogram = histogram
        self.labels = labels
        self.timer = None

    def __enter__(self):
        self.timer = self.histogram.labels(**self.labels).time()
        self.timer.__enter__()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.timer.__exit__(exc_type, exc_val, exc_tb)
        return False


def record_validation(schema: str, result: ValidationResult) -> None:
    """
    Record the outcome of validating one record.

    Args:
        schema: Schema name the record was validated against
        result: Outcome of the validation
    """
    status = "valid" if result.passed else "invalid"
    records_validated_total.labels(schema=schema, status=status).inc()
    for violation in result.violations:
        violations_total.labels(schema=schema, rule=violation.rule, kind=violation.kind.value).inc()
