"""
Prometheus Metrics — contract validation observability.

Exposes counters and a histogram for:
- Individual failures found, by validator and failure kind
- Check outcomes (passed / failed), by validator
- Validation latency, by validator

Usage
-----
    from contract_validation.validators.metrics import (
        record_validation_failure,
        timed_validation,
    )

    with timed_validation("contract"):
        result = validator.validate_response_against_schema(body, "Pet")

    record_validation_failure("contract", "type_mismatch")
"""
from __future__ import annotations

from contextlib import contextmanager
from typing import Generator

from prometheus_client import Counter, Histogram


# ---------------------------------------------------------------------------
# Metric definitions
# ---------------------------------------------------------------------------

# Individual failures, labelled by validator ("schema" / "contract") and kind.
VALIDATION_FAILURES: Counter = Counter(
    "contract_validation_failures_total",
    "Individual validation failures by validator and failure kind",
    ["validator", "kind"],
)

# One increment per validation call.
VALIDATION_CHECKS: Counter = Counter(
    "contract_validation_checks_total",
    "Validation calls by validator and outcome (passed / failed)",
    ["validator", "outcome"],
)

# Time spent per validation call (seconds).
VALIDATION_LATENCY: Histogram = Histogram(
    "contract_validation_seconds",
    "Validation time per call in seconds",
    ["validator"],
    buckets=(0.0005, 0.001, 0.005, 0.01, 0.05, 0.1, 0.5, 1.0),
)


# ---------------------------------------------------------------------------
# Convenience helpers
# ---------------------------------------------------------------------------

def record_validation_failure(validator: str, kind: str = "generic", count: int = 1) -> None:
    """Add *count* failures of *kind* for *validator*."""
    if count > 0:
        VALIDATION_FAILURES.labels(validator=validator, kind=kind).inc(count)


def record_validation_outcome(validator: str, valid: bool) -> None:
    """Count one validation call for *validator*."""
    outcome = "passed" if valid else "failed"
    VALIDATION_CHECKS.labels(validator=validator, outcome=outcome).inc()


@contextmanager
def timed_validation(validator: str) -> Generator[None, None, None]:
    """
    Context manager that records validation latency.

    Usage::

        with timed_validation("schema"):
            result = schema_validator.validate(PET_SCHEMA, body)
    """
    with VALIDATION_LATENCY.labels(validator=validator).time():
        yield
