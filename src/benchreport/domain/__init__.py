"""Domain models for benchreport."""

from benchreport.domain.metrics import (
    ABSENT_LATENCY,
    Latency,
    Metrics,
    Report,
    Request,
    Transfer,
)

__all__ = [
    "ABSENT_LATENCY",
    "Latency",
    "Metrics",
    "Report",
    "Request",
    "Transfer",
]
