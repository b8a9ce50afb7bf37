"""Metrics domain models for benchreport.

All latency values are stored in milliseconds. Request and transfer figures
are kept as the strings found in the tool output so that the rendered table
shows exactly what the load-testing tool printed.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

# Sentinel for a percentile the tool output did not report
ABSENT_LATENCY = 0.0


class Latency(BaseModel):
    """Latency statistics normalised to milliseconds."""

    model_config = {"frozen": True}

    avg: float = Field(default=0.0, description="Average latency (ms)")
    stdev: float = Field(default=0.0, description="Latency standard deviation (ms)")
    max: float = Field(default=0.0, description="Maximum latency (ms)")

    # Only present when the tool printed a latency distribution section
    p50: float = Field(default=ABSENT_LATENCY, description="50th percentile latency (ms)")
    p75: float = Field(default=ABSENT_LATENCY, description="75th percentile latency (ms)")
    p90: float = Field(default=ABSENT_LATENCY, description="90th percentile latency (ms)")
    p99: float = Field(default=ABSENT_LATENCY, description="99th percentile latency (ms)")

    @property
    def percentiles(self) -> dict[str, float]:
        """Percentile latencies keyed by label, in ascending order."""
        return {"p50": self.p50, "p75": self.p75, "p90": self.p90, "p99": self.p99}

    @property
    def has_distribution(self) -> bool:
        """Whether any percentile was reported."""
        return any(value > ABSENT_LATENCY for value in self.percentiles.values())


class Request(BaseModel):
    """Request counters as printed by the tool."""

    model_config = {"frozen": True}

    total: str = Field(default="", description="Total requests served")
    req_per_sec: str = Field(default="", description="Requests per second")


class Transfer(BaseModel):
    """Data transfer figures with their unit suffix, e.g. "1.95GB"."""

    model_config = {"frozen": True}

    total: str = Field(default="", description="Total data read")
    rate: str = Field(default="", description="Data read per second")


class Metrics(BaseModel):
    """Normalised result of parsing one load-test run."""

    model_config = {"frozen": True}

    latency: Latency = Field(default_factory=Latency)
    request: Request = Field(default_factory=Request)
    transfer: Transfer = Field(default_factory=Transfer)

    @property
    def is_empty(self) -> bool:
        """True when no field differs from its default.

        This is what a parse of text that is not load-test output produces.
        """
        return self == Metrics()


class Report(BaseModel):
    """One row of the comparison table: a framework and its measured metrics."""

    model_config = {"frozen": True}

    framework_name: str = Field(..., description="Framework or service label")
    max_memory: str = Field(..., description="Peak memory, pre-formatted (e.g. '13.7MB')")
    metrics: Metrics = Field(..., description="Parsed load-test metrics")

    @classmethod
    def create(cls, framework_name: str, max_memory: float, metrics: Metrics) -> Report:
        """Build a report from a memory figure in megabytes.

        Args:
            framework_name: Label shown in the first column.
            max_memory: Peak memory usage in MB, measured by the caller.
            metrics: Parsed metrics for this framework.

        Returns:
            Report with memory formatted to one decimal place.
        """
        return cls(
            framework_name=framework_name,
            max_memory=f"{max_memory:.1f}MB",
            metrics=metrics,
        )
