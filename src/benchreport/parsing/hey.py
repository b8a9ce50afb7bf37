"""Parser for hey output.

hey prints latencies in seconds and has no standard deviation or transfer
rate, so those fields keep their defaults::

    Summary:
      Total:        2.0105 secs
      Slowest:      0.1025 secs
      Fastest:      0.0011 secs
      Average:      0.0090 secs
      Requests/sec: 9947.4281

      Total data:   2340000 bytes
      Size/request: 117 bytes

    Latency distribution:
      10% in 0.0030 secs
      50% in 0.0074 secs
      ...
      99% in 0.0316 secs

    Status code distribution:
      [200] 20000 responses
"""

from __future__ import annotations

import re

from loguru import logger

from benchreport.domain.metrics import ABSENT_LATENCY, Latency, Metrics, Request, Transfer
from benchreport.parsing.locators import NUMBER, first_group, first_match
from benchreport.parsing.units import normalize_latency

AVERAGE_RE = re.compile(rf"Average:\s+({NUMBER})\s+secs")
SLOWEST_RE = re.compile(rf"Slowest:\s+({NUMBER})\s+secs")
REQUESTS_PER_SEC_RE = re.compile(rf"Requests/sec:\s+({NUMBER})")
TOTAL_DATA_RE = re.compile(r"Total data:\s+(\d+)\s+bytes")
LATENCY_DISTRIBUTION_RE = re.compile(r"Latency distribution:")
STATUS_CODE_RE = re.compile(r"\[(\d{3})\]\s+(\d+)\s+responses")

PERCENTILE_RES: dict[str, re.Pattern[str]] = {
    label: re.compile(rf"(?<!\d){label}%\s+in\s+({NUMBER})\s+secs")
    for label in ("50", "75", "90", "99")
}


def _seconds(pattern: re.Pattern[str], text: str, field: str) -> float:
    value = first_group(pattern, text, field)
    return normalize_latency(value, "s") if value else 0.0


def locate_percentiles(text: str) -> tuple[float, float, float, float]:
    """Return (p50, p75, p90, p99) in ms from the "Latency distribution" section."""
    section = first_match(LATENCY_DISTRIBUTION_RE, text, "latency distribution")
    if section is None:
        return ABSENT_LATENCY, ABSENT_LATENCY, ABSENT_LATENCY, ABSENT_LATENCY
    tail = text[section.end() :]
    p50, p75, p90, p99 = (
        _seconds(pattern, tail, f"p{label}") for label, pattern in PERCENTILE_RES.items()
    )
    return p50, p75, p90, p99


def locate_total_requests(text: str) -> str:
    """Sum the per-status-code response counts; "" when none are listed."""
    counts = STATUS_CODE_RE.findall(text)
    if not counts:
        logger.debug("Locator miss: no status code distribution in output, using default")
        return ""
    return str(sum(int(count) for _, count in counts))


def locate_transfer_total(text: str) -> str:
    value = first_group(TOTAL_DATA_RE, text, "total data")
    return f"{value}B" if value else ""


def parse_hey(text: str) -> Metrics:
    """Parse hey stdout into a Metrics record. Never raises."""
    p50, p75, p90, p99 = locate_percentiles(text)

    return Metrics(
        latency=Latency(
            avg=_seconds(AVERAGE_RE, text, "average"),
            max=_seconds(SLOWEST_RE, text, "slowest"),
            p50=p50,
            p75=p75,
            p90=p90,
            p99=p99,
        ),
        request=Request(
            total=locate_total_requests(text),
            req_per_sec=first_group(REQUESTS_PER_SEC_RE, text, "requests/sec"),
        ),
        transfer=Transfer(total=locate_transfer_total(text)),
    )
