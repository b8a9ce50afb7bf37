"""Parser for wrk output.

Typical input (``wrk --latency``)::

    Running 30s test @ http://127.0.0.1:3000
      16 threads and 500 connections
      Thread Stats   Avg      Stdev     Max   +/- Stdev
        Latency   814.27us  498.47us   8.42ms   69.23%
        Req/Sec    36.10k     2.64k   74.83k    75.41%
      Latency Distribution
         50%  707.00us
         75%    1.07ms
         90%    1.50ms
         99%    2.56ms
      17275966 requests in 30.09s, 1.95GB read
    Requests/sec: 574184.09
    Transfer/sec:     66.26MB

Each field is located independently, so missing lines or trailing error
output only affect the fields they would have supplied.
"""

from __future__ import annotations

import re

from benchreport.domain.metrics import ABSENT_LATENCY, Latency, Metrics, Request, Transfer
from benchreport.parsing.locators import (
    LATENCY_TOKEN,
    NUMBER,
    SIZE_TOKEN,
    compact,
    first_group,
    first_match,
)
from benchreport.parsing.units import normalize_latency

LATENCY_RE = re.compile(rf"Latency\s+{LATENCY_TOKEN}\s+{LATENCY_TOKEN}\s+{LATENCY_TOKEN}")

# Unit is optional here; a unit-less percentile normalises to 0.0
_PERCENTILE_TOKEN = rf"({NUMBER})(us|ms|s)?"
LATENCY_DISTRIBUTION_RE = re.compile(
    rf"Latency Distribution\s*"
    rf"50%\s*{_PERCENTILE_TOKEN}\s*"
    rf"75%\s*{_PERCENTILE_TOKEN}\s*"
    rf"90%\s*{_PERCENTILE_TOKEN}\s*"
    rf"99%\s*{_PERCENTILE_TOKEN}"
)

TOTAL_REQUESTS_RE = re.compile(r"(\d+)\s+requests in")
REQUESTS_PER_SEC_RE = re.compile(rf"Requests/sec:\s+({NUMBER})")
TRANSFER_TOTAL_RE = re.compile(rf",\s*({SIZE_TOKEN})\s+read")
TRANSFER_RATE_RE = re.compile(rf"Transfer/sec:\s+({SIZE_TOKEN})")


def locate_latency(text: str) -> tuple[float, float, float]:
    """Return (avg, stdev, max) in milliseconds from the "Latency" stats line."""
    match = first_match(LATENCY_RE, text, "latency")
    if match is None:
        return 0.0, 0.0, 0.0
    avg = normalize_latency(match.group(1), match.group(2))
    stdev = normalize_latency(match.group(3), match.group(4))
    max_ = normalize_latency(match.group(5), match.group(6))
    return avg, stdev, max_


def locate_percentiles(text: str) -> tuple[float, float, float, float]:
    """Return (p50, p75, p90, p99) in milliseconds.

    All four are ABSENT_LATENCY unless the output has a complete
    "Latency Distribution" section.
    """
    match = first_match(LATENCY_DISTRIBUTION_RE, text, "latency distribution")
    if match is None:
        return ABSENT_LATENCY, ABSENT_LATENCY, ABSENT_LATENCY, ABSENT_LATENCY
    groups = match.groups()
    p50, p75, p90, p99 = (
        normalize_latency(groups[i], groups[i + 1]) for i in range(0, len(groups), 2)
    )
    return p50, p75, p90, p99


def locate_total_requests(text: str) -> str:
    return first_group(TOTAL_REQUESTS_RE, text, "total requests")


def locate_requests_per_sec(text: str) -> str:
    return first_group(REQUESTS_PER_SEC_RE, text, "requests/sec")


def locate_transfer_total(text: str) -> str:
    return compact(first_group(TRANSFER_TOTAL_RE, text, "transfer total"))


def locate_transfer_rate(text: str) -> str:
    return compact(first_group(TRANSFER_RATE_RE, text, "transfer/sec"))


def parse_wrk(text: str) -> Metrics:
    """Parse wrk stdout into a Metrics record. Never raises."""
    avg, stdev, max_ = locate_latency(text)
    p50, p75, p90, p99 = locate_percentiles(text)

    return Metrics(
        latency=Latency(
            avg=avg,
            stdev=stdev,
            max=max_,
            p50=p50,
            p75=p75,
            p90=p90,
            p99=p99,
        ),
        request=Request(
            total=locate_total_requests(text),
            req_per_sec=locate_requests_per_sec(text),
        ),
        transfer=Transfer(
            total=locate_transfer_total(text),
            rate=locate_transfer_rate(text),
        ),
    )
