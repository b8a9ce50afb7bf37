"""Latency unit normalisation.

Every latency in benchreport is expressed in milliseconds. Conversion is done
with ``decimal.Decimal`` straight from the text the tool printed, then
quantised to 4 decimal places using round-half-away-from-zero
(``ROUND_HALF_UP``), so "1.25us" becomes 0.0013 and not 0.0012.
"""

from __future__ import annotations

import re
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

# Factor to multiply a magnitude by to get milliseconds
UNIT_TO_MS: dict[str, Decimal] = {
    "us": Decimal("0.001"),
    "ms": Decimal("1"),
    "s": Decimal("1000"),
}

# 4 decimal places, i.e. a fixed scale of 10,000
LATENCY_QUANTUM = Decimal("0.0001")

_LATENCY_TOKEN_RE = re.compile(r"^\s*(\d+(?:\.\d+)?)(us|ms|s)\s*$")


def normalize_latency(magnitude: str | float | Decimal, unit: str | None) -> float:
    """Convert a latency magnitude to milliseconds.

    Args:
        magnitude: Numeric magnitude, ideally the exact text from the tool output.
        unit: One of "us", "ms", "s". Anything else normalises to 0.0.

    Returns:
        Latency in milliseconds rounded to 4 decimal places.
    """
    factor = UNIT_TO_MS.get(unit or "")
    if factor is None:
        return 0.0

    try:
        value = Decimal(str(magnitude)) * factor
        return float(value.quantize(LATENCY_QUANTUM, rounding=ROUND_HALF_UP))
    except InvalidOperation:
        return 0.0


def parse_latency_token(token: str | None) -> float:
    """Normalise a single "<magnitude><unit>" token such as "814.27us".

    Returns 0.0 for an empty token or one without a recognised unit.
    """
    if not token:
        return 0.0
    match = _LATENCY_TOKEN_RE.match(token)
    if match is None:
        return 0.0
    return normalize_latency(match.group(1), match.group(2))
