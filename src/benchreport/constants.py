"""Constants for benchreport."""

# Comparison table columns, in render order
REPORT_COLUMNS: tuple[str, ...] = (
    "Framework Name",
    "Latency.Avg",
    "Latency.Stdev",
    "Latency.50P",
    "Latency.75P",
    "Latency.90P",
    "Latency.99P",
    "Latency.Max",
    "Request.Total",
    "Request.Req/Sec",
    "Transfer.Total",
    "Transfer.Rate",
    "Max. Memory Usage",
)

# Rendered in place of a percentile the tool did not report
MISSING_PERCENTILE = "-"

# Decimal places for latency cells
LATENCY_DECIMALS = 4

# Config file and env var names
CONFIG_APP_NAME = "benchreport"
CONFIG_FILENAME = "config.yaml"
