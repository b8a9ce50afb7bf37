"""Exception hierarchy for benchreport."""


class BenchReportError(Exception):
    """Base exception for benchreport."""


class ConfigError(BenchReportError):
    """Invalid or missing configuration."""


class MetricsError(BenchReportError):
    """Error while extracting metrics from load-test output."""


class ParseError(MetricsError):
    """Load-test output could not be turned into a metrics record.

    Lenient parsing never raises this; strict mode raises it when no field
    at all could be located.
    """

    def __init__(self, message: str, output_format: str | None = None):
        super().__init__(message)
        self.output_format = output_format


class UnsupportedFormatError(MetricsError):
    """Unknown load-test output format tag."""

    def __init__(self, output_format: str, supported: list[str]):
        super().__init__(
            f"Unsupported output format '{output_format}'. Supported: {', '.join(supported)}"
        )
        self.output_format = output_format
        self.supported = supported
