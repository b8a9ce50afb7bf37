"""Public API for benchreport.

Parsing and rendering do no I/O. User preferences only take effect when the
caller loads them and passes them in::

    from benchreport import build_report, configure, render_report_table

    config = configure()  # reads config file + BENCHREPORT_* env, sets up logging
    reports = [
        build_report("actix-web", 13.7, actix_stdout, config=config),
        build_report("axum", 12.4, axum_stdout, config=config),
    ]
    print(render_report_table(reports))
"""

from __future__ import annotations

from pathlib import Path

from loguru import logger

from benchreport.config.user_config import UserConfig, load_user_config
from benchreport.domain.metrics import Metrics, Report
from benchreport.logging import setup_logging
from benchreport.parsing.extractor import extract_metrics
from benchreport.parsing.formats import DEFAULT_FORMAT, OutputFormat
from benchreport.results.markdown import render_report_table

__all__ = ["build_report", "configure", "parse_metrics", "render_report_table"]


def configure(config: UserConfig | None = None, config_path: Path | None = None) -> UserConfig:
    """Load user preferences and set up logging from them.

    Args:
        config: Preloaded user config. None = load_user_config(config_path).
        config_path: Explicit config file path, used only when config is None.

    Returns:
        The effective user config, to pass on to parse_metrics/build_report.

    Raises:
        ConfigError: If the config file or BENCHREPORT_* env vars are invalid.
    """
    config = config or load_user_config(config_path)
    setup_logging(verbosity=config.ui.verbosity)
    logger.debug(
        f"benchreport configured: format={config.parsing.format}, "
        f"strict={config.parsing.strict}, verbosity={config.ui.verbosity}"
    )
    return config


def parse_metrics(
    raw_text: str,
    output_format: OutputFormat | str | None = None,
    strict: bool | None = None,
    config: UserConfig | None = None,
) -> Metrics:
    """Parse load-test output.

    Args:
        raw_text: Captured stdout of one load-testing run.
        output_format: Tool tag ("wrk" or "hey"). None = config value, else wrk.
        strict: Raise ParseError on output with no metrics. None = config value,
            else False.
        config: User config supplying defaults for unset options. Never loaded
            implicitly.

    Returns:
        Parsed metrics.
    """
    if output_format is None:
        output_format = config.parsing.format if config else DEFAULT_FORMAT
    if strict is None:
        strict = config.parsing.strict if config else False

    return extract_metrics(raw_text, output_format=output_format, strict=strict)


def build_report(
    framework_name: str,
    max_memory: float,
    raw_text: str,
    output_format: OutputFormat | str | None = None,
    strict: bool | None = None,
    config: UserConfig | None = None,
) -> Report:
    """Parse one run's output and wrap it in a Report row.

    Args:
        framework_name: Label for the first column.
        max_memory: Peak memory usage in MB, measured by the caller.
        raw_text: Captured stdout of the load-testing run.
        output_format: Tool tag. None = config value, else wrk.
        strict: Strict parsing. None = config value, else False.
        config: User config supplying defaults for unset options.
    """
    metrics = parse_metrics(raw_text, output_format=output_format, strict=strict, config=config)
    logger.debug(f"Built report for {framework_name}")
    return Report.create(framework_name, max_memory, metrics)
