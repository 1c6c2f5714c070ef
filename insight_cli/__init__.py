"""
insight-cli - a small command-line tool for sample data analysis and reports.

Subcommands:

- ``analyze``: group sample records by category and print per-category totals
- ``report``: build a titled report over sample records and print it as JSON
- ``info``: print tool identity and runtime information

Record data is supplied by named record sources so that real ingestion can
replace the bundled samples without changing aggregation or report assembly.
"""

from __future__ import annotations

__version__ = "1.0.0"
__author__ = "Gabriel Demetrios Lafis"
__license__ = "MIT"

# Public API exports
from insight_cli.aggregator import aggregate_by_category, sorted_summary
from insight_cli.config import Settings, get_settings
from insight_cli.domain import Record, Report
from insight_cli.report_builder import build_report
from insight_cli.serializer import SerializationError, serialize_report
from insight_cli.sources import (
    AbstractRecordSource,
    RecordSource,
    StaticRecordSource,
    available_sources,
    resolve_source,
)
from insight_cli.utils.logging import configure_logging, get_logger

__all__ = [
    # Version info
    "__version__",
    "__author__",
    "__license__",
    # Configuration
    "Settings",
    "get_settings",
    # Domain
    "Record",
    "Report",
    # Operations
    "aggregate_by_category",
    "sorted_summary",
    "build_report",
    "serialize_report",
    "SerializationError",
    # Record sources
    "RecordSource",
    "AbstractRecordSource",
    "StaticRecordSource",
    "available_sources",
    "resolve_source",
    # Logging
    "configure_logging",
    "get_logger",
]
