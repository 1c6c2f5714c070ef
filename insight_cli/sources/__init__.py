"""
Record sources for insight-cli.

Exports the source interfaces, the bundled static sources, and the
name-based registry used by the CLI.
"""

from insight_cli.sources.abstract import AbstractRecordSource, RecordSource
from insight_cli.sources.registry import available_sources, resolve_source
from insight_cli.sources.static import (
    ANALYSIS_SAMPLE,
    REPORT_SAMPLE,
    StaticRecordSource,
    analysis_sample,
    report_sample,
)

__all__ = [
    "RecordSource",
    "AbstractRecordSource",
    "StaticRecordSource",
    "ANALYSIS_SAMPLE",
    "REPORT_SAMPLE",
    "analysis_sample",
    "report_sample",
    "available_sources",
    "resolve_source",
]
