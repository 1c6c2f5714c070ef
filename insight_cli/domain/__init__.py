"""
Domain package for insight-cli.

Exports the record and report models shared by sources, aggregation,
report assembly and serialization.
"""

from insight_cli.domain.models import Record, Report

__all__ = [
    "Record",
    "Report",
]
