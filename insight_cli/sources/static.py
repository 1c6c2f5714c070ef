"""
In-memory record sources, including the bundled sample data sets.
"""

from __future__ import annotations

from typing import Iterable, List, Tuple

from insight_cli.domain.models import Record
from insight_cli.sources.abstract import AbstractRecordSource

ANALYSIS_SAMPLE: Tuple[Record, ...] = (
    Record(id=1, value=100.5, category="A"),
    Record(id=2, value=200.3, category="B"),
    Record(id=3, value=150.7, category="A"),
)

REPORT_SAMPLE: Tuple[Record, ...] = (
    Record(id=1, value=100.0, category="Performance"),
    Record(id=2, value=95.5, category="Quality"),
)


class StaticRecordSource(AbstractRecordSource):
    """
    Serve a fixed sequence of records.

    Each call to `load` returns a fresh list, so callers may reorder or extend
    it without affecting later loads.
    """

    def __init__(
        self,
        records: Iterable[Record],
        name: str = "static",
        description: str = "Fixed in-memory records.",
    ) -> None:
        self.name = name
        self.description = description
        self._records = tuple(records)

    def load(self) -> List[Record]:
        return list(self._records)


def analysis_sample() -> StaticRecordSource:
    return StaticRecordSource(
        ANALYSIS_SAMPLE,
        name="sample",
        description="Three sample records across categories A and B.",
    )


def report_sample() -> StaticRecordSource:
    return StaticRecordSource(
        REPORT_SAMPLE,
        name="report_sample",
        description="Two sample records used for generated reports.",
    )


__all__ = [
    "ANALYSIS_SAMPLE",
    "REPORT_SAMPLE",
    "StaticRecordSource",
    "analysis_sample",
    "report_sample",
]
