"""
Group-by-category aggregation over records.

Usage:
    from insight_cli.aggregator import aggregate_by_category, sorted_summary

    totals = aggregate_by_category(records)
    for category, total in sorted_summary(totals):
        print(f"{category}: {total:.2f}")
"""

from __future__ import annotations

from typing import Dict, Iterable, List, Mapping, Tuple

from insight_cli.domain.models import Record
from insight_cli.utils.logging import get_logger

log = get_logger(__name__)


def aggregate_by_category(records: Iterable[Record]) -> Dict[str, float]:
    """
    Sum record values per category in a single pass.

    Returns one entry per distinct category. The totals add up to the sum of
    all input values; an empty input yields an empty mapping.
    """
    summary: Dict[str, float] = {}
    count = 0
    for record in records:
        summary[record.category] = summary.get(record.category, 0.0) + record.value
        count += 1

    log.info(
        "Aggregated records by category",
        extra={"records": count, "categories": len(summary)},
    )
    return summary


def sorted_summary(summary: Mapping[str, float]) -> List[Tuple[str, float]]:
    """Category totals as (category, total) pairs ordered by category label."""
    return sorted(summary.items(), key=lambda item: item[0])


__all__ = ["aggregate_by_category", "sorted_summary"]
