from __future__ import annotations

import math

import pytest

from insight_cli.aggregator import aggregate_by_category, sorted_summary
from insight_cli.domain.models import Record
from insight_cli.sources.static import ANALYSIS_SAMPLE

EXPECTED_A_TOTAL = 251.2
EXPECTED_B_TOTAL = 200.3


def test_sample_totals_per_category():
    summary = aggregate_by_category(ANALYSIS_SAMPLE)

    assert set(summary) == {"A", "B"}
    assert summary["A"] == pytest.approx(EXPECTED_A_TOTAL)
    assert summary["B"] == pytest.approx(EXPECTED_B_TOTAL)


def test_empty_input_yields_empty_mapping():
    assert aggregate_by_category([]) == {}


@pytest.mark.parametrize(
    "records",
    [
        [Record(id=1, value=1.5, category="x")],
        [
            Record(id=1, value=-3.0, category="x"),
            Record(id=1, value=4.25, category="y"),
            Record(id=2, value=0.0, category="x"),
            Record(id=3, value=10.1, category="z"),
        ],
        list(ANALYSIS_SAMPLE),
    ],
)
def test_totals_sum_to_input_sum(records):
    summary = aggregate_by_category(records)

    assert math.fsum(summary.values()) == pytest.approx(math.fsum(r.value for r in records))
    assert set(summary) == {r.category for r in records}


def test_accepts_any_iterable():
    summary = aggregate_by_category(r for r in ANALYSIS_SAMPLE)
    assert len(summary) == 2


def test_sorted_summary_orders_by_category():
    pairs = sorted_summary({"b": 1.0, "C": 2.0, "a": 3.0})
    assert [category for category, _ in pairs] == ["C", "a", "b"]
    assert dict(pairs) == {"b": 1.0, "C": 2.0, "a": 3.0}
