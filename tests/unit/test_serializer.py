from __future__ import annotations

import json

import pytest

from insight_cli.domain.models import Record, Report
from insight_cli.report_builder import build_report
from insight_cli.serializer import SerializationError, serialize_report


def test_serialized_report_parses_back(fixed_now):
    report = build_report("performance", now=fixed_now)

    payload = json.loads(serialize_report(report))

    assert list(payload) == ["title", "author", "timestamp", "data", "summary"]
    assert payload["title"] == report.title
    assert payload["author"] == report.author
    assert payload["timestamp"] == "2024-01-02T03:04:05+00:00"
    assert len(payload["data"]) == len(report.data)
    assert payload["data"][0] == {"id": 1, "value": 100.0, "category": "Performance"}
    assert payload["summary"] == {"total_items": 2.0, "avg_value": 97.75}


def test_output_is_indented_with_two_spaces(fixed_now):
    text = serialize_report(build_report(now=fixed_now))
    lines = text.splitlines()

    assert lines[0] == "{"
    assert lines[1].startswith('  "title": ')
    assert lines[-1] == "}"


@pytest.mark.parametrize("bad_value", [float("nan"), float("inf"), float("-inf")])
def test_non_finite_values_raise_serialization_error(bad_value):
    report = Report(
        title="BROKEN Report",
        author="someone",
        timestamp="2024-01-02T03:04:05+00:00",
        data=[Record(id=1, value=1.0, category="A")],
        summary={"avg_value": bad_value},
    )

    with pytest.raises(SerializationError) as excinfo:
        serialize_report(report)

    assert isinstance(excinfo.value.__cause__, ValueError)
