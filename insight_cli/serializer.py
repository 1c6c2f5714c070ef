"""
JSON rendering of reports.
"""

from __future__ import annotations

import json

from insight_cli.domain.models import Report
from insight_cli.utils.logging import get_logger

log = get_logger(__name__)


class SerializationError(Exception):
    """Raised when a report cannot be encoded as JSON."""


def serialize_report(report: Report) -> str:
    """
    Render `report` as pretty-printed JSON (2-space indent, model field order).

    Non-finite floats are rejected rather than emitted as ``NaN``/``Infinity``,
    which are not valid JSON.
    """
    try:
        return json.dumps(report.model_dump(), indent=2, allow_nan=False)
    except (TypeError, ValueError) as exc:
        log.warning("Report serialization failed", extra={"title": report.title, "error": str(exc)})
        raise SerializationError(str(exc)) from exc


__all__ = ["SerializationError", "serialize_report"]
