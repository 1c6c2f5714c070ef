"""
Report assembly.

`build_report` is the only place that reads the wall clock. The clock, the
record source and the settings are all injectable for tests.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Callable, Dict, List, Optional

from insight_cli.config import Settings, get_settings
from insight_cli.domain.models import Record, Report
from insight_cli.sources.abstract import RecordSource
from insight_cli.sources.registry import resolve_source
from insight_cli.utils.logging import get_logger

log = get_logger(__name__)

DEFAULT_REPORT_TYPE = "summary"


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def _rfc3339(stamp: datetime) -> str:
    # Naive datetimes are taken to be UTC.
    if stamp.tzinfo is None:
        stamp = stamp.replace(tzinfo=timezone.utc)
    return stamp.isoformat()


def _summary_metrics(records: List[Record]) -> Dict[str, float]:
    total = float(len(records))
    avg = sum(r.value for r in records) / total if records else 0.0
    return {
        "total_items": total,
        "avg_value": avg,
    }


def build_report(
    report_type: str = DEFAULT_REPORT_TYPE,
    *,
    source: Optional[RecordSource] = None,
    settings: Optional[Settings] = None,
    now: Optional[Callable[[], datetime]] = None,
) -> Report:
    """
    Build a report over the records of `source`.

    Parameters
    ----------
    report_type : str
        Free-form label; only affects the title (``"<LABEL> Report"``).
    source : RecordSource | None
        Where the records come from. Defaults to ``settings.report_source``.
    settings : Settings | None
        Supplies the author. Defaults to the cached settings.
    now : callable | None
        Clock returning a datetime; naive values are treated as UTC.
        Defaults to current UTC time.
    """
    settings = settings or get_settings()
    source = source or resolve_source(settings.report_source)
    clock = now or _utc_now

    records = source.load()
    report = Report(
        title=f"{report_type.upper()} Report",
        author=settings.author,
        timestamp=_rfc3339(clock()),
        data=records,
        summary=_summary_metrics(records),
    )
    log.info(
        "Report built",
        extra={"report_type": report_type, "source": source.name, "records": len(records)},
    )
    return report


__all__ = ["DEFAULT_REPORT_TYPE", "build_report"]
