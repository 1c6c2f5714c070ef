"""
Name-based lookup of record sources.

Settings refer to sources by name (``analysis_source``, ``report_source``);
this module turns those names into source instances.
"""

from __future__ import annotations

from typing import Callable, Dict, List

from insight_cli.sources.abstract import RecordSource
from insight_cli.sources.static import analysis_sample, report_sample
from insight_cli.utils.logging import get_logger

log = get_logger(__name__)


def _source_factories() -> Dict[str, Callable[[], RecordSource]]:
    """Registry of available record sources."""
    return {
        "sample": analysis_sample,
        "report_sample": report_sample,
    }


def available_sources() -> List[str]:
    """List available source names."""
    return sorted(_source_factories().keys())


def resolve_source(name: str) -> RecordSource:
    factories = _source_factories()
    if name not in factories:
        raise ValueError(
            f"Unknown record source '{name}'. Available: {', '.join(available_sources())}"
        )
    source = factories[name]()
    log.debug("Resolved record source", extra={"source": name})
    return source


__all__ = ["available_sources", "resolve_source"]
