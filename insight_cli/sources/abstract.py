"""
Record source interfaces for insight-cli.

A record source supplies the records that the ``analyze`` and ``report``
commands work on. The aggregator and the report builder only ever see the
returned sequence, so a file or network backed source can be swapped in by
registering it under a new name.
"""

from __future__ import annotations

import abc
from typing import List, Protocol, runtime_checkable

from insight_cli.domain.models import Record


@runtime_checkable
class RecordSource(Protocol):
    """
    Common interface all record sources must implement.

    Attributes
    ----------
    name : str
        A short machine-friendly identifier.
    description : str
        A human-friendly summary of where the records come from.
    """

    name: str
    description: str

    def load(self) -> List[Record]:
        """
        Return the records provided by this source, in source order.
        """
        ...


class AbstractRecordSource(abc.ABC):
    """
    Optional ABC helper for class-based implementations.

    Subclasses should set `name` and `description` and implement `load`.
    """

    name: str
    description: str

    @abc.abstractmethod
    def load(self) -> List[Record]:  # pragma: no cover - interface only
        """Return the records provided by this source."""
        raise NotImplementedError


__all__ = [
    "RecordSource",
    "AbstractRecordSource",
]
