"""
Runtime introspection for the ``info`` command.
"""
from __future__ import annotations

import platform
from dataclasses import dataclass
from typing import Optional

try:
    import psutil
except ImportError:  # pragma: no cover - optional until dependencies are installed
    psutil = None  # type: ignore[assignment]


@dataclass(frozen=True)
class SystemInfo:
    """
    Snapshot of the interpreter and host the tool is running on.
    """

    os: str
    arch: str
    python_version: str
    cpus: Optional[int] = None
    memory: Optional[str] = None


def _format_bytes(mem_bytes: int) -> str:
    mem_gb = mem_bytes / (1024**3)
    if mem_gb >= 1:
        return f"{mem_gb:.1f}GB"
    mem_mb = mem_bytes / (1024**2)
    return f"{mem_mb:.0f}MB"


def collect_system_info() -> SystemInfo:
    """
    Gather OS, architecture, Python version and, when psutil is available,
    logical CPU count and total memory.
    """
    cpus: Optional[int] = None
    memory: Optional[str] = None
    if psutil is not None:
        cpus = psutil.cpu_count(logical=True)
        memory = _format_bytes(psutil.virtual_memory().total)

    return SystemInfo(
        os=platform.system().lower() or "unknown",
        arch=platform.machine() or "unknown",
        python_version=platform.python_version(),
        cpus=cpus,
        memory=memory,
    )


__all__ = ["SystemInfo", "collect_system_info"]
