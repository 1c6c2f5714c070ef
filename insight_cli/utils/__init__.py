"""
Utilities package for insight-cli.

Exports shared helpers for logging and runtime introspection.
Keep this package lightweight and free of domain-specific logic.
"""

from insight_cli.utils.logging import configure_logging, get_logger
from insight_cli.utils.system_info import SystemInfo, collect_system_info

__all__ = [
    "configure_logging",
    "get_logger",
    "SystemInfo",
    "collect_system_info",
]
