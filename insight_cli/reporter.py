from __future__ import annotations

from typing import Mapping, Optional

from rich import box
from rich.console import Console
from rich.table import Table

from insight_cli.aggregator import sorted_summary
from insight_cli.config import Settings
from insight_cli.utils.system_info import SystemInfo


def _console(console: Optional[Console]) -> Console:
    # Labels come from record sources and are printed verbatim on one line.
    return console or Console(highlight=False, emoji=False, soft_wrap=True)


def print_banner(settings: Settings, console: Optional[Console] = None) -> None:
    """Print the tool banner shown before every command."""
    console = _console(console)
    console.print(f"📦 {settings.display_name}", markup=False)
    console.print(f"👨‍💻 Created by {settings.author}\n", markup=False)


def print_summary(summary: Mapping[str, float], console: Optional[Console] = None) -> None:
    """
    Print per-category totals, one line each, ordered by category.

    Totals are shown with two decimal places.
    """
    console = _console(console)
    console.print("✅ Analysis complete!")
    console.print("📈 Summary:")
    if not summary:
        console.print("  (no records)", markup=False)
        return
    for category, total in sorted_summary(summary):
        console.print(f"  {category}: {total:.2f}", markup=False)


def print_info(settings: Settings, info: SystemInfo, console: Optional[Console] = None) -> None:
    """
    Render tool identity and runtime details.

    The runtime part is a rich table; CPU and memory rows are shown as N/A
    when they could not be determined.
    """
    console = _console(console)
    console.print("ℹ️  System Information")
    console.print(f"📦 {settings.display_name} v{settings.version}", markup=False)
    console.print(f"👨‍💻 Author: {settings.author}", markup=False)
    console.print("🏗️  Built with Python and Typer")

    table = Table(title="💻 Runtime Information", box=box.ROUNDED, show_header=False)
    table.add_column("Field", style="cyan", no_wrap=True)
    table.add_column("Value", style="green", no_wrap=True)
    table.add_row("OS", info.os)
    table.add_row("Architecture", info.arch)
    table.add_row("Python Version", info.python_version)
    table.add_row("CPUs", str(info.cpus) if info.cpus else "N/A")
    table.add_row("Memory", info.memory or "N/A")

    console.print()
    console.print(table)


__all__ = ["print_banner", "print_info", "print_summary"]
