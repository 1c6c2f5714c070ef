from __future__ import annotations

import platform

from insight_cli.utils import system_info
from insight_cli.utils.system_info import collect_system_info


def test_collect_system_info_reports_platform():
    info = collect_system_info()

    assert info.os == platform.system().lower()
    assert info.arch == platform.machine()
    assert info.python_version == platform.python_version()


def test_collect_system_info_without_psutil(monkeypatch):
    monkeypatch.setattr(system_info, "psutil", None)

    info = collect_system_info()

    assert info.cpus is None
    assert info.memory is None


def test_format_bytes():
    assert system_info._format_bytes(2 * 1024**3) == "2.0GB"
    assert system_info._format_bytes(512 * 1024**2) == "512MB"
