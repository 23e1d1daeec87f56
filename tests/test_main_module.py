"""``python -m brokersync`` and the installed ``brokersync`` script."""

from __future__ import annotations

import runpy
import sys
import tomllib
import types
from pathlib import Path

import pytest


def test_running_the_package_exits_with_the_cli_status(monkeypatch: pytest.MonkeyPatch) -> None:
    cli_module = types.ModuleType("brokersync.cli")
    cli_module.main = lambda: 4  # type: ignore[attr-defined]
    monkeypatch.setitem(sys.modules, "brokersync.cli", cli_module)
    monkeypatch.delitem(sys.modules, "brokersync.__main__", raising=False)

    with pytest.raises(SystemExit) as exc_info:
        runpy.run_module("brokersync.__main__", run_name="__main__")

    assert exc_info.value.code == 4


def test_importing_the_entrypoint_does_not_run_the_cli(monkeypatch: pytest.MonkeyPatch) -> None:
    calls: list[str] = []
    cli_module = types.ModuleType("brokersync.cli")
    cli_module.main = lambda: calls.append("main") or 0  # type: ignore[attr-defined]
    monkeypatch.setitem(sys.modules, "brokersync.cli", cli_module)
    monkeypatch.delitem(sys.modules, "brokersync.__main__", raising=False)

    runpy.run_module("brokersync.__main__", run_name="brokersync.__main__")

    assert calls == []


def test_brokersync_script_points_at_cli_main() -> None:
    pyproject = tomllib.loads((Path(__file__).resolve().parents[1] / "pyproject.toml").read_text(encoding="utf-8"))

    assert pyproject["project"]["scripts"]["brokersync"] == "brokersync.cli:main"
