"""Regression tests for the optional Rich dependency.

Every command must keep working when Rich cannot be imported: output
falls back to plain ``print`` with markup stripped.
"""

from __future__ import annotations

import sys

import pytest

from goal_cli.cli import exit_codes
from goal_cli.cli.app import main
from goal_cli.cli.console import get_rich_console, strip_markup
from goal_cli.config import AppConfig
from goal_cli.exceptions import EnvironmentError


def _hide_rich(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("rich", "rich.console", "rich.logging", "rich.markup", "rich.table", "rich.text"):
        monkeypatch.setitem(sys.modules, name, None)


def test_help_works_without_rich(monkeypatch: pytest.MonkeyPatch) -> None:
    _hide_rich(monkeypatch)
    with pytest.raises(SystemExit) as exc_info:
        main(["--help"])
    assert exc_info.value.code == 0


def test_console_reports_missing_rich(monkeypatch: pytest.MonkeyPatch) -> None:
    _hide_rich(monkeypatch)
    with pytest.raises(EnvironmentError, match="rich is not installed"):
        get_rich_console()


def test_goal_commands_work_without_rich(
    monkeypatch: pytest.MonkeyPatch,
    config: AppConfig,
    capsys: pytest.CaptureFixture[str],
) -> None:
    _hide_rich(monkeypatch)

    assert main(["set", "Plain [text]", "-d", "soon"], config=config) == exit_codes.SUCCESS
    assert main(["show"], config=config) == exit_codes.SUCCESS

    captured = capsys.readouterr()
    assert "Goal set." in captured.err
    assert "[green]" not in captured.err
    assert "Current goal: Plain [text]" in captured.out


def test_verbose_logging_without_rich(
    monkeypatch: pytest.MonkeyPatch,
    config: AppConfig,
    capsys: pytest.CaptureFixture[str],
) -> None:
    _hide_rich(monkeypatch)
    assert main(["-v", "remove"], config=config) == exit_codes.SUCCESS
    assert "DEBUG" in capsys.readouterr().err


class TestStripMarkup:
    def test_removes_style_tags(self) -> None:
        assert strip_markup("[bold red]Error:[/bold red] x") == "Error: x"

    def test_keeps_plain_text(self) -> None:
        assert strip_markup("nothing to strip") == "nothing to strip"
