"""``goal doctor`` — environment diagnostics command.

Gathers system information and renders a Rich table summarising whether
the runtime environment can store and edit a goal.  Nothing is created:
the data directory and goal file are only inspected.

This module lives in the CLI layer — it may import from ``infra``
and ``core``, and it renders via Rich when available.
"""

from __future__ import annotations

import platform
import sys

from goal_cli.cli import exit_codes
from goal_cli.cli.console import console
from goal_cli.config import AppConfig
from goal_cli.exceptions import CorruptDataError
from goal_cli.infra.data_dir import detect_data_dir
from goal_cli.infra.editor import detect_editor
from goal_cli.infra.toml_codec import parse_document
from goal_cli.version import __version__

_OK = "[green]OK[/green]"
_WARN = "[yellow]WARN[/yellow]"
_FAIL = "[red]FAIL[/red]"


# ---------------------------------------------------------------------------
# Diagnostic collectors
# ---------------------------------------------------------------------------

def _python_version_check() -> tuple[str, str, str]:
    """Return (label, value, status) for the Python version row."""
    version = platform.python_version()
    ok = sys.version_info[:2] >= (3, 10)
    status = _OK if ok else "[red]FAIL (>=3.10 required)[/red]"
    return "Python", version, status


def _data_dir_check(config: AppConfig) -> tuple[str, str, str]:
    """Return (label, value, status) for the data directory row."""
    status_obj = detect_data_dir(config)
    if status_obj.path is None:
        return "Data dir", status_obj.detail, _FAIL
    value = f"{status_obj.path} ({status_obj.detail})"
    return "Data dir", value, _OK if status_obj.writable else _FAIL


def _goal_file_check(config: AppConfig) -> tuple[str, str, str]:
    """Return (label, value, status) for the goal file row."""
    dir_status = detect_data_dir(config)
    if dir_status.path is None:
        return "Goal file", "unknown", _WARN

    path = dir_status.path / config.goal_file_name
    if not path.exists():
        return "Goal file", "absent (created on first use)", _OK

    try:
        goal = parse_document(path.read_text(encoding="utf-8"))
    except CorruptDataError as exc:
        return "Goal file", f"corrupt: {exc}", _FAIL
    except (OSError, UnicodeDecodeError) as exc:
        return "Goal file", f"unreadable: {exc}", _FAIL

    return "Goal file", "set" if goal is not None else "empty", _OK


def _editor_check(config: AppConfig) -> tuple[str, str, str]:
    """Return (label, value, status) for the editor row."""
    status_obj = detect_editor(config)
    if status_obj.command is None:
        return "Editor", "EDITOR not set", _WARN
    if not status_obj.found:
        return "Editor", f"{status_obj.command} (not on PATH)", _WARN
    return "Editor", f"{status_obj.command} ({status_obj.executable})", _OK


def _os_check() -> tuple[str, str, str]:
    """Return (label, value, status) for the OS row."""
    system_raw = platform.system()
    system_display = {
        "Windows": "Windows",
        "Linux": "Linux",
        "Darwin": "macOS",
    }.get(system_raw, system_raw)
    release = platform.release()
    machine = platform.machine()
    value = f"{system_display} {release} ({machine})"
    return "OS", value, _OK


def _version_check() -> tuple[str, str, str]:
    """Return (label, value, status) for the goal-cli version row."""
    return "goal-cli", __version__, _OK


def _status_plain(status: str) -> str:
    """Convert rich-markup status to plain text."""
    if "FAIL" in status:
        return "FAIL"
    if "WARN" in status:
        return "WARN"
    if "OK" in status:
        return "OK"
    return status


def _print_plain_doctor_table(checks: list[tuple[str, str, str]]) -> None:
    """Render doctor output without Rich."""
    print("\ngoal doctor", file=sys.stderr)
    print("=" * 64, file=sys.stderr)
    print(f"{'Component':<12} {'Value':<42} {'Status':<8}", file=sys.stderr)
    print("-" * 64, file=sys.stderr)
    for label, value, status in checks:
        print(f"{label:<12} {value:<42} {_status_plain(status):<8}", file=sys.stderr)
    print(file=sys.stderr)


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------

def run_doctor(config: AppConfig) -> int:
    """Execute all diagnostic checks and render a summary table.

    Returns
    -------
    int
        :data:`exit_codes.SUCCESS` when no check fails,
        :data:`exit_codes.GENERAL_ERROR` otherwise.  A missing editor is
        only a warning.
    """
    checks = [
        _version_check(),
        _python_version_check(),
        _data_dir_check(config),
        _goal_file_check(config),
        _editor_check(config),
        _os_check(),
    ]

    has_failure = any("FAIL" in status for _, _, status in checks)

    rich_available = True
    try:
        from rich.markup import escape
        from rich.table import Table
    except ModuleNotFoundError:
        rich_available = False

    if rich_available:
        table = Table(
            title="goal doctor",
            show_header=True,
            header_style="bold cyan",
            border_style="dim",
        )
        table.add_column("Component", style="bold", min_width=12)
        table.add_column("Value", min_width=20)
        table.add_column("Status", justify="center", min_width=8)

        for label, value, status in checks:
            table.add_row(label, escape(value), status)

        console.print()
        console.print(table)
        console.print()
    else:
        _print_plain_doctor_table(checks)

    if not detect_editor(config).found:
        console.print("[yellow]No usable editor for `goal edit`.[/yellow]")
        console.print("Set the EDITOR environment variable or pass --editor <command>.\n")

    if has_failure:
        console.print("[bold red]Some checks failed.[/bold red]")
        return exit_codes.GENERAL_ERROR

    console.print("[bold green]All checks passed.[/bold green]")
    return exit_codes.SUCCESS
