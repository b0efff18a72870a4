"""CLI console helpers with optional Rich support.

This module avoids module-level imports of Rich so bootstrap paths
(``--help``, ``--version``) and plain goal output keep working even
when Rich is not installed.
"""

from __future__ import annotations

import re
import sys
from typing import Any

from goal_cli.exceptions import EnvironmentError

_MARKUP_TAG = re.compile(r"\[/?[a-z][a-z ]*\]")


def _load_rich_console_class() -> type[Any]:
    """Return ``rich.console.Console`` class or raise ``EnvironmentError``."""
    try:
        from rich.console import Console
    except ModuleNotFoundError as exc:
        raise EnvironmentError(
            "rich is not installed. Install with: pip install rich",
        ) from exc
    return Console


def get_rich_console(*, stderr: bool = True) -> Any:
    """Create a Rich console bound to stderr (default) or stdout."""
    console_class = _load_rich_console_class()
    return console_class(stderr=stderr)


def strip_markup(text: str) -> str:
    """Remove simple Rich style tags such as ``[bold red]`` … ``[/bold red]``."""
    return _MARKUP_TAG.sub("", text)


class _ConsoleProxy:
    """Minimal ``print``-compatible proxy with Rich fallback."""

    def __init__(self, *, stderr: bool) -> None:
        self._stderr = stderr

    def print(self, *objects: object, markup: bool = True) -> None:
        """Render with Rich when available, else plain print.

        With ``markup=False`` the objects bypass Rich entirely and are
        written verbatim: no emoji codes, tab expansion or wrapping.
        """
        stream = sys.stderr if self._stderr else sys.stdout
        if not markup:
            print(*objects, file=stream)
            return
        try:
            rich_console = get_rich_console(stderr=self._stderr)
        except EnvironmentError:
            objects = tuple(
                strip_markup(obj) if isinstance(obj, str) else obj for obj in objects
            )
            print(*objects, file=stream)
            return
        rich_console.print(*objects, highlight=False)

    def print_labeled(self, label: str, message: str) -> None:
        """Print a styled *label* followed by verbatim *message*.

        *label* may contain Rich markup; *message* never is interpreted,
        so paths and user text containing brackets survive intact.
        """
        stream = sys.stderr if self._stderr else sys.stdout
        try:
            rich_console = get_rich_console(stderr=self._stderr)
        except EnvironmentError:
            print(f"{strip_markup(label)} {message}", file=stream)
            return

        from rich.text import Text

        line = Text.from_markup(label)
        line.append(" ")
        line.append(message)
        rich_console.print(line, highlight=False)


console = _ConsoleProxy(stderr=True)
"""Diagnostics, confirmations and errors."""

output = _ConsoleProxy(stderr=False)
"""Command results (the goal itself)."""
