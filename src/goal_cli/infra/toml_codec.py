"""Pure encode/decode of the goal document.

The document is a single ``[goal]`` table with two string fields that
are always present::

    [goal]
    text = "Ship the release"
    deadline = "Friday"

Strings containing newlines are written as TOML multi-line basic
strings, so goal text coming back from an editor keeps its line breaks;
text containing carriage returns is written with escapes instead.
"""

from __future__ import annotations

import sys
from typing import Any

import tomli_w

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

from goal_cli.core.models import Goal
from goal_cli.exceptions import CorruptDataError

GOAL_TABLE: str = "goal"
TEXT_KEY: str = "text"
DEADLINE_KEY: str = "deadline"


def render_document(text: str, deadline: str | None) -> str:
    """Return the canonical document for *text* and *deadline*.

    Any carriage return forces single-line strings with escaped line
    breaks, since multi-line TOML strings normalise ``\\r\\n`` to ``\\n``.
    """
    deadline_value = deadline if deadline is not None else ""
    document = {
        GOAL_TABLE: {
            TEXT_KEY: text,
            DEADLINE_KEY: deadline_value,
        },
    }
    multiline = "\r" not in text and "\r" not in deadline_value
    return tomli_w.dumps(document, multiline_strings=multiline)


EMPTY_DOCUMENT: str = render_document("", None)
"""The canonical "no goal" document."""


def parse_document(raw: str) -> Goal | None:
    """Parse *raw* into a :class:`Goal`, or ``None`` when no goal is set.

    Raises
    ------
    CorruptDataError
        When *raw* is not valid TOML, the ``[goal]`` table or one of its
        fields is missing, or a field is not a string.
    """
    try:
        parsed = tomllib.loads(raw)
    except tomllib.TOMLDecodeError as exc:
        raise CorruptDataError(f"Goal file is not valid TOML: {exc}") from exc

    table = parsed.get(GOAL_TABLE)
    if table is None:
        raise CorruptDataError(f"Goal file has no [{GOAL_TABLE}] table.")
    if not isinstance(table, dict):
        raise CorruptDataError(f"Goal file entry '{GOAL_TABLE}' is not a table.")

    text = _require_string(table, TEXT_KEY)
    deadline = _require_string(table, DEADLINE_KEY)
    return Goal.from_fields(text, deadline)


def _require_string(table: dict[str, Any], key: str) -> str:
    """Return ``table[key]`` or raise :class:`CorruptDataError`."""
    if key not in table:
        raise CorruptDataError(f"Goal file is missing the '{key}' field.")
    value = table[key]
    if not isinstance(value, str):
        raise CorruptDataError(
            f"Goal file field '{key}' must be a string, got {type(value).__name__}.",
        )
    return value
