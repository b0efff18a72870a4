"""Application configuration, built once at startup.

The identity constants (application name, author, file name) and the
environment-derived settings live together in one immutable
:class:`AppConfig` that is passed explicitly to the store and the
editor bridge.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

APP_NAME: str = "goal"
APP_AUTHOR: str = "pengowen"
GOAL_FILE_NAME: str = "goal.toml"

HOME_ENV_VAR: str = "GOAL_HOME"
"""Overrides the per-user data directory when set to a non-empty path."""

EDITOR_ENV_VAR: str = "EDITOR"


@dataclass(frozen=True, slots=True)
class AppConfig:
    """Settings shared by every layer for a single invocation."""

    app_name: str = APP_NAME
    app_author: str = APP_AUTHOR
    goal_file_name: str = GOAL_FILE_NAME

    data_dir: Path | None = None
    """Explicit data directory.  ``None`` means the platform default."""

    editor: str | None = None
    """Fallback editor command (from ``EDITOR``).  ``None`` when unset."""

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> AppConfig:
        """Build a config from *environ* (defaults to :data:`os.environ`).

        Blank values are treated the same as unset variables.
        """
        env = os.environ if environ is None else environ

        raw_home = env.get(HOME_ENV_VAR, "").strip()
        raw_editor = env.get(EDITOR_ENV_VAR, "").strip()

        return cls(
            data_dir=Path(raw_home).expanduser() if raw_home else None,
            editor=raw_editor or None,
        )
