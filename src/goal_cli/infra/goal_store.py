"""TOML-file backed implementation of :class:`~goal_cli.core.protocols.GoalRepository`.

This module is the **only** place that touches the goal file.  Every
``OSError`` is re-raised as :class:`~goal_cli.exceptions.GoalFileError`
and every decode failure as :class:`~goal_cli.exceptions.CorruptDataError`.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

from goal_cli.config import AppConfig
from goal_cli.core.models import Goal
from goal_cli.exceptions import CorruptDataError, GoalFileError
from goal_cli.infra.data_dir import ensure_data_dir, resolve_data_dir
from goal_cli.infra.toml_codec import EMPTY_DOCUMENT, parse_document, render_document

logger = logging.getLogger(__name__)


class GoalStore:
    """Concrete :class:`GoalRepository` persisting to ``goal.toml``.

    The file lives in the per-user data directory and is created on
    first use holding the canonical empty document.  No locking is done;
    concurrent invocations race and the last writer wins.

    Usage::

        store = GoalStore(AppConfig.from_env())
        store.write("Finish the thesis", "June")
        store.read()  # Goal(text='Finish the thesis', deadline='June')
    """

    def __init__(self, config: AppConfig) -> None:
        self._config: AppConfig = config

    @property
    def path(self) -> Path:
        """Location of the goal file.  Nothing is created."""
        return resolve_data_dir(self._config) / self._config.goal_file_name

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def ensure_initialized(self) -> Path:
        """Create the data directory and an empty goal file if missing.

        Returns the goal file path.

        Raises
        ------
        EnvironmentError
            When the data directory cannot be resolved or created.
        GoalFileError
            When the goal file cannot be created.
        """
        path = ensure_data_dir(self._config) / self._config.goal_file_name
        if path.exists():
            return path

        try:
            with open(path, "x", encoding="utf-8", newline="\n") as handle:
                handle.write(EMPTY_DOCUMENT)
        except FileExistsError:
            # Another invocation created it between the check and the open.
            return path
        except OSError as exc:
            raise GoalFileError(f"Could not create goal file {path}: {exc}") from exc

        logger.debug("Created empty goal file %s", path)
        return path

    # ------------------------------------------------------------------
    # Protocol methods
    # ------------------------------------------------------------------

    def read(self) -> Goal | None:
        """Return the stored goal, or ``None`` when no goal is set."""
        path = self.ensure_initialized()
        try:
            raw = path.read_text(encoding="utf-8")
        except UnicodeDecodeError as exc:
            raise CorruptDataError(f"Goal file {path} is not valid UTF-8.") from exc
        except OSError as exc:
            raise GoalFileError(f"Could not read goal file {path}: {exc}") from exc

        try:
            return parse_document(raw)
        except CorruptDataError as exc:
            exc.hint = f"Fix or delete {path} to start over."
            raise

    def write(self, text: str, deadline: str | None) -> None:
        """Overwrite the goal file with *text* and *deadline*.

        The document is written to a sibling temporary file and renamed
        over the goal file, so a failed write leaves the old goal intact.
        """
        path = self.ensure_initialized()
        self._replace(path, render_document(text, deadline))
        logger.debug("Wrote goal file %s", path)

    def clear(self) -> None:
        """Reset the goal file to the canonical empty document."""
        self.write("", None)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _replace(path: Path, content: str) -> None:
        """Atomically replace *path* with *content*."""
        tmp = path.with_name(f".{path.name}.tmp")
        try:
            with open(tmp, "w", encoding="utf-8", newline="\n") as handle:
                handle.write(content)
            os.replace(tmp, path)
        except OSError as exc:
            tmp.unlink(missing_ok=True)
            raise GoalFileError(f"Could not write goal file {path}: {exc}") from exc
