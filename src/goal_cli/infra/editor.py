"""Infrastructure: external editor detection and invocation.

``edit`` hands the goal text to the user's editor through a temporary
file that lives in a scoped temporary directory, removed on every exit
path.  The process blocks until the editor exits; there is no timeout.

Rules
-----
* The editor command is split shell-style, never run through a shell.
* No ``print()`` — callers handle user-facing output.
"""

from __future__ import annotations

import logging
import os
import shlex
import shutil
import subprocess
import tempfile
from dataclasses import dataclass
from pathlib import Path

from goal_cli.config import AppConfig
from goal_cli.exceptions import ConfigurationError, EditorFailedError, GoalFileError

logger = logging.getLogger(__name__)

EDIT_FILE_NAME: str = "GOAL_EDITMSG"

_NO_EDITOR_HINT: str = "Pass --editor <command> or set the EDITOR environment variable."


# ---------------------------------------------------------------------------
# Detection result
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class EditorStatus:
    """Result of an editor probe.

    Attributes
    ----------
    command : str | None
        The configured editor command, or ``None`` when unset.
    executable : Path | None
        Resolved path of the command's program, or ``None`` when it is
        not on PATH.
    found : bool
        Whether a command is configured *and* its program was located.
    """

    command: str | None
    executable: Path | None
    found: bool


# ---------------------------------------------------------------------------
# Resolution
# ---------------------------------------------------------------------------

def resolve_editor_command(explicit: str | None, config: AppConfig) -> list[str]:
    """Return the editor argv: *explicit* first, then ``config.editor``.

    Raises
    ------
    ConfigurationError
        When neither is set, or the command cannot be split.
    """
    command = explicit if explicit and explicit.strip() else config.editor
    if not command:
        raise ConfigurationError("No editor available.", hint=_NO_EDITOR_HINT)

    try:
        argv = shlex.split(command, posix=os.name != "nt")
    except ValueError as exc:
        raise ConfigurationError(f"Invalid editor command {command!r}: {exc}") from exc

    if not argv:
        raise ConfigurationError("No editor available.", hint=_NO_EDITOR_HINT)
    return argv


def detect_editor(config: AppConfig) -> EditorStatus:
    """Probe the configured ``EDITOR`` without launching it."""
    try:
        argv = resolve_editor_command(None, config)
    except ConfigurationError:
        return EditorStatus(command=config.editor, executable=None, found=False)

    located = shutil.which(argv[0])
    executable = Path(located) if located is not None else None
    return EditorStatus(
        command=config.editor,
        executable=executable,
        found=executable is not None,
    )


# ---------------------------------------------------------------------------
# Editing
# ---------------------------------------------------------------------------

class ExternalEditor:
    """Concrete :class:`~goal_cli.core.protocols.TextEditor` that runs a program.

    This class satisfies the protocol structurally — no explicit
    inheritance required.
    """

    def __init__(self, config: AppConfig) -> None:
        self._config: AppConfig = config

    def edit(self, text: str, *, editor: str | None = None) -> str:
        """Open *text* in the editor and return the edited content, stripped.

        Raises
        ------
        ConfigurationError
            When no editor command can be resolved.
        EditorFailedError
            When the editor cannot be launched or exits non-zero.
        GoalFileError
            When the temporary file cannot be written or read back.
        """
        argv = resolve_editor_command(editor, self._config)

        with tempfile.TemporaryDirectory(prefix="goal-") as workdir:
            path = Path(workdir) / EDIT_FILE_NAME
            try:
                path.write_text(text, encoding="utf-8")
            except OSError as exc:
                raise GoalFileError(f"Could not write temporary file {path}: {exc}") from exc

            self._launch(argv, path)

            try:
                edited = path.read_text(encoding="utf-8")
            except (OSError, UnicodeDecodeError) as exc:
                raise GoalFileError(f"Could not read back edited file {path}: {exc}") from exc

        return edited.strip()

    @staticmethod
    def _launch(argv: list[str], path: Path) -> None:
        """Run the editor on *path* and wait for it to exit."""
        logger.debug("Launching editor %s on %s", argv, path)
        try:
            completed = subprocess.run([*argv, str(path)], check=False)
        except OSError as exc:
            raise EditorFailedError(
                f"Could not launch editor {argv[0]!r}: {exc}",
                hint=_NO_EDITOR_HINT,
            ) from exc

        if completed.returncode != 0:
            raise EditorFailedError(
                f"Editor {argv[0]!r} exited with status {completed.returncode}; "
                "the goal was left unchanged.",
                returncode=completed.returncode,
            )
