"""Custom exception hierarchy for goal-cli.

All exceptions that cross layer boundaries must inherit from
:class:`GoalError`.  Raw ``OSError``, TOML decode errors and
``subprocess`` failures must NEVER propagate beyond the infrastructure
layer — they are caught there and re-raised as a typed subclass.

Hierarchy
---------
GoalError
├── EnvironmentError        (data directory / optional dependency)
├── GoalFileError           (goal file create, read, write)
├── CorruptDataError        (goal file does not parse or has wrong shape)
├── ConfigurationError      (no editor command resolvable)
└── EditorFailedError       (editor failed to spawn or exited non-zero)
"""

from __future__ import annotations


class GoalError(Exception):
    """Base exception for all goal-cli errors.

    Every user-visible error condition maps to a subclass of this
    exception so that the CLI error boundary can render a clean message
    without leaking internal stack traces.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""

        self.operation: str | None = None
        """Name of the goal operation that failed (``"set"``, ``"edit"``, …)."""


# --- Environment -----------------------------------------------------------

class EnvironmentError(GoalError):
    """Raised when the per-user data directory or a runtime dependency is unavailable."""


# --- Persistence -----------------------------------------------------------

class GoalFileError(GoalError):
    """Raised when the goal file cannot be created, read, or written."""


class CorruptDataError(GoalError):
    """Raised when the goal file does not parse or has an unexpected shape."""


# --- Editing ---------------------------------------------------------------

class ConfigurationError(GoalError):
    """Raised when no editor command is given and ``EDITOR`` is unset."""


class EditorFailedError(GoalError):
    """Raised when the editor cannot be launched or exits unsuccessfully."""

    def __init__(
        self,
        message: str,
        *,
        hint: str | None = None,
        returncode: int | None = None,
    ) -> None:
        super().__init__(message, hint=hint)
        self.returncode: int | None = returncode
