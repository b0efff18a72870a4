"""Protocols (interfaces) consumed by the core layer.

These define the contracts that infrastructure adapters must satisfy.
Core code depends ONLY on these protocols — never on concrete
implementations.
"""

from __future__ import annotations

from typing import Protocol

from goal_cli.core.models import Goal


class GoalRepository(Protocol):
    """Contract for goal persistence backends.

    Implementations must map all backend-specific exceptions to
    :class:`~goal_cli.exceptions.GoalError` subclasses.
    """

    def read(self) -> Goal | None:
        """Return the stored goal, or ``None`` when there is none.

        Raises
        ------
        CorruptDataError
            When the stored data cannot be interpreted.
        GoalFileError
            When the backing storage cannot be read.
        """
        ...  # pragma: no cover

    def write(self, text: str, deadline: str | None) -> None:
        """Replace the stored goal with *text* and *deadline*."""
        ...  # pragma: no cover

    def clear(self) -> None:
        """Reset storage to the "no goal" state."""
        ...  # pragma: no cover


class TextEditor(Protocol):
    """Contract for interactive text editing backends."""

    def edit(self, text: str, *, editor: str | None = None) -> str:
        """Let the user edit *text* and return the result, stripped.

        Parameters
        ----------
        text:
            Initial content presented to the user.
        editor:
            Explicit editor command.  When ``None`` the backend falls
            back to its configured default.

        Raises
        ------
        ConfigurationError
            When no editor command can be resolved.
        EditorFailedError
            When the editor cannot be launched or exits unsuccessfully.
        """
        ...  # pragma: no cover
