"""Core goal service — the four goal operations.

The service depends on a :class:`~goal_cli.core.protocols.GoalRepository`
and, for ``edit`` only, a :class:`~goal_cli.core.protocols.TextEditor`,
both injected at construction time.

Guarantees
----------
* Pure orchestration — no ``print()``, no direct filesystem access.
* Only :class:`~goal_cli.exceptions.GoalError` subclasses escape, each
  tagged with the name of the failing operation.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager

from goal_cli.core.models import Goal
from goal_cli.core.protocols import GoalRepository, TextEditor
from goal_cli.exceptions import ConfigurationError, GoalError, GoalFileError

logger = logging.getLogger(__name__)


@contextmanager
def _operation(name: str) -> Iterator[None]:
    """Tag escaping errors with *name* and wrap anything untyped."""
    try:
        yield
    except GoalError as exc:
        if exc.operation is None:
            exc.operation = name
        raise
    except OSError as exc:
        err = GoalFileError(str(exc))
        err.operation = name
        raise err from exc


class GoalService:
    """Stateless service implementing show / set / edit / remove.

    Parameters
    ----------
    repository:
        Any object satisfying the :class:`GoalRepository` protocol.
    editor:
        Any object satisfying the :class:`TextEditor` protocol.  Only
        required by :meth:`edit_goal`.
    """

    def __init__(
        self,
        repository: GoalRepository,
        editor: TextEditor | None = None,
    ) -> None:
        self._repository: GoalRepository = repository
        self._editor: TextEditor | None = editor

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def current_goal(self) -> Goal | None:
        """Return the stored goal without modifying it."""
        with _operation("show"):
            return self._repository.read()

    def set_goal(self, text: str, deadline: str | None = None) -> None:
        """Replace the goal *and* the deadline.

        A missing *deadline* clears any previously stored one; this is a
        full replace, not a merge.
        """
        with _operation("set"):
            self._repository.write(text, deadline)
            logger.debug("Goal set (deadline=%r)", deadline)

    def edit_goal(
        self,
        *,
        editor: str | None = None,
        deadline: str | None = None,
    ) -> Goal | None:
        """Edit the goal text interactively and persist the result.

        An explicit *deadline* overrides the stored one; otherwise the
        previous deadline is kept.  Returns the goal as now stored.

        Raises
        ------
        ConfigurationError
            When no editor is available.
        EditorFailedError
            When the editor fails.  The stored goal is left unchanged.
        """
        with _operation("edit"):
            if self._editor is None:
                raise ConfigurationError("No editor backend is configured.")

            previous = self._repository.read()
            current_text = previous.text if previous is not None else ""
            previous_deadline = previous.deadline if previous is not None else None

            new_text = self._editor.edit(current_text, editor=editor)
            new_deadline = deadline if deadline is not None else previous_deadline

            self._repository.write(new_text, new_deadline)
            logger.debug("Goal edited (deadline=%r)", new_deadline)
            return Goal.from_fields(new_text, new_deadline or "")

    def remove_goal(self) -> None:
        """Clear the goal and its deadline.  Idempotent."""
        with _operation("remove"):
            self._repository.clear()
