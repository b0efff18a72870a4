"""Core / service layer — goal semantics and operation orchestration.

Rules
-----
* No ``print()`` calls.
* No direct filesystem or subprocess access; persistence and editing
  are reached only through the protocols in :mod:`goal_cli.core.protocols`.
* No imports from ``cli`` or ``infra``.
"""

from goal_cli.core.goal_service import GoalService
from goal_cli.core.models import Goal
from goal_cli.core.protocols import GoalRepository, TextEditor

__all__: list[str] = [
    "Goal",
    "GoalRepository",
    "GoalService",
    "TextEditor",
]
