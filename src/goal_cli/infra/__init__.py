"""Infrastructure layer — filesystem, TOML and editor-process integration.

Every raw ``OSError``, TOML decode error and ``subprocess`` failure must
be caught here and re-raised as a
:class:`~goal_cli.exceptions.GoalError` subclass.

Rules
-----
* No imports from ``cli``.
* No user-facing output (no ``print()``, no Rich rendering).
* Must expose clean, typed interfaces consumed by the core layer.
"""

from goal_cli.infra.data_dir import DataDirStatus, detect_data_dir, ensure_data_dir
from goal_cli.infra.editor import EditorStatus, ExternalEditor, detect_editor
from goal_cli.infra.goal_store import GoalStore

__all__: list[str] = [
    "DataDirStatus",
    "EditorStatus",
    "ExternalEditor",
    "GoalStore",
    "detect_data_dir",
    "detect_editor",
    "ensure_data_dir",
]
