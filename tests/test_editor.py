"""Tests for the external editor bridge (infra/editor.py).

``subprocess.run`` is mocked for most tests; one POSIX-only test runs a
real shell script as the editor.

Coverage:
* Editor command resolution (explicit, EDITOR fallback, missing).
* Temp file content handed to the editor and read back stripped.
* Temp directory removed on success and on failure.
* Non-zero exit and spawn failure raise ``EditorFailedError``.
* ``detect_editor`` probing.
"""

from __future__ import annotations

import os
import subprocess
import sys
from pathlib import Path
from typing import Any
from unittest.mock import MagicMock, patch

import pytest

from goal_cli.config import AppConfig
from goal_cli.exceptions import ConfigurationError, EditorFailedError
from goal_cli.infra.editor import (
    EditorStatus,
    ExternalEditor,
    detect_editor,
    resolve_editor_command,
)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

class _FakeEditor:
    """Stand-in for ``subprocess.run`` that rewrites the file it is given."""

    def __init__(self, new_content: str, returncode: int = 0) -> None:
        self.new_content = new_content
        self.returncode = returncode
        self.calls: list[list[str]] = []
        self.seen_content: str | None = None

    def __call__(self, args: list[str], **kwargs: Any) -> subprocess.CompletedProcess[str]:
        self.calls.append(list(args))
        path = Path(args[-1])
        self.seen_content = path.read_text(encoding="utf-8")
        path.write_text(self.new_content, encoding="utf-8")
        return subprocess.CompletedProcess(args, self.returncode)

    @property
    def edited_path(self) -> Path:
        return Path(self.calls[-1][-1])


# ---------------------------------------------------------------------------
# resolve_editor_command
# ---------------------------------------------------------------------------

class TestResolveEditorCommand:
    def test_explicit_wins_over_config(self) -> None:
        argv = resolve_editor_command("nano", AppConfig(editor="vim"))
        assert argv == ["nano"]

    def test_falls_back_to_config(self) -> None:
        assert resolve_editor_command(None, AppConfig(editor="vim")) == ["vim"]

    def test_blank_explicit_falls_back(self) -> None:
        assert resolve_editor_command("  ", AppConfig(editor="vim")) == ["vim"]

    @pytest.mark.skipif(os.name == "nt", reason="POSIX shell splitting")
    def test_command_with_arguments_is_split(self) -> None:
        argv = resolve_editor_command("code --wait", AppConfig())
        assert argv == ["code", "--wait"]

    def test_missing_raises_configuration_error(self) -> None:
        with pytest.raises(ConfigurationError, match="No editor") as exc_info:
            resolve_editor_command(None, AppConfig())
        assert exc_info.value.hint is not None
        assert "EDITOR" in exc_info.value.hint

    @pytest.mark.skipif(os.name == "nt", reason="POSIX shell splitting")
    def test_unbalanced_quotes_raise(self) -> None:
        with pytest.raises(ConfigurationError, match="Invalid editor command"):
            resolve_editor_command('vim "oops', AppConfig())


# ---------------------------------------------------------------------------
# ExternalEditor.edit
# ---------------------------------------------------------------------------

class TestExternalEditor:
    def test_returns_stripped_edited_text(self) -> None:
        fake = _FakeEditor("  new goal\n\n")
        with patch("goal_cli.infra.editor.subprocess.run", fake):
            result = ExternalEditor(AppConfig(editor="vim")).edit("old goal")

        assert result == "new goal"
        assert fake.seen_content == "old goal"
        assert fake.calls[0][0] == "vim"

    def test_explicit_editor_is_used(self) -> None:
        fake = _FakeEditor("x")
        with patch("goal_cli.infra.editor.subprocess.run", fake):
            ExternalEditor(AppConfig(editor="vim")).edit("", editor="nano")
        assert fake.calls[0][0] == "nano"

    def test_multiline_text_is_preserved_inside(self) -> None:
        fake = _FakeEditor("line 1\nline 2\n")
        with patch("goal_cli.infra.editor.subprocess.run", fake):
            result = ExternalEditor(AppConfig(editor="vim")).edit("")
        assert result == "line 1\nline 2"

    def test_temp_directory_removed_after_success(self) -> None:
        fake = _FakeEditor("x")
        with patch("goal_cli.infra.editor.subprocess.run", fake):
            ExternalEditor(AppConfig(editor="vim")).edit("")
        assert not fake.edited_path.exists()
        assert not fake.edited_path.parent.exists()

    def test_nonzero_exit_raises_and_cleans_up(self) -> None:
        fake = _FakeEditor("ignored", returncode=1)
        with patch("goal_cli.infra.editor.subprocess.run", fake):
            with pytest.raises(EditorFailedError, match="exited with status 1") as exc_info:
                ExternalEditor(AppConfig(editor="vim")).edit("old")
        assert exc_info.value.returncode == 1
        assert not fake.edited_path.parent.exists()

    @patch(
        "goal_cli.infra.editor.subprocess.run",
        side_effect=FileNotFoundError(2, "No such file or directory"),
    )
    def test_spawn_failure_raises(self, _mock_run: MagicMock) -> None:
        with pytest.raises(EditorFailedError, match="Could not launch editor"):
            ExternalEditor(AppConfig(editor="no-such-editor")).edit("")

    @patch("goal_cli.infra.editor.subprocess.run")
    def test_no_editor_never_spawns(self, mock_run: MagicMock) -> None:
        with pytest.raises(ConfigurationError):
            ExternalEditor(AppConfig()).edit("")
        mock_run.assert_not_called()

    @pytest.mark.skipif(sys.platform == "win32", reason="needs a POSIX shell")
    def test_real_child_process(self, tmp_path: Path) -> None:
        script = tmp_path / "fake-editor.sh"
        script.write_text('#!/bin/sh\nprintf "from script\\n" > "$1"\n', encoding="utf-8")

        result = ExternalEditor(AppConfig(editor=f"sh {script}")).edit("before")
        assert result == "from script"


# ---------------------------------------------------------------------------
# detect_editor
# ---------------------------------------------------------------------------

class TestDetectEditor:
    def test_unset(self) -> None:
        status = detect_editor(AppConfig())
        assert status == EditorStatus(command=None, executable=None, found=False)

    @patch("goal_cli.infra.editor.shutil.which", return_value="/usr/bin/vim")
    def test_found(self, mock_which: MagicMock) -> None:
        status = detect_editor(AppConfig(editor="vim -u NONE"))
        assert status.found is True
        assert status.command == "vim -u NONE"
        assert status.executable == Path("/usr/bin/vim")
        mock_which.assert_called_once_with("vim")

    @patch("goal_cli.infra.editor.shutil.which", return_value=None)
    def test_not_on_path(self, _mock_which: MagicMock) -> None:
        status = detect_editor(AppConfig(editor="ghost-editor"))
        assert status.found is False
        assert status.command == "ghost-editor"
