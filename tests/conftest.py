"""Shared pytest fixtures and configuration for the goal-cli test suite.

Guidelines
----------
* Never touch the real per-user data directory — every test gets a
  ``tmp_path`` based :class:`AppConfig`.
* Never launch a real interactive editor; ``subprocess.run`` is mocked
  at the infra boundary (a POSIX shell script stands in where a real
  child process is wanted).
* Tests must not depend on the caller's ``EDITOR`` or ``GOAL_HOME``.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path

import pytest

from goal_cli.config import AppConfig
from goal_cli.infra.goal_store import GoalStore


@pytest.fixture(autouse=True)
def _hermetic_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("EDITOR", "GOAL_HOME", "FORCE_COLOR", "TTY_COMPATIBLE"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture(autouse=True)
def _reset_logging() -> Iterator[None]:
    yield
    package_logger = logging.getLogger("goal_cli")
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
    package_logger.setLevel(logging.NOTSET)
    package_logger.propagate = True


@pytest.fixture
def data_dir(tmp_path: Path) -> Path:
    return tmp_path / "data"


@pytest.fixture
def config(data_dir: Path) -> AppConfig:
    return AppConfig(data_dir=data_dir)


@pytest.fixture
def store(config: AppConfig) -> GoalStore:
    return GoalStore(config)
