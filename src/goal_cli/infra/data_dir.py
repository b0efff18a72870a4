"""Infrastructure: per-user data directory resolution.

The platform-specific location comes from :mod:`platformdirs`
(``~/.local/share/goal`` on Linux, ``~/Library/Application Support/goal``
on macOS, ``%LOCALAPPDATA%\\pengowen\\goal`` on Windows).  An explicit
``AppConfig.data_dir`` (the ``GOAL_HOME`` variable) takes precedence.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

import platformdirs

from goal_cli.config import AppConfig
from goal_cli.exceptions import EnvironmentError

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Probe result
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class DataDirStatus:
    """Result of a data-directory probe.

    Attributes
    ----------
    path : Path | None
        The resolved directory, or ``None`` when it could not be resolved.
    exists : bool
        Whether the directory already exists.
    writable : bool
        Whether the directory (or its closest existing parent) is writable.
    detail : str
        Human-readable status line.
    """

    path: Path | None
    exists: bool
    writable: bool
    detail: str


# ---------------------------------------------------------------------------
# Resolution
# ---------------------------------------------------------------------------

def resolve_data_dir(config: AppConfig) -> Path:
    """Return the data directory for *config* without creating it.

    Raises
    ------
    EnvironmentError
        When the platform location cannot be determined.
    """
    if config.data_dir is not None:
        return config.data_dir

    try:
        raw = platformdirs.user_data_dir(config.app_name, config.app_author)
    except Exception as exc:
        raise EnvironmentError(
            f"Could not determine the user data directory: {exc}",
            hint="Set GOAL_HOME to a writable directory.",
        ) from exc
    return Path(raw)


def ensure_data_dir(config: AppConfig) -> Path:
    """Resolve the data directory and create it when absent."""
    path = resolve_data_dir(config)
    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise EnvironmentError(
            f"Could not create data directory {path}: {exc}",
            hint="Check permissions, or set GOAL_HOME to a writable directory.",
        ) from exc
    logger.debug("Using data directory %s", path)
    return path


def detect_data_dir(config: AppConfig) -> DataDirStatus:
    """Probe the data directory without creating anything."""
    try:
        path = resolve_data_dir(config)
    except EnvironmentError as exc:
        return DataDirStatus(path=None, exists=False, writable=False, detail=str(exc))

    probe = path
    while not probe.exists() and probe.parent != probe:
        probe = probe.parent
    writable = os.access(probe, os.W_OK)

    if path.exists():
        detail = "exists" if writable else "exists, not writable"
        return DataDirStatus(path=path, exists=True, writable=writable, detail=detail)

    detail = "will be created" if writable else "cannot be created"
    return DataDirStatus(path=path, exists=False, writable=writable, detail=detail)
