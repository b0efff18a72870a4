"""Logging configuration for a single CLI invocation.

Library modules only create ``logging.getLogger(__name__)`` loggers;
handlers are attached here, once, by the CLI entry point.
"""

from __future__ import annotations

import logging
import sys

_PLAIN_FORMAT = "%(levelname)s %(name)s: %(message)s"


def configure_logging(verbose: bool = False) -> None:
    """Send ``goal_cli`` log records to stderr.

    ``WARNING`` and above by default, everything with *verbose*.  Uses
    ``rich.logging.RichHandler`` when Rich is importable.
    """
    level = logging.DEBUG if verbose else logging.WARNING

    handler: logging.Handler
    try:
        from rich.console import Console
        from rich.logging import RichHandler
    except ModuleNotFoundError:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(_PLAIN_FORMAT))
    else:
        handler = RichHandler(
            console=Console(stderr=True),
            show_time=False,
            show_path=False,
        )

    package_logger = logging.getLogger("goal_cli")
    for existing in list(package_logger.handlers):
        package_logger.removeHandler(existing)
    package_logger.addHandler(handler)
    package_logger.setLevel(level)
    package_logger.propagate = False
