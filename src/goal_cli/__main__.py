"""Allow ``python -m goal_cli`` invocation.

This module simply delegates to the CLI error-boundary entry point so
that ``python -m goal_cli`` behaves identically to the ``goal``
console script.
"""

from __future__ import annotations

from goal_cli.cli.app import cli

if __name__ == "__main__":
    cli()
