"""goal-cli — keeps track of a single current goal.

A small layered command-line tool: a TOML-backed store in the per-user
data directory, an external-editor bridge, and an argparse front end.
"""

from goal_cli.version import __version__

__all__: list[str] = ["__version__"]
