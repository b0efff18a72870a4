"""CLI application entry point and command routing for goal-cli.

This module is the **sole error boundary** for the entire application.
It catches :class:`~goal_cli.exceptions.GoalError`, ``KeyboardInterrupt``,
and any unexpected ``Exception``, rendering user-friendly messages and
returning well-defined exit codes.

Architecture notes
------------------
* No business logic lives here — all work is delegated to
  :class:`~goal_cli.core.goal_service.GoalService` and the
  infrastructure adapters.
* Goal content goes to stdout; confirmations and errors to stderr.
* This module is the only place that translates between the domain world
  and the OS process exit code.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import NoReturn

from goal_cli.cli import exit_codes
from goal_cli.cli.console import console, output
from goal_cli.cli.log_setup import configure_logging
from goal_cli.config import AppConfig
from goal_cli.core.goal_service import GoalService
from goal_cli.exceptions import GoalError
from goal_cli.version import __version__

logger = logging.getLogger(__name__)

NO_GOAL_MSG: str = "There is no current goal"
NO_DEADLINE: str = "None"

SHOW_COMMAND: str = "show"
SET_COMMAND: str = "set"
EDIT_COMMAND: str = "edit"
REMOVE_COMMAND: str = "remove"
DOCTOR_COMMAND: str = "doctor"


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

class _GoalArgumentParser(argparse.ArgumentParser):
    """Argument parser whose usage errors exit with :data:`exit_codes.USAGE_ERROR`.

    argparse exits 2 by default, which collides with
    :data:`exit_codes.UNEXPECTED_ERROR`.
    """

    def error(self, message: str) -> NoReturn:
        self.print_usage(sys.stderr)
        self.exit(exit_codes.USAGE_ERROR, f"{self.prog}: error: {message}\n")


def _build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser and its sub-commands."""
    parser = _GoalArgumentParser(
        prog="goal",
        description="Keeps track of your current goal.",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Print debug logging to stderr.",
    )

    subparsers = parser.add_subparsers(dest="command", metavar="<command>")

    subparsers.add_parser(SHOW_COMMAND, help="Shows the current goal")

    set_parser = subparsers.add_parser(SET_COMMAND, help="Sets the current goal")
    set_parser.add_argument("new_goal", metavar="new-goal", help="The new goal")
    set_parser.add_argument(
        "-d",
        "--deadline",
        default=None,
        help="The deadline for the goal (replaces any previous deadline)",
    )

    edit_parser = subparsers.add_parser(
        EDIT_COMMAND,
        help="Edits the current goal in an external editor",
    )
    edit_parser.add_argument(
        "-e",
        "--editor",
        default=None,
        help="Editor command to use instead of $EDITOR",
    )
    edit_parser.add_argument(
        "-d",
        "--deadline",
        default=None,
        help="New deadline (keeps the current deadline when omitted)",
    )

    subparsers.add_parser(REMOVE_COMMAND, help="Removes the current goal")
    subparsers.add_parser(DOCTOR_COMMAND, help="Checks the runtime environment")

    return parser


# ---------------------------------------------------------------------------
# Command dispatch
# ---------------------------------------------------------------------------

def _build_service(config: AppConfig) -> GoalService:
    """Wire the infrastructure adapters into a :class:`GoalService`."""
    from goal_cli.infra.editor import ExternalEditor
    from goal_cli.infra.goal_store import GoalStore

    return GoalService(GoalStore(config), ExternalEditor(config))


def _handle_show(service: GoalService) -> int:
    goal = service.current_goal()
    if goal is None:
        output.print(NO_GOAL_MSG, markup=False)
    else:
        output.print(
            f"Current goal: {goal.text}\nDeadline: {goal.deadline or NO_DEADLINE}",
            markup=False,
        )
    return exit_codes.SUCCESS


def _handle_set(service: GoalService, args: argparse.Namespace) -> int:
    service.set_goal(args.new_goal, args.deadline)
    console.print("[green]Goal set.[/green]")
    return exit_codes.SUCCESS


def _handle_edit(service: GoalService, args: argparse.Namespace) -> int:
    goal = service.edit_goal(editor=args.editor, deadline=args.deadline)
    if goal is None:
        console.print("[yellow]Goal is now empty.[/yellow]")
    else:
        console.print("[green]Goal updated.[/green]")
    return exit_codes.SUCCESS


def _handle_remove(service: GoalService) -> int:
    service.remove_goal()
    console.print("Goal removed.")
    return exit_codes.SUCCESS


def _handle_doctor(config: AppConfig) -> int:
    """Dispatch the ``doctor`` diagnostics command."""
    from goal_cli.cli.doctor import run_doctor

    return run_doctor(config)


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None, *, config: AppConfig | None = None) -> int:
    """Run the goal CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.
    config:
        Explicit configuration.  When ``None``, it is built from the
        process environment.  Accepting both enables deterministic
        testing without monkeypatching.

    Returns
    -------
    int
        OS process exit code.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)

    configure_logging(args.verbose)

    if args.command is None:
        parser.print_help(sys.stderr)
        return exit_codes.USAGE_ERROR

    if config is None:
        config = AppConfig.from_env()
    logger.debug("Running %r with %r", args.command, config)

    if args.command == DOCTOR_COMMAND:
        return _handle_doctor(config)

    service = _build_service(config)

    if args.command == SHOW_COMMAND:
        return _handle_show(service)
    if args.command == SET_COMMAND:
        return _handle_set(service, args)
    if args.command == EDIT_COMMAND:
        return _handle_edit(service, args)
    return _handle_remove(service)


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def report_error(exc: GoalError) -> None:
    """Render *exc* (and its hint) on stderr."""
    label = "[bold red]Error:[/bold red]"
    if exc.operation:
        label = f"[bold red]Error ({exc.operation}):[/bold red]"
    console.print_labeled(label, str(exc))
    if exc.hint:
        console.print_labeled("[yellow]Hint:[/yellow]", exc.hint)


def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    This function wraps :func:`main` and guarantees the process never
    exits with a raw stack trace during normal usage.
    """
    try:
        code = main()
        sys.exit(code)
    except GoalError as exc:
        report_error(exc)
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print_labeled(
            "[bold red]Unexpected error.[/bold red]",
            f"Please report this issue.\n  {type(exc).__name__}: {exc}",
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
