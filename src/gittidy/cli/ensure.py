"""Run-aborting checks for the tidy command.

Each Ensure method either lets the run continue or prints a red "Error:" line
to stderr and exits with status 1. Only conditions that make the whole run
pointless (no repository, dirty tree, no trunk) go through here; per-stage
problems are reported as warnings instead.
"""

from typing import TypeVar

import click

from gittidy.cli.output import user_output
from gittidy.core.results import StepResult

T = TypeVar("T")


def _fail(error_message: str) -> None:
    user_output(click.style("Error: ", fg="red") + error_message)


class Ensure:
    """Helper class for asserting invariants with consistent error handling."""

    @staticmethod
    def not_none(value: T | None, error_message: str) -> T:
        """Return value narrowed to T, or exit with error_message if it is None.

        Falsy values such as "" or 0 pass through unchanged.

        Raises:
            SystemExit: If value is None (with exit code 1)
        """
        if value is None:
            _fail(error_message)
            raise SystemExit(1)
        return value

    @staticmethod
    def not_aborted(result: StepResult, error_message: str) -> None:
        """Exit if a step asked for the run to stop.

        The step's own message (for example a diff stat) is shown indented
        below the error line.

        Raises:
            SystemExit: If the result is FAILED_ABORT (with exit code 1)
        """
        if result.should_abort:
            _fail(error_message)
            if result.message:
                for line in result.message.splitlines():
                    user_output(f"  {line}")
            raise SystemExit(1)
