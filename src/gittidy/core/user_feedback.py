"""User-facing status lines with consistent coloring."""

from abc import ABC, abstractmethod

import click

from gittidy.cli.output import user_output


class UserFeedback(ABC):
    """Provides colored user-facing status lines.

    Stages never call click directly; they report through ctx.feedback so
    tests can capture messages and so every status line uses the same colors:

        ctx.feedback.info("Checking out master...")
        ctx.feedback.success("✓ Deleted old-feature")
        ctx.feedback.warning("Warning: could not return to master")
        ctx.feedback.error("Could not abort rebase of old-feature")
    """

    @abstractmethod
    def info(self, message: str) -> None:
        """Show informational message."""

    @abstractmethod
    def success(self, message: str) -> None:
        """Show success message."""

    @abstractmethod
    def warning(self, message: str) -> None:
        """Show a non-fatal problem."""

    @abstractmethod
    def error(self, message: str) -> None:
        """Show error message."""


class InteractiveFeedback(UserFeedback):
    """Feedback written to the terminal."""

    def info(self, message: str) -> None:
        user_output(message)

    def success(self, message: str) -> None:
        user_output(click.style(message, fg="green"))

    def warning(self, message: str) -> None:
        user_output(click.style(message, fg="yellow"))

    def error(self, message: str) -> None:
        user_output(click.style(message, fg="red"))
