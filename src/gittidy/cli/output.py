"""Output utilities for CLI commands.

Everything git-tidy prints is meant for a human (status lines, prompts,
warnings, errors) and goes to stderr through user_output().
"""

import click


def user_output(message: str = "", nl: bool = True) -> None:
    """Emit a human-facing message to stderr."""
    click.echo(message, err=True, nl=nl)
