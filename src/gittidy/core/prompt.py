"""Interactive yes/no confirmation."""

from abc import ABC, abstractmethod
from enum import Enum

import click

from gittidy.cli.output import user_output


class PromptAnswer(Enum):
    """Answer to a confirmation prompt.

    OTHER covers any key that is neither yes nor no; callers treat it as no.
    """

    YES = "yes"
    NO = "no"
    OTHER = "other"

    @property
    def confirmed(self) -> bool:
        return self is PromptAnswer.YES


def parse_answer(key: str) -> PromptAnswer:
    """Map a single keypress to a PromptAnswer."""
    normalized = key.strip().lower()
    if normalized == "y":
        return PromptAnswer.YES
    if normalized == "n":
        return PromptAnswer.NO
    return PromptAnswer.OTHER


class Prompter(ABC):
    """Abstract interface for blocking confirmation prompts."""

    @abstractmethod
    def confirm(self, question: str) -> PromptAnswer:
        """Ask a yes/no question and block until the user answers."""
        ...


class RealPrompter(Prompter):
    """Reads a single keypress from the terminal, without a timeout."""

    def confirm(self, question: str) -> PromptAnswer:
        user_output(f"{question} {click.style('[y/N]', fg='bright_black')} ", nl=False)
        key = click.getchar()
        user_output(key)
        return parse_answer(key)
