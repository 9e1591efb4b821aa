"""Fake Prompter implementation for testing.

FakePrompter answers confirmation prompts from a scripted list of keypresses
and records every question it was asked.
"""

import click

from gittidy.core.prompt import Prompter, PromptAnswer, parse_answer


class FakePrompter(Prompter):
    """Scripted prompter.

    This class has NO public setup methods. Keypresses are consumed in order;
    once they run out, `default` is used for every further prompt.

    Examples:
        # Decline everything (the default)
        >>> prompter = FakePrompter()

        # Confirm the first prompt, decline the second, then press "x" forever
        >>> prompter = FakePrompter(keys=["y", "n"], default="x")
    """

    def __init__(self, *, keys: list[str] | None = None, default: str = "n") -> None:
        self._keys = list(keys or [])
        self._default = default
        self._questions: list[str] = []
        self._answers: list[PromptAnswer] = []

    @property
    def questions(self) -> list[str]:
        """Questions asked so far, with terminal styling removed."""
        return self._questions

    @property
    def answers(self) -> list[PromptAnswer]:
        return self._answers

    def confirm(self, question: str) -> PromptAnswer:
        self._questions.append(click.unstyle(question))
        key = self._keys.pop(0) if self._keys else self._default
        answer = parse_answer(key)
        self._answers.append(answer)
        return answer

    def questions_mentioning(self, branch: str) -> list[str]:
        """Questions that offered exactly this branch (matched on the leading word)."""
        return [q for q in self._questions if q.split(" ", 1)[0] == branch]
