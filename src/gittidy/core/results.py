"""Explicit outcome type for stages and per-branch operations."""

from dataclasses import dataclass
from enum import Enum


class StepStatus(Enum):
    SUCCEEDED = "succeeded"
    FAILED_CONTINUE = "failed_continue"
    FAILED_ABORT = "failed_abort"


@dataclass(frozen=True)
class StepResult:
    """Outcome of one step of a tidy run.

    FAILED_CONTINUE means the failure is reported and the run goes on;
    FAILED_ABORT means the whole run must stop with a non-zero exit status.
    """

    status: StepStatus
    message: str = ""

    @staticmethod
    def ok(message: str = "") -> "StepResult":
        return StepResult(StepStatus.SUCCEEDED, message)

    @staticmethod
    def failed(message: str) -> "StepResult":
        return StepResult(StepStatus.FAILED_CONTINUE, message)

    @staticmethod
    def abort(message: str) -> "StepResult":
        return StepResult(StepStatus.FAILED_ABORT, message)

    @property
    def succeeded(self) -> bool:
        return self.status is StepStatus.SUCCEEDED

    @property
    def should_abort(self) -> bool:
        return self.status is StepStatus.FAILED_ABORT
