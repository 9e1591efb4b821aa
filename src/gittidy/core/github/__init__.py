"""GitHub operations subpackage (gh CLI backed)."""

from gittidy.core.github.abc import GitHub
from gittidy.core.github.real import RealGitHub
from gittidy.core.github.types import MergedPullRequest

__all__ = [
    "GitHub",
    "MergedPullRequest",
    "RealGitHub",
]
