"""Abstract base class for GitHub operations."""

from abc import ABC, abstractmethod
from pathlib import Path

from gittidy.core.github.types import MergedPullRequest


class GitHub(ABC):
    """Abstract interface for GitHub operations.

    All implementations (real and fake) must implement this interface.
    Queries are best-effort: when gh is missing, unauthenticated or the
    response cannot be parsed, implementations return None rather than raise.
    """

    @abstractmethod
    def get_merged_pr_for_branch(self, repo_root: Path, branch: str) -> MergedPullRequest | None:
        """Get the most recent merged PR authored by the current user from this branch.

        Args:
            repo_root: Repository root directory
            branch: Head (source) branch name of the PR

        Returns:
            The merged PR, or None if there is none or the query failed
        """
        ...

    @abstractmethod
    def get_latest_release_version(self, repo_root: Path, repository: str) -> str | None:
        """Get the version of the latest published release of a repository.

        Args:
            repo_root: Directory to run gh from
            repository: "owner/name" of the repository

        Returns:
            Version string without a leading "v", or None if unavailable
        """
        ...
