"""Fake GitHub operations for testing.

FakeGitHub is an in-memory implementation that accepts pre-configured state
in its constructor. Construct instances directly with keyword arguments.
"""

from pathlib import Path

from gittidy.core.github.abc import GitHub
from gittidy.core.github.types import MergedPullRequest


class FakeGitHub(GitHub):
    """In-memory fake implementation of GitHub operations.

    This class has NO public setup methods. All state is provided via constructor
    using keyword arguments with sensible defaults (empty dicts).
    """

    def __init__(
        self,
        *,
        merged_prs: dict[str, MergedPullRequest] | None = None,
        latest_release: str | None = None,
    ) -> None:
        """Create FakeGitHub with pre-configured state.

        Args:
            merged_prs: Mapping of queried branch name -> PR returned for it.
                The PR's head_ref_name may differ from the key to simulate
                a noisy query result.
            latest_release: Version returned by get_latest_release_version()
        """
        self._merged_prs = merged_prs or {}
        self._latest_release = latest_release
        self._merged_pr_queries: list[str] = []
        self._release_queries: list[str] = []

    @property
    def merged_pr_queries(self) -> list[str]:
        """Read-only access to branches queried via get_merged_pr_for_branch()."""
        return self._merged_pr_queries

    @property
    def release_queries(self) -> list[str]:
        """Read-only access to repositories queried for their latest release."""
        return self._release_queries

    def get_merged_pr_for_branch(self, repo_root: Path, branch: str) -> MergedPullRequest | None:
        self._merged_pr_queries.append(branch)
        return self._merged_prs.get(branch)

    def get_latest_release_version(self, repo_root: Path, repository: str) -> str | None:
        self._release_queries.append(repository)
        return self._latest_release
