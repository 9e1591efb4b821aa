"""Type definitions for GitHub operations."""

from dataclasses import dataclass


@dataclass(frozen=True)
class MergedPullRequest:
    """A merged pull request as reported by GitHub."""

    number: int
    head_ref_name: str  # source branch the PR was opened from
    base_ref_name: str  # branch the PR was merged into
    title: str | None
    url: str
