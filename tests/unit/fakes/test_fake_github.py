"""Tests for FakeGitHub test infrastructure.

These tests verify that FakeGitHub correctly simulates GitHub operations,
providing reliable test doubles for CLI tests.
"""

from gittidy.core.github.fake import FakeGitHub
from gittidy.core.github.types import MergedPullRequest
from tests.test_utils import sentinel_path


def test_fake_github_initialization() -> None:
    github = FakeGitHub()

    assert github.get_merged_pr_for_branch(sentinel_path(), "feature") is None
    assert github.get_latest_release_version(sentinel_path(), "owner/repo") is None


def test_fake_github_returns_configured_pr_and_tracks_queries() -> None:
    pr = MergedPullRequest(
        number=5,
        head_ref_name="feature",
        base_ref_name="main",
        title="Feature",
        url="https://github.com/owner/repo/pull/5",
    )
    github = FakeGitHub(merged_prs={"feature": pr})

    assert github.get_merged_pr_for_branch(sentinel_path(), "feature") == pr
    assert github.get_merged_pr_for_branch(sentinel_path(), "other") is None
    assert github.merged_pr_queries == ["feature", "other"]


def test_fake_github_release_version() -> None:
    github = FakeGitHub(latest_release="1.2.3")

    assert github.get_latest_release_version(sentinel_path(), "owner/repo") == "1.2.3"
    assert github.release_queries == ["owner/repo"]
