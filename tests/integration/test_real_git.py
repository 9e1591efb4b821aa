"""Tests for RealGit against real repositories in tmp_path.

These run actual git commands; GitHub and prompts stay faked.
"""

import subprocess
from pathlib import Path

import pytest
from click.testing import CliRunner

from gittidy.cli.cli import cli
from gittidy.core.context import TidyContext
from gittidy.core.git.real import RealGit
from gittidy.core.rebase_all import rebase_all_branches
from gittidy.core.trunk import TrunkBranch, TrunkSource
from tests.fakes.prompt import FakePrompter


def _git(repo: Path, *args: str) -> str:
    result = subprocess.run(
        ["git", *args], cwd=repo, check=True, capture_output=True, text=True
    )
    return result.stdout.strip()


def _commit(repo: Path, filename: str, content: str, message: str) -> None:
    (repo / filename).write_text(content, encoding="utf-8")
    _git(repo, "add", filename)
    _git(repo, "commit", "-m", message)


@pytest.fixture
def repo(tmp_path: Path) -> Path:
    """A repository with master, a merged branch and an unmerged branch."""
    repo = tmp_path / "repo"
    repo.mkdir()
    _git(repo, "init", "-b", "master")
    _git(repo, "config", "user.email", "test@example.com")
    _git(repo, "config", "user.name", "Test User")
    _git(repo, "config", "commit.gpgsign", "false")
    _commit(repo, "README.md", "# Test Repository\n", "Initial commit")

    _git(repo, "branch", "merged")
    _git(repo, "checkout", "-b", "unmerged")
    _commit(repo, "feature.txt", "feature\n", "Add feature")
    _git(repo, "checkout", "master")
    _commit(repo, "master.txt", "master\n", "Advance master")
    return repo


def test_repository_root_and_outside(repo: Path, tmp_path: Path) -> None:
    git = RealGit()
    subdir = repo / "sub"
    subdir.mkdir()

    root = git.get_repository_root(subdir)

    assert root is not None
    assert root.resolve() == repo.resolve()
    outside = tmp_path / "outside"
    outside.mkdir()
    assert git.get_repository_root(outside) is None


def test_diff_stat_reports_tracked_changes_only(repo: Path) -> None:
    git = RealGit()
    assert git.get_diff_stat(repo) == ""

    (repo / "untracked.txt").write_text("new\n", encoding="utf-8")
    assert git.get_diff_stat(repo) == ""

    (repo / "README.md").write_text("changed\n", encoding="utf-8")
    assert "README.md" in git.get_diff_stat(repo)


def test_list_local_branches_merged_into_trunk(repo: Path) -> None:
    git = RealGit()

    assert sorted(git.list_local_branches(repo)) == ["master", "merged", "unmerged"]
    assert sorted(git.list_local_branches(repo, merged_into="master")) == ["master", "merged"]


def test_detached_head_is_not_listed_as_a_branch(repo: Path) -> None:
    _git(repo, "checkout", "--detach", "master")
    git = RealGit()

    assert sorted(git.list_local_branches(repo)) == ["master", "merged", "unmerged"]
    assert sorted(git.list_local_branches(repo, merged_into="master")) == ["master", "merged"]


def test_rebase_all_from_detached_head_only_visits_real_branches(repo: Path) -> None:
    _git(repo, "checkout", "--detach", "master")
    git = RealGit()
    ctx = TidyContext.for_test(git=git, cwd=repo)
    trunk = TrunkBranch(name="master", source=TrunkSource.DEFAULT)

    report = rebase_all_branches(ctx, repo, trunk)

    assert report.problem_branches == []
    assert sorted(report.rebased) == ["merged", "unmerged"]
    assert _git(repo, "rev-parse", "--abbrev-ref", "HEAD") == "master"


def test_branch_queries(repo: Path) -> None:
    git = RealGit()

    assert git.branch_exists(repo, "merged")
    assert not git.branch_exists(repo, "nope")
    assert _git(repo, "rev-parse", "--abbrev-ref", "HEAD") == "master"
    assert git.get_branch_head(repo, "master") == _git(repo, "rev-parse", "master")
    assert git.get_branch_head(repo, "nope") is None
    assert git.get_branch_remote(repo, "master") is None


def test_force_delete_unmerged_branch(repo: Path) -> None:
    git = RealGit()

    git.delete_branch(repo, "unmerged", force=True)

    assert not git.branch_exists(repo, "unmerged")


def test_deleting_checked_out_branch_fails(repo: Path) -> None:
    git = RealGit()

    with pytest.raises(RuntimeError, match="delete branch 'master'"):
        git.delete_branch(repo, "master", force=True)


def test_checkout_missing_branch_fails(repo: Path) -> None:
    with pytest.raises(RuntimeError, match="checkout branch 'nope'"):
        RealGit().checkout_branch(repo, "nope")


def test_conflicting_rebase_is_aborted_and_head_kept(repo: Path) -> None:
    _git(repo, "checkout", "-b", "conflicted", "master~1")
    _commit(repo, "master.txt", "conflicting\n", "Conflict with master")
    _git(repo, "checkout", "master")
    git = RealGit()
    before = git.get_branch_head(repo, "conflicted")

    ctx = TidyContext.for_test(git=git, cwd=repo)
    trunk = TrunkBranch(name="master", source=TrunkSource.DEFAULT)
    report = rebase_all_branches(ctx, repo, trunk)

    assert report.problem_branches == ["conflicted"]
    assert sorted(report.rebased) == ["merged", "unmerged"]
    assert git.get_branch_head(repo, "conflicted") == before
    assert _git(repo, "rev-parse", "--abbrev-ref", "HEAD") == "master"
    assert not (repo / ".git" / "rebase-merge").exists()
    assert not (repo / ".git" / "rebase-apply").exists()
    assert _git(repo, "merge-base", "unmerged", "master") == _git(repo, "rev-parse", "master")


def test_garbage_collect(repo: Path) -> None:
    RealGit().garbage_collect(repo)


def test_tidy_end_to_end_in_dev_mode(repo: Path) -> None:
    git = RealGit()
    ctx = TidyContext.for_test(
        git=git, cwd=repo, prompter=FakePrompter(default="y"), dev_mode=True
    )

    result = CliRunner().invoke(cli, ["--skip-gc"], obj=ctx, catch_exceptions=False)

    assert result.exit_code == 0
    assert sorted(git.list_local_branches(repo)) == ["master", "unmerged"]
    assert "Deleted 1 branch(es)" in result.output


def test_tidy_refuses_dirty_tree(repo: Path) -> None:
    (repo / "README.md").write_text("dirty\n", encoding="utf-8")
    git = RealGit()
    ctx = TidyContext.for_test(git=git, cwd=repo, prompter=FakePrompter(default="y"))

    result = CliRunner().invoke(cli, [], obj=ctx, catch_exceptions=False)

    assert result.exit_code == 1
    assert "README.md" in result.output
    assert sorted(git.list_local_branches(repo)) == ["master", "merged", "unmerged"]
