"""Production Git implementation using subprocess.

This module provides the real Git implementation that executes actual git
commands via subprocess.
"""

import subprocess
from pathlib import Path

from gittidy.core.git.abc import Git
from gittidy.core.subprocess import run_subprocess_with_context


class RealGit(Git):
    """Production implementation using subprocess.

    All git operations execute actual git commands via subprocess.
    """

    def get_repository_root(self, cwd: Path) -> Path | None:
        """Get the top-level directory of the repository containing cwd."""
        result = subprocess.run(
            ["git", "rev-parse", "--show-toplevel"],
            cwd=cwd,
            capture_output=True,
            text=True,
            check=False,
        )
        if result.returncode != 0:
            return None
        return Path(result.stdout.strip())

    def get_diff_stat(self, repo_root: Path) -> str:
        """Get a stat summary of staged and unstaged changes against HEAD."""
        result = run_subprocess_with_context(
            ["git", "diff", "HEAD", "--stat"],
            operation_context="inspect working tree",
            cwd=repo_root,
        )
        return result.stdout.strip()

    def list_local_branches(self, repo_root: Path, *, merged_into: str | None = None) -> list[str]:
        """List local branch names, optionally only those merged into a ref."""
        # for-each-ref only sees refs/heads, never pseudo-entries like "(HEAD detached at ...)"
        cmd = ["git", "for-each-ref", "--format=%(refname:short)"]
        context = "list local branches"
        if merged_into is not None:
            cmd.extend(["--merged", merged_into])
            context = f"list local branches merged into '{merged_into}'"
        cmd.append("refs/heads/")

        result = run_subprocess_with_context(cmd, operation_context=context, cwd=repo_root)
        return [line.strip() for line in result.stdout.splitlines() if line.strip()]

    def branch_exists(self, repo_root: Path, branch: str) -> bool:
        """Check whether a local branch exists."""
        result = subprocess.run(
            ["git", "show-ref", "--verify", "--quiet", f"refs/heads/{branch}"],
            cwd=repo_root,
            capture_output=True,
            check=False,
        )
        return result.returncode == 0

    def get_branch_head(self, repo_root: Path, branch: str) -> str | None:
        """Get the commit SHA at the head of a branch."""
        result = subprocess.run(
            ["git", "rev-parse", "--verify", "--quiet", f"refs/heads/{branch}"],
            cwd=repo_root,
            capture_output=True,
            text=True,
            check=False,
        )
        if result.returncode != 0:
            return None

        return result.stdout.strip()

    def checkout_branch(self, cwd: Path, branch: str) -> None:
        """Checkout a branch in the given directory."""
        run_subprocess_with_context(
            ["git", "checkout", branch],
            operation_context=f"checkout branch '{branch}'",
            cwd=cwd,
        )

    def get_branch_remote(self, repo_root: Path, branch: str) -> str | None:
        """Get the remote a branch tracks.

        `git config` exits non-zero when the key is unset, which is the
        expected "no upstream" answer rather than an error.
        """
        result = subprocess.run(
            ["git", "config", "--get", f"branch.{branch}.remote"],
            cwd=repo_root,
            capture_output=True,
            text=True,
            check=False,
        )
        if result.returncode != 0:
            return None

        remote = result.stdout.strip()
        return remote or None

    def pull_branch(self, repo_root: Path, remote: str | None, branch: str | None) -> None:
        """Fetch and merge into the current branch."""
        cmd = ["git", "pull"]
        if remote is not None:
            cmd.append(remote)
            if branch is not None:
                cmd.append(branch)
            context = f"pull '{branch}' from remote '{remote}'"
        else:
            context = "pull from upstream"

        run_subprocess_with_context(cmd, operation_context=context, cwd=repo_root)

    def garbage_collect(self, repo_root: Path) -> None:
        """Run git gc."""
        run_subprocess_with_context(
            ["git", "gc"],
            operation_context="garbage collect repository",
            cwd=repo_root,
        )

    def delete_branch(self, cwd: Path, branch_name: str, *, force: bool) -> None:
        """Delete a local branch."""
        flag = "-D" if force else "-d"
        run_subprocess_with_context(
            ["git", "branch", flag, branch_name],
            operation_context=f"delete branch '{branch_name}'",
            cwd=cwd,
        )

    def rebase_onto(self, cwd: Path, upstream: str) -> None:
        """Rebase the current branch onto upstream."""
        run_subprocess_with_context(
            ["git", "rebase", upstream],
            operation_context=f"rebase onto '{upstream}'",
            cwd=cwd,
        )

    def abort_rebase(self, cwd: Path) -> None:
        """Abort an in-progress rebase."""
        run_subprocess_with_context(
            ["git", "rebase", "--abort"],
            operation_context="abort rebase",
            cwd=cwd,
        )
