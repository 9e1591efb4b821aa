"""High-level git operations interface.

This module provides a clean abstraction over git subprocess calls, making the
codebase more testable and maintainable.

Architecture:
- Git: Abstract base class defining the interface
- RealGit: Production implementation using subprocess
- FakeGit: In-memory implementation for tests

Mutating operations raise RuntimeError on failure; callers decide whether a
failure is fatal to the run or only to the current branch.
"""

from abc import ABC, abstractmethod
from pathlib import Path


class Git(ABC):
    """Abstract interface for git operations.

    All implementations (real and fake) must implement this interface.
    This interface contains ONLY runtime operations - no test setup methods.
    """

    @abstractmethod
    def get_repository_root(self, cwd: Path) -> Path | None:
        """Get the top-level directory of the repository containing cwd.

        Returns:
            Repository root, or None if cwd is not inside a git repository
        """
        ...

    @abstractmethod
    def get_diff_stat(self, repo_root: Path) -> str:
        """Get a stat summary of all differences between the working tree and HEAD.

        Covers both staged and unstaged changes to tracked files.

        Returns:
            The stat summary text, or an empty string when the tree is clean
        """
        ...

    @abstractmethod
    def list_local_branches(self, repo_root: Path, *, merged_into: str | None = None) -> list[str]:
        """List local branch names.

        Args:
            repo_root: Path to the repository root
            merged_into: If given, only list branches that are ancestors of this ref

        Returns:
            Branch names in git's order
        """
        ...

    @abstractmethod
    def branch_exists(self, repo_root: Path, branch: str) -> bool:
        """Check whether a local branch with this exact name exists."""
        ...

    @abstractmethod
    def get_branch_head(self, repo_root: Path, branch: str) -> str | None:
        """Get the commit SHA at the head of a branch, or None if it doesn't exist."""
        ...

    @abstractmethod
    def checkout_branch(self, cwd: Path, branch: str) -> None:
        """Checkout a branch in the given directory."""
        ...

    @abstractmethod
    def get_branch_remote(self, repo_root: Path, branch: str) -> str | None:
        """Get the remote a branch tracks (branch.<name>.remote).

        Returns:
            Remote name, or None if the branch has no configured upstream
        """
        ...

    @abstractmethod
    def pull_branch(self, repo_root: Path, remote: str | None, branch: str | None) -> None:
        """Fetch and merge into the current branch.

        Args:
            repo_root: Path to the repository root
            remote: Remote to pull from; None uses the configured upstream
            branch: Remote branch to merge; None uses the configured upstream
        """
        ...

    @abstractmethod
    def garbage_collect(self, repo_root: Path) -> None:
        """Optimize the repository's object storage."""
        ...

    @abstractmethod
    def delete_branch(self, cwd: Path, branch_name: str, *, force: bool) -> None:
        """Delete a local branch.

        Args:
            cwd: Working directory to run command in
            branch_name: Name of the branch to delete
            force: Use -D (force delete) instead of -d
        """
        ...

    @abstractmethod
    def rebase_onto(self, cwd: Path, upstream: str) -> None:
        """Replay the current branch's commits onto upstream."""
        ...

    @abstractmethod
    def abort_rebase(self, cwd: Path) -> None:
        """Abort an in-progress rebase, restoring the pre-rebase state."""
        ...
