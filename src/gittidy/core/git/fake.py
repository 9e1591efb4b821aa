"""Fake git operations for testing.

FakeGit is an in-memory implementation that accepts pre-configured state
in its constructor. Construct instances directly with keyword arguments.
"""

from pathlib import Path

from gittidy.core.git.abc import Git


class FakeGit(Git):
    """In-memory fake implementation of git operations.

    This class has NO public setup methods. All state is provided via constructor
    using keyword arguments with sensible defaults. Mutations (checkout, delete,
    rebase, pull, gc) update the in-memory state and are recorded for assertions.

    Failures are simulated by naming the branches (or flags) whose operation
    should raise RuntimeError, mirroring how RealGit surfaces subprocess errors.
    """

    def __init__(
        self,
        *,
        repo_root: Path | None = None,
        local_branches: list[str] | None = None,
        merged_branches: dict[str, list[str]] | None = None,
        branch_heads: dict[str, str] | None = None,
        branch_remotes: dict[str, str] | None = None,
        current_branch: str | None = None,
        diff_stat: str = "",
        checkout_failures: set[str] | None = None,
        delete_failures: set[str] | None = None,
        rebase_failures: set[str] | None = None,
        pull_fails: bool = False,
        gc_fails: bool = False,
    ) -> None:
        """Create FakeGit with pre-configured state.

        Args:
            repo_root: Repository root returned for any cwd; None simulates
                running outside a repository
            local_branches: Local branch names in git's order
            merged_branches: Mapping of ref -> branches that are its ancestors
                (what `git for-each-ref --merged <ref> refs/heads/` would list)
            branch_heads: Mapping of branch -> commit SHA
            branch_remotes: Mapping of branch -> configured upstream remote
            current_branch: Initially checked-out branch
            diff_stat: Stat summary of uncommitted changes ("" means clean)
            checkout_failures: Branches whose checkout raises
            delete_failures: Branches whose deletion raises
            rebase_failures: Branches whose rebase raises (conflict)
            pull_fails: Whether pull raises
            gc_fails: Whether gc raises
        """
        self._repo_root = repo_root
        self._local_branches = list(local_branches or [])
        self._merged_branches = {ref: list(names) for ref, names in (merged_branches or {}).items()}
        self._branch_heads = dict(branch_heads or {})
        self._branch_remotes = branch_remotes or {}
        self._current_branch = current_branch
        self._diff_stat = diff_stat
        self._checkout_failures = checkout_failures or set()
        self._delete_failures = delete_failures or set()
        self._rebase_failures = rebase_failures or set()
        self._pull_fails = pull_fails
        self._gc_fails = gc_fails

        self._checked_out_branches: list[str] = []
        self._deleted_branches: list[tuple[str, bool]] = []
        self._pull_calls: list[tuple[str | None, str | None]] = []
        self._gc_calls: list[Path] = []
        self._rebase_calls: list[tuple[str, str]] = []
        self._aborted_rebases: list[str] = []

    @property
    def local_branches(self) -> list[str]:
        """Current local branch names (after any deletions)."""
        return list(self._local_branches)

    @property
    def checked_out_branches(self) -> list[str]:
        """Branches passed to checkout_branch(), in call order."""
        return self._checked_out_branches

    @property
    def deleted_branches(self) -> list[tuple[str, bool]]:
        """Successful deletions as (branch, force) tuples."""
        return self._deleted_branches

    @property
    def pull_calls(self) -> list[tuple[str | None, str | None]]:
        """Arguments of pull_branch() calls as (remote, branch) tuples."""
        return self._pull_calls

    @property
    def gc_calls(self) -> list[Path]:
        """Repository roots passed to garbage_collect()."""
        return self._gc_calls

    @property
    def rebase_calls(self) -> list[tuple[str, str]]:
        """Rebase attempts as (branch, upstream) tuples."""
        return self._rebase_calls

    @property
    def aborted_rebases(self) -> list[str]:
        """Branches whose rebase was aborted."""
        return self._aborted_rebases

    @property
    def current_branch(self) -> str | None:
        """Branch currently checked out (None for detached HEAD)."""
        return self._current_branch

    def get_repository_root(self, cwd: Path) -> Path | None:
        return self._repo_root

    def get_diff_stat(self, repo_root: Path) -> str:
        return self._diff_stat

    def list_local_branches(self, repo_root: Path, *, merged_into: str | None = None) -> list[str]:
        if merged_into is None:
            return list(self._local_branches)
        merged = self._merged_branches.get(merged_into, [])
        return [branch for branch in merged if branch in self._local_branches]

    def branch_exists(self, repo_root: Path, branch: str) -> bool:
        return branch in self._local_branches

    def get_branch_head(self, repo_root: Path, branch: str) -> str | None:
        if branch not in self._local_branches:
            return None
        return self._branch_heads.get(branch)

    def checkout_branch(self, cwd: Path, branch: str) -> None:
        self._checked_out_branches.append(branch)
        if branch in self._checkout_failures or branch not in self._local_branches:
            msg = f"Failed to checkout branch '{branch}'"
            raise RuntimeError(msg)
        self._current_branch = branch

    def get_branch_remote(self, repo_root: Path, branch: str) -> str | None:
        return self._branch_remotes.get(branch)

    def pull_branch(self, repo_root: Path, remote: str | None, branch: str | None) -> None:
        self._pull_calls.append((remote, branch))
        if self._pull_fails:
            msg = "Failed to pull"
            raise RuntimeError(msg)

    def garbage_collect(self, repo_root: Path) -> None:
        self._gc_calls.append(repo_root)
        if self._gc_fails:
            msg = "Failed to garbage collect repository"
            raise RuntimeError(msg)

    def delete_branch(self, cwd: Path, branch_name: str, *, force: bool) -> None:
        if branch_name in self._delete_failures or branch_name not in self._local_branches:
            msg = f"Failed to delete branch '{branch_name}'"
            raise RuntimeError(msg)
        self._local_branches.remove(branch_name)
        for names in self._merged_branches.values():
            if branch_name in names:
                names.remove(branch_name)
        self._deleted_branches.append((branch_name, force))

    def rebase_onto(self, cwd: Path, upstream: str) -> None:
        branch = self._current_branch
        if branch is None:
            msg = "Failed to rebase: HEAD is detached"
            raise RuntimeError(msg)
        self._rebase_calls.append((branch, upstream))
        if branch in self._rebase_failures:
            msg = f"Failed to rebase onto '{upstream}'\nstderr: CONFLICT (content)"
            raise RuntimeError(msg)
        old_head = self._branch_heads.get(branch, branch)
        self._branch_heads[branch] = f"{old_head}+{upstream}"

    def abort_rebase(self, cwd: Path) -> None:
        if self._current_branch is not None:
            self._aborted_rebases.append(self._current_branch)
