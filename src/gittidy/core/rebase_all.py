"""Rebase every local branch onto trunk, isolating failures per branch."""

import logging
from dataclasses import dataclass, field
from pathlib import Path

from gittidy.core.context import TidyContext
from gittidy.core.results import StepResult
from gittidy.core.trunk import TrunkBranch

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RebaseAllReport:
    rebased: list[str] = field(default_factory=list)
    problem_branches: list[str] = field(default_factory=list)


def rebase_branch(ctx: TidyContext, repo_root: Path, branch: str, trunk: TrunkBranch) -> StepResult:
    """Check out a branch and rebase it onto trunk.

    A failed rebase is aborted so the branch keeps its pre-rebase commit;
    an abort that leaves the branch elsewhere is reported as an error.
    """
    try:
        ctx.git.checkout_branch(repo_root, branch)
    except RuntimeError as e:
        logger.debug("Checkout of %s failed", branch, exc_info=True)
        return StepResult.failed(f"could not check out {branch}: {e}")

    head_before = ctx.git.get_branch_head(repo_root, branch)
    try:
        ctx.git.rebase_onto(repo_root, trunk.name)
    except RuntimeError as rebase_error:
        logger.debug("Rebase of %s failed", branch, exc_info=True)
        try:
            ctx.git.abort_rebase(repo_root)
        except RuntimeError as abort_error:
            ctx.feedback.error(f"Could not abort rebase of {branch}: {abort_error}")
        else:
            head_after = ctx.git.get_branch_head(repo_root, branch)
            if head_after != head_before:
                ctx.feedback.error(
                    f"{branch} is at {head_after} after aborting its rebase, "
                    f"expected {head_before}"
                )
        return StepResult.failed(f"rebase of {branch} onto {trunk.name} failed: {rebase_error}")

    return StepResult.ok()


def rebase_all_branches(ctx: TidyContext, repo_root: Path, trunk: TrunkBranch) -> RebaseAllReport:
    """Rebase a snapshot of all local branches onto trunk, then return to trunk.

    One branch failing never stops the loop; its name is collected in
    problem_branches instead.
    """
    branches = list(dict.fromkeys(ctx.git.list_local_branches(repo_root)))
    logger.debug("Rebase snapshot: %s", branches)

    rebased: list[str] = []
    problem_branches: list[str] = []
    for branch in branches:
        if trunk.matches(branch):
            continue

        ctx.feedback.info(f"Rebasing {branch} onto {trunk.name}...")
        result = rebase_branch(ctx, repo_root, branch, trunk)
        if result.succeeded:
            ctx.feedback.success(f"✓ Rebased {branch}")
            rebased.append(branch)
        else:
            ctx.feedback.warning(f"Warning: {result.message}")
            problem_branches.append(branch)

    try:
        ctx.git.checkout_branch(repo_root, trunk.name)
    except RuntimeError as e:
        ctx.feedback.warning(f"Warning: could not return to {trunk.name}: {e}")

    return RebaseAllReport(rebased=rebased, problem_branches=problem_branches)
