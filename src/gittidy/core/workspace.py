"""Workspace preparation stages: clean-tree gate, trunk sync, storage reclaim."""

import logging
from pathlib import Path

from gittidy.core.context import TidyContext
from gittidy.core.results import StepResult
from gittidy.core.trunk import TrunkBranch

logger = logging.getLogger(__name__)


def check_clean_working_tree(ctx: TidyContext, repo_root: Path) -> StepResult:
    """Refuse to continue when tracked files differ from HEAD.

    The returned message carries the diff stat so the caller can show the user
    what is uncommitted.
    """
    diff_stat = ctx.git.get_diff_stat(repo_root)
    if diff_stat:
        logger.debug("Working tree is dirty:\n%s", diff_stat)
        return StepResult.abort(diff_stat)
    return StepResult.ok()


def sync_trunk(ctx: TidyContext, repo_root: Path, trunk: TrunkBranch) -> StepResult:
    """Check out the trunk and pull its latest history.

    Pulls from the trunk's configured upstream when it has one, otherwise
    explicitly from the default remote. Failures are fatal to this stage only.
    """
    if ctx.dev_mode:
        ctx.feedback.warning("Developer mode: skipping checkout and pull of trunk")
        return StepResult.ok()

    ctx.feedback.info(f"Checking out {trunk.name}...")
    try:
        ctx.git.checkout_branch(repo_root, trunk.name)
    except RuntimeError as e:
        logger.debug("Checkout of trunk failed", exc_info=True)
        return StepResult.failed(f"Could not check out {trunk.name}: {e}")

    remote = ctx.git.get_branch_remote(repo_root, trunk.name)
    try:
        if remote is None:
            default_remote = ctx.global_config.default_remote
            ctx.feedback.info(
                f"{trunk.name} has no upstream, pulling from {default_remote}/{trunk.name}..."
            )
            ctx.git.pull_branch(repo_root, default_remote, trunk.name)
        else:
            ctx.feedback.info(f"Pulling {trunk.name} from {remote}...")
            ctx.git.pull_branch(repo_root, None, None)
    except RuntimeError as e:
        logger.debug("Pull of trunk failed", exc_info=True)
        return StepResult.failed(f"Could not pull {trunk.name}: {e}")

    return StepResult.ok(f"{trunk.name} is up to date")


def reclaim_storage(ctx: TidyContext, repo_root: Path) -> StepResult:
    """Run garbage collection on the repository."""
    ctx.feedback.info("Reclaiming storage (git gc)...")
    try:
        ctx.git.garbage_collect(repo_root)
    except RuntimeError as e:
        logger.debug("Garbage collection failed", exc_info=True)
        return StepResult.failed(f"Garbage collection failed: {e}")
    return StepResult.ok("Storage reclaimed")
