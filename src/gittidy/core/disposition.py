"""Branch disposition: decide which local branches are safe to delete.

Two independent detectors run one after the other:

- The ancestry pass offers every branch that is already reachable from trunk
  (fast-forward and true merges).
- The pull-request pass asks GitHub whether the branch was merged as a PR.
  This catches squash and rebase merges, whose commits never become ancestors
  of trunk.

A branch declined in the ancestry pass can be offered again by the
pull-request pass; the detectors measure different things and are not
deduplicated. Nothing is deleted without an explicit "y" from the user.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

import click

from gittidy.core.context import TidyContext
from gittidy.core.github.types import MergedPullRequest
from gittidy.core.prompt import PromptAnswer
from gittidy.core.results import StepResult
from gittidy.core.trunk import TrunkBranch

logger = logging.getLogger(__name__)


class DispositionVerdict(Enum):
    SKIP_IS_TRUNK = "skip_is_trunk"
    SKIP_NOT_LOCAL = "skip_not_local"
    CONFIRM_MERGED_ANCESTRY = "confirm_merged_ancestry"
    CONFIRM_MERGED_VIA_REQUEST = "confirm_merged_via_request"
    NO_SIGNAL = "no_signal"


@dataclass(frozen=True)
class BranchDisposition:
    """What one pass decided, and did, for one branch."""

    branch: str
    verdict: DispositionVerdict
    answer: PromptAnswer | None = None
    deleted: bool = False
    pull_request: MergedPullRequest | None = None


@dataclass(frozen=True)
class DispositionReport:
    ancestry: list[BranchDisposition] = field(default_factory=list)
    pull_request: list[BranchDisposition] = field(default_factory=list)

    @property
    def deleted_branches(self) -> list[str]:
        return [d.branch for d in [*self.ancestry, *self.pull_request] if d.deleted]


def _skip_verdict(
    ctx: TidyContext, repo_root: Path, trunk: TrunkBranch, branch: str
) -> DispositionVerdict | None:
    if trunk.matches(branch):
        return DispositionVerdict.SKIP_IS_TRUNK
    if not ctx.git.branch_exists(repo_root, branch):
        return DispositionVerdict.SKIP_NOT_LOCAL
    return None


def delete_branch(ctx: TidyContext, repo_root: Path, branch: str) -> StepResult:
    """Force-delete a branch; failure is reported and does not stop the run."""
    try:
        ctx.git.delete_branch(repo_root, branch, force=True)
    except RuntimeError as e:
        logger.debug("Deleting %s failed", branch, exc_info=True)
        ctx.feedback.warning(f"Could not delete {branch}: {e}")
        return StepResult.failed(str(e))
    ctx.feedback.success(f"✓ Deleted {branch}")
    return StepResult.ok()


def _offer_deletion(
    ctx: TidyContext,
    repo_root: Path,
    branch: str,
    verdict: DispositionVerdict,
    question: str,
    pull_request: MergedPullRequest | None = None,
) -> BranchDisposition:
    answer = ctx.prompter.confirm(question)
    deleted = False
    if answer.confirmed:
        deleted = delete_branch(ctx, repo_root, branch).succeeded
    else:
        ctx.feedback.info(f"Keeping {branch}")
    return BranchDisposition(
        branch=branch,
        verdict=verdict,
        answer=answer,
        deleted=deleted,
        pull_request=pull_request,
    )


def run_ancestry_pass(
    ctx: TidyContext, repo_root: Path, trunk: TrunkBranch
) -> list[BranchDisposition]:
    """Offer every local branch that is an ancestor of trunk for deletion."""
    merged = ctx.git.list_local_branches(repo_root, merged_into=trunk.name)
    candidates = list(dict.fromkeys(merged))
    logger.debug("Ancestry candidates: %s", candidates)

    results: list[BranchDisposition] = []
    for branch in candidates:
        skip = _skip_verdict(ctx, repo_root, trunk, branch)
        if skip is not None:
            results.append(BranchDisposition(branch=branch, verdict=skip))
            continue

        styled = click.style(branch, fg="cyan", bold=True)
        results.append(
            _offer_deletion(
                ctx,
                repo_root,
                branch,
                DispositionVerdict.CONFIRM_MERGED_ANCESTRY,
                f"{styled} is merged into {trunk.name}. Delete it?",
            )
        )
    return results


def run_pull_request_pass(
    ctx: TidyContext, repo_root: Path, trunk: TrunkBranch
) -> list[BranchDisposition]:
    """Offer every local branch whose PR was merged on GitHub for deletion.

    The PR's target branch is shown to the user but not required to be trunk.
    """
    branches = list(dict.fromkeys(ctx.git.list_local_branches(repo_root)))

    results: list[BranchDisposition] = []
    for branch in branches:
        skip = _skip_verdict(ctx, repo_root, trunk, branch)
        if skip is not None:
            results.append(BranchDisposition(branch=branch, verdict=skip))
            continue

        pr = ctx.github.get_merged_pr_for_branch(repo_root, branch)
        # gh matches --head loosely; only an exact head branch name counts
        if pr is None or pr.head_ref_name != branch:
            results.append(BranchDisposition(branch=branch, verdict=DispositionVerdict.NO_SIGNAL))
            continue

        styled = click.style(branch, fg="cyan", bold=True)
        pr_label = click.style(f"PR #{pr.number}", fg="bright_black")
        results.append(
            _offer_deletion(
                ctx,
                repo_root,
                branch,
                DispositionVerdict.CONFIRM_MERGED_VIA_REQUEST,
                f"{styled} was merged into {pr.base_ref_name} ({pr_label}). Delete it?",
                pull_request=pr,
            )
        )
    return results


def dispose_merged_branches(
    ctx: TidyContext, repo_root: Path, trunk: TrunkBranch
) -> DispositionReport:
    """Run the ancestry pass to completion, then the pull-request pass."""
    ctx.feedback.info("Looking for branches merged into trunk...")
    ancestry = run_ancestry_pass(ctx, repo_root, trunk)
    ctx.feedback.info("Looking for branches merged via pull request...")
    pull_request = run_pull_request_pass(ctx, repo_root, trunk)
    return DispositionReport(ancestry=ancestry, pull_request=pull_request)
