"""The tidy command: sync trunk, reclaim storage, prune merged branches."""

import logging
from pathlib import Path

import click

from gittidy.cli.ensure import Ensure
from gittidy.cli.output import user_output
from gittidy.cli.summary import format_tidy_summary, render_summary
from gittidy.core.context import TidyContext, create_context
from gittidy.core.disposition import dispose_merged_branches
from gittidy.core.rebase_all import RebaseAllReport, rebase_all_branches
from gittidy.core.results import StepResult
from gittidy.core.trunk import resolve_trunk
from gittidy.core.version_check import find_newer_version
from gittidy.core.workspace import check_clean_working_tree, reclaim_storage, sync_trunk
from gittidy.version import __version__

logger = logging.getLogger(__name__)


def _collect_warning(ctx: TidyContext, result: StepResult, warnings: list[str]) -> None:
    if result.succeeded:
        if result.message:
            ctx.feedback.success(f"✓ {result.message}")
        return
    ctx.feedback.warning(f"Warning: {result.message}")
    warnings.append(result.message.partition("\n")[0])


def _check_for_update(ctx: TidyContext, repo_root: Path) -> None:
    repository = ctx.global_config.release_repository
    if not ctx.global_config.check_for_updates or repository is None:
        return
    newer = find_newer_version(ctx.github, repo_root, repository, __version__)
    if newer is not None:
        ctx.feedback.warning(
            f"A newer git-tidy is available: {newer} (installed: {__version__})"
        )


@click.command("git-tidy", context_settings={"help_option_names": ["-h", "--help"]})
@click.option(
    "--rebase-all",
    is_flag=True,
    help="Rebase every local branch onto the refreshed trunk.",
)
@click.option(
    "--skip-gc",
    is_flag=True,
    help="Skip garbage collection of the repository.",
)
@click.option(
    "--trunk",
    "trunk_name",
    metavar="NAME",
    default=None,
    help="Use NAME as the trunk branch instead of master/main.",
)
@click.version_option(__version__, prog_name="git-tidy")
@click.pass_context
def tidy_cmd(
    click_ctx: click.Context,
    rebase_all: bool,
    skip_gc: bool,
    trunk_name: str | None,
) -> None:
    """Tidy the current repository.

    \b
    Steps:
    1. Refuse to run if tracked files have uncommitted changes
    2. Check out the trunk branch and pull it
    3. Garbage collect the repository (unless --skip-gc)
    4. Offer to delete branches already merged into trunk
    5. Offer to delete branches whose pull request was merged on GitHub
    6. With --rebase-all: rebase every branch onto trunk

    Set GIT_TIDY_DEV=1 to skip the checkout and pull of step 2.
    """
    # Only create context if not already provided (e.g., by tests)
    if click_ctx.obj is None:
        click_ctx.obj = create_context()
    ctx: TidyContext = click_ctx.obj

    repo_root = Ensure.not_none(
        ctx.git.get_repository_root(ctx.cwd), "Not inside a git repository"
    )
    logger.debug("Repository root: %s", repo_root)

    # Step 1: Clean working tree gate
    try:
        gate = check_clean_working_tree(ctx, repo_root)
    except RuntimeError as e:
        user_output(click.style("Error: ", fg="red") + str(e))
        raise SystemExit(1) from e
    Ensure.not_aborted(gate, "Working tree has uncommitted changes, commit or stash them first:")

    # Step 2: Resolve trunk (immutable for the rest of the run)
    trunk = Ensure.not_none(
        resolve_trunk(
            ctx.git,
            repo_root,
            ctx.feedback,
            requested=trunk_name,
            configured=ctx.global_config.trunk_branch,
        ),
        "No trunk branch found (looked for --trunk, configured trunk_branch, master, main)",
    )
    ctx.feedback.info(f"Using trunk {click.style(trunk.name, fg='cyan', bold=True)}")

    warnings: list[str] = []

    # Step 3: Sync trunk
    _collect_warning(ctx, sync_trunk(ctx, repo_root, trunk), warnings)

    # Step 4: Reclaim storage
    if skip_gc or ctx.global_config.skip_gc:
        ctx.feedback.info("Skipping garbage collection")
    else:
        _collect_warning(ctx, reclaim_storage(ctx, repo_root), warnings)

    # Step 5: Prune merged branches (ancestry pass, then pull-request pass)
    disposition = dispose_merged_branches(ctx, repo_root, trunk)

    # Step 6: Optional rebase of every branch
    rebase_report: RebaseAllReport | None = None
    if rebase_all:
        rebase_report = rebase_all_branches(ctx, repo_root, trunk)

    # Step 7: Update check and summary
    _check_for_update(ctx, repo_root)
    render_summary(format_tidy_summary(trunk, disposition, rebase_report, warnings))
