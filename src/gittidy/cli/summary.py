"""Final summary panel for a tidy run."""

from rich.console import Console
from rich.panel import Panel
from rich.text import Text

from gittidy.core.disposition import DispositionReport
from gittidy.core.rebase_all import RebaseAllReport
from gittidy.core.trunk import TrunkBranch


def format_tidy_summary(
    trunk: TrunkBranch,
    disposition: DispositionReport,
    rebase: RebaseAllReport | None,
    warnings: list[str],
) -> Panel:
    """Format the end-of-run summary.

    Args:
        trunk: Trunk used for this run
        disposition: Outcome of both deletion passes
        rebase: Outcome of the rebase-all loop, or None if it didn't run
        warnings: Stage-level warnings collected during the run

    Returns:
        Rich Panel, yellow-bordered when anything needs the user's attention
    """
    lines: list[Text] = [Text(f"🌳 Trunk: {trunk.name}")]

    deleted = disposition.deleted_branches
    if deleted:
        lines.append(Text(f"🗑  Deleted {len(deleted)} branch(es):", style="green"))
        lines.extend(Text(f"   {branch}") for branch in deleted)
    else:
        lines.append(Text("🗑  No branches deleted"))

    has_problems = bool(warnings)
    if rebase is not None:
        lines.append(Text(f"🔁 Rebased {len(rebase.rebased)} branch(es)"))
        if rebase.problem_branches:
            has_problems = True
            lines.append(Text(""))
            lines.append(Text("Branches that could not be rebased:", style="yellow bold"))
            lines.extend(Text(f"   {branch}", style="yellow") for branch in rebase.problem_branches)

    if warnings:
        lines.append(Text(""))
        lines.append(Text("Warnings:", style="yellow bold"))
        lines.extend(Text(f"   {warning}", style="yellow") for warning in warnings)

    content = Text("\n").join(lines)
    title = "Tidy Complete (with warnings)" if has_problems else "Tidy Complete"
    return Panel(
        content, title=title, border_style="yellow" if has_problems else "green", padding=(1, 2)
    )


def render_summary(panel: Panel) -> None:
    Console(stderr=True).print(panel)
