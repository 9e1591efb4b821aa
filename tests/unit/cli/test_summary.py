"""Tests for the end-of-run summary panel."""

from rich.console import Console

from gittidy.cli.summary import format_tidy_summary
from gittidy.core.disposition import BranchDisposition, DispositionReport, DispositionVerdict
from gittidy.core.rebase_all import RebaseAllReport
from gittidy.core.trunk import TrunkBranch, TrunkSource

TRUNK = TrunkBranch(name="main", source=TrunkSource.DEFAULT)


def _render(panel) -> str:
    console = Console(width=100, record=True)
    with console.capture() as capture:
        console.print(panel)
    return capture.get()


def test_clean_run_summary() -> None:
    panel = format_tidy_summary(TRUNK, DispositionReport(), None, [])

    text = _render(panel)

    assert panel.title == "Tidy Complete"
    assert "Trunk: main" in text
    assert "No branches deleted" in text
    assert "Rebased" not in text


def test_summary_lists_deleted_branches_from_both_passes() -> None:
    report = DispositionReport(
        ancestry=[
            BranchDisposition(
                branch="old", verdict=DispositionVerdict.CONFIRM_MERGED_ANCESTRY, deleted=True
            )
        ],
        pull_request=[
            BranchDisposition(
                branch="squashed",
                verdict=DispositionVerdict.CONFIRM_MERGED_VIA_REQUEST,
                deleted=True,
            ),
            BranchDisposition(branch="wip", verdict=DispositionVerdict.NO_SIGNAL),
        ],
    )

    text = _render(format_tidy_summary(TRUNK, report, None, []))

    assert "Deleted 2 branch(es)" in text
    assert "old" in text
    assert "squashed" in text
    assert "wip" not in text


def test_problem_branches_mark_summary_with_warnings() -> None:
    rebase = RebaseAllReport(rebased=["a"], problem_branches=["conflicted"])

    panel = format_tidy_summary(TRUNK, DispositionReport(), rebase, [])
    text = _render(panel)

    assert panel.title == "Tidy Complete (with warnings)"
    assert "Rebased 1 branch(es)" in text
    assert "conflicted" in text


def test_stage_warnings_are_listed() -> None:
    panel = format_tidy_summary(
        TRUNK, DispositionReport(), None, ["Could not pull main: Failed to pull"]
    )

    assert panel.title == "Tidy Complete (with warnings)"
    assert "Could not pull main" in _render(panel)
