"""Tests for RealGitHub with mocked subprocess execution.

These tests verify that RealGitHub calls the gh CLI with the expected
arguments and turns every failure into "no signal".
"""

import subprocess
from pathlib import Path

from pytest import MonkeyPatch

from gittidy.core.github.real import RealGitHub
from tests.conftest import load_fixture


def _completed(cmd: list[str], stdout: str) -> subprocess.CompletedProcess:
    return subprocess.CompletedProcess(args=cmd, returncode=0, stdout=stdout, stderr="")


def test_merged_pr_query_arguments(monkeypatch: MonkeyPatch) -> None:
    calls: list[list[str]] = []

    def mock_run(cmd: list[str], **kwargs) -> subprocess.CompletedProcess:
        calls.append(cmd)
        return _completed(cmd, load_fixture("github/merged_pr_list.json"))

    monkeypatch.setattr(subprocess, "run", mock_run)

    result = RealGitHub().get_merged_pr_for_branch(Path("/repo"), "feature-login")

    assert result is not None
    assert result.number == 412
    assert calls == [
        [
            "gh",
            "pr",
            "list",
            "--author",
            "@me",
            "--state",
            "merged",
            "--head",
            "feature-login",
            "--json",
            "number,headRefName,baseRefName,title,url",
            "--limit",
            "1",
        ]
    ]


def test_merged_pr_query_empty_result(monkeypatch: MonkeyPatch) -> None:
    monkeypatch.setattr(subprocess, "run", lambda cmd, **kwargs: _completed(cmd, "[]"))

    assert RealGitHub().get_merged_pr_for_branch(Path("/repo"), "wip") is None


def test_merged_pr_query_command_failure(monkeypatch: MonkeyPatch) -> None:
    def mock_run(cmd: list[str], **kwargs) -> subprocess.CompletedProcess:
        raise subprocess.CalledProcessError(1, cmd, stderr="gh: To get started, run: gh auth login")

    monkeypatch.setattr(subprocess, "run", mock_run)

    assert RealGitHub().get_merged_pr_for_branch(Path("/repo"), "feature") is None


def test_merged_pr_query_gh_not_installed(monkeypatch: MonkeyPatch) -> None:
    def mock_run(cmd: list[str], **kwargs) -> subprocess.CompletedProcess:
        raise FileNotFoundError("gh")

    monkeypatch.setattr(subprocess, "run", mock_run)

    assert RealGitHub().get_merged_pr_for_branch(Path("/repo"), "feature") is None


def test_merged_pr_query_garbage_output(monkeypatch: MonkeyPatch) -> None:
    monkeypatch.setattr(subprocess, "run", lambda cmd, **kwargs: _completed(cmd, "not json"))

    assert RealGitHub().get_merged_pr_for_branch(Path("/repo"), "feature") is None


def test_latest_release_version(monkeypatch: MonkeyPatch) -> None:
    calls: list[list[str]] = []

    def mock_run(cmd: list[str], **kwargs) -> subprocess.CompletedProcess:
        calls.append(cmd)
        return _completed(cmd, "v0.9.1\n")

    monkeypatch.setattr(subprocess, "run", mock_run)

    version = RealGitHub().get_latest_release_version(Path("/repo"), "owner/tool")

    assert version == "0.9.1"
    assert calls[0][:3] == ["gh", "api", "repos/owner/tool/releases/latest"]


def test_latest_release_version_failure(monkeypatch: MonkeyPatch) -> None:
    def mock_run(cmd: list[str], **kwargs) -> subprocess.CompletedProcess:
        raise subprocess.CalledProcessError(1, cmd, stderr="HTTP 404: Not Found")

    monkeypatch.setattr(subprocess, "run", mock_run)

    assert RealGitHub().get_latest_release_version(Path("/repo"), "owner/tool") is None
