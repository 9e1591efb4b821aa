"""Production implementation of GitHub operations."""

import json
import logging
from pathlib import Path

from gittidy.core.github.abc import GitHub
from gittidy.core.github.parsing import parse_merged_pr_list, parse_release_tag
from gittidy.core.github.types import MergedPullRequest
from gittidy.core.subprocess import execute_gh_command

logger = logging.getLogger(__name__)


class RealGitHub(GitHub):
    """Production implementation using gh CLI.

    All GitHub operations execute actual gh commands via subprocess.
    """

    def get_merged_pr_for_branch(self, repo_root: Path, branch: str) -> MergedPullRequest | None:
        """Get the most recent merged PR authored by the current user from this branch.

        Note: Uses try/except as an acceptable error boundary for handling gh CLI
        availability and authentication. We cannot reliably check gh installation
        and authentication status a priori without duplicating gh's logic.
        """
        cmd = [
            "gh",
            "pr",
            "list",
            "--author",
            "@me",
            "--state",
            "merged",
            "--head",
            branch,
            "--json",
            "number,headRefName,baseRefName,title,url",
            "--limit",
            "1",
        ]
        logger.debug("Querying merged PR: %s", " ".join(cmd))
        try:
            stdout = execute_gh_command(cmd, repo_root)
            return parse_merged_pr_list(stdout)
        except (RuntimeError, json.JSONDecodeError, KeyError, ValueError) as e:
            logger.debug("Merged PR query failed for %s: %s", branch, e)
            return None

    def get_latest_release_version(self, repo_root: Path, repository: str) -> str | None:
        """Get the latest release version via the GitHub REST API."""
        cmd = [
            "gh",
            "api",
            f"repos/{repository}/releases/latest",
            "--jq",
            ".tag_name",
        ]
        try:
            stdout = execute_gh_command(cmd, repo_root)
        except RuntimeError as e:
            logger.debug("Release query failed for %s: %s", repository, e)
            return None
        return parse_release_tag(stdout)
