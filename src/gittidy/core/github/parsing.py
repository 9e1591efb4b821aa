"""Parsing helpers for gh CLI JSON output."""

import json

from gittidy.core.github.types import MergedPullRequest


def parse_merged_pr_list(stdout: str) -> MergedPullRequest | None:
    """Parse `gh pr list --json number,headRefName,baseRefName,title,url` output.

    gh returns a JSON array; with `--limit 1` it holds at most one entry.

    Returns:
        The first pull request, or None for an empty list

    Raises:
        json.JSONDecodeError: If stdout is not JSON
        KeyError: If a required field is missing
    """
    data = json.loads(stdout)
    if not isinstance(data, list) or not data:
        return None

    entry = data[0]
    return MergedPullRequest(
        number=int(entry["number"]),
        head_ref_name=entry["headRefName"],
        base_ref_name=entry.get("baseRefName", ""),
        title=entry.get("title"),
        url=entry.get("url", ""),
    )


def parse_release_tag(tag: str) -> str | None:
    """Turn a release tag such as "v1.4.0" into a bare version string."""
    stripped = tag.strip()
    if not stripped:
        return None
    if stripped[0] in ("v", "V"):
        stripped = stripped[1:]
    return stripped or None
