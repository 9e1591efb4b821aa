"""Best-effort check for a newer git-tidy release.

Any failure (gh missing, offline, unparsable tag) means "no update known";
the check never affects the run's outcome.
"""

import logging
from pathlib import Path

from packaging.version import InvalidVersion, Version

from gittidy.core.github.abc import GitHub

logger = logging.getLogger(__name__)


def find_newer_version(
    github: GitHub, repo_root: Path, repository: str, current_version: str
) -> str | None:
    """Return the latest released version if it is newer than current_version."""
    latest = github.get_latest_release_version(repo_root, repository)
    if latest is None:
        return None

    try:
        if Version(latest) > Version(current_version):
            return latest
    except InvalidVersion:
        logger.debug("Ignoring unparsable version: latest=%r current=%r", latest, current_version)
    return None
