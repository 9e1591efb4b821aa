"""Trunk branch resolution.

The trunk is resolved once per run and then passed, as an immutable
TrunkBranch value, to every later stage.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from gittidy.core.git.abc import Git
from gittidy.core.user_feedback import UserFeedback

logger = logging.getLogger(__name__)

DEFAULT_TRUNK_CANDIDATES = ("master", "main")


class TrunkSource(Enum):
    REQUESTED = "requested"  # --trunk
    CONFIGURED = "configured"  # trunk_branch in config
    DEFAULT = "default"  # master / main search


@dataclass(frozen=True)
class TrunkBranch:
    """The long-lived integration branch selected for this run."""

    name: str
    source: TrunkSource

    def matches(self, branch: str) -> bool:
        return branch == self.name


def resolve_trunk(
    git: Git,
    repo_root: Path,
    feedback: UserFeedback,
    *,
    requested: str | None,
    configured: str | None,
) -> TrunkBranch | None:
    """Pick the trunk branch, first match wins.

    A requested or configured name that doesn't exist locally only produces a
    warning; resolution falls through to the next preference.

    Returns:
        The resolved trunk, or None when no candidate exists locally
    """
    preferences: list[tuple[str, TrunkSource]] = []
    if requested:
        preferences.append((requested, TrunkSource.REQUESTED))
    if configured:
        preferences.append((configured, TrunkSource.CONFIGURED))

    for name, source in preferences:
        if git.branch_exists(repo_root, name):
            logger.debug("Trunk resolved from %s: %s", source.value, name)
            return TrunkBranch(name=name, source=source)
        label = "Requested" if source is TrunkSource.REQUESTED else "Configured"
        feedback.warning(
            f"Warning: {label} trunk branch '{name}' does not exist locally, "
            f"falling back to {' / '.join(DEFAULT_TRUNK_CANDIDATES)}"
        )

    for name in DEFAULT_TRUNK_CANDIDATES:
        if git.branch_exists(repo_root, name):
            logger.debug("Trunk resolved from default search: %s", name)
            return TrunkBranch(name=name, source=TrunkSource.DEFAULT)

    return None
