"""Application context with dependency injection."""

import logging
import os
from dataclasses import dataclass
from pathlib import Path

import click

from gittidy.cli.output import user_output
from gittidy.core.config_store import ConfigStore, GlobalConfig, RealConfigStore
from gittidy.core.git.abc import Git
from gittidy.core.git.real import RealGit
from gittidy.core.github.abc import GitHub
from gittidy.core.github.real import RealGitHub
from gittidy.core.prompt import Prompter, RealPrompter
from gittidy.core.user_feedback import InteractiveFeedback, UserFeedback

logger = logging.getLogger(__name__)

DEV_MODE_ENV_VAR = "GIT_TIDY_DEV"


@dataclass(frozen=True)
class TidyContext:
    """Immutable context holding all dependencies for a tidy run.

    Created at CLI entry point and threaded through the application.
    Frozen to prevent accidental modification at runtime.
    """

    git: Git
    github: GitHub
    prompter: Prompter
    feedback: UserFeedback
    cwd: Path  # Current working directory at CLI invocation
    global_config: GlobalConfig
    dev_mode: bool  # Suppresses the sync stage's checkout/pull side effects

    @staticmethod
    def for_test(
        git: Git | None = None,
        github: GitHub | None = None,
        prompter: Prompter | None = None,
        feedback: UserFeedback | None = None,
        cwd: Path | None = None,
        global_config: GlobalConfig | None = None,
        dev_mode: bool = False,
    ) -> "TidyContext":
        """Create test context with optional pre-configured integration classes.

        Unspecified integrations default to empty fakes; the prompter defaults
        to one that answers "no" to everything, so nothing is deleted unless a
        test asks for it.

        Example:
            >>> git = FakeGit(repo_root=Path("/repo"), local_branches=["master"])
            >>> ctx = TidyContext.for_test(git=git, prompter=FakePrompter(default="y"))
        """
        from tests.fakes.prompt import FakePrompter
        from tests.fakes.user_feedback import FakeUserFeedback

        from gittidy.core.git.fake import FakeGit
        from gittidy.core.github.fake import FakeGitHub

        if git is None:
            git = FakeGit(repo_root=Path("/test/repo"))

        if github is None:
            github = FakeGitHub()

        if prompter is None:
            prompter = FakePrompter()

        if feedback is None:
            feedback = FakeUserFeedback()

        if global_config is None:
            global_config = GlobalConfig(check_for_updates=False)

        return TidyContext(
            git=git,
            github=github,
            prompter=prompter,
            feedback=feedback,
            cwd=cwd or Path("/test/repo"),
            global_config=global_config,
            dev_mode=dev_mode,
        )


def safe_cwd() -> tuple[Path | None, str | None]:
    """Get current working directory, detecting if it no longer exists.

    Returns:
        (path, None) on success, (None, error_message) if the directory is gone
    """
    try:
        return (Path.cwd(), None)
    except (FileNotFoundError, OSError):
        return (None, "Current working directory no longer exists")


def create_context(config_store: ConfigStore | None = None) -> TidyContext:
    """Create production context with real implementations.

    Called at CLI entry point to create the context for the entire
    command execution. config_store defaults to the TOML file store.
    """
    # 1. Capture cwd (no deps)
    cwd_result, error_msg = safe_cwd()
    if cwd_result is None:
        message = error_msg or "Current working directory is unavailable"
        user_output(click.style("Error: ", fg="red") + message)
        raise SystemExit(1)

    # 2. Load global config (defaults when the file doesn't exist)
    if config_store is None:
        config_store = RealConfigStore()
    try:
        global_config = config_store.load()
    except ValueError as e:
        user_output(click.style("Error: ", fg="red") + str(e))
        raise SystemExit(1) from e
    logger.debug("Loaded config from %s: %s", config_store.path(), global_config)

    # 3. Create context with all values
    return TidyContext(
        git=RealGit(),
        github=RealGitHub(),
        prompter=RealPrompter(),
        feedback=InteractiveFeedback(),
        cwd=cwd_result,
        global_config=global_config,
        dev_mode=bool(os.environ.get(DEV_MODE_ENV_VAR)),
    )
