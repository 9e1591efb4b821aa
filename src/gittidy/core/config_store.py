"""Global configuration data structures and loading.

Provides immutable global config data loaded from
~/.config/git-tidy/config.toml (or the path in GIT_TIDY_CONFIG).
Config is loaded once at the CLI entry point; command-line flags take
precedence over these values.
"""

import os
import tomllib
from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path
from typing import TypeVar

CONFIG_PATH_ENV_VAR = "GIT_TIDY_CONFIG"


@dataclass(frozen=True)
class GlobalConfig:
    """Immutable global configuration data.

    Loaded once at CLI entry point and stored in TidyContext.
    All fields are read-only after construction.
    """

    trunk_branch: str | None = None
    default_remote: str = "origin"
    skip_gc: bool = False
    check_for_updates: bool = True
    release_repository: str | None = None  # "owner/name" whose GitHub releases are checked


class ConfigStore(ABC):
    """Abstract interface for global config access.

    Provides dependency injection for global config access, enabling
    in-memory implementations for tests without touching filesystem.
    """

    @abstractmethod
    def load(self) -> GlobalConfig:
        """Load global config.

        Returns:
            GlobalConfig with loaded values (defaults if the file is missing)

        Raises:
            ValueError: If config is malformed or has fields of the wrong type
        """
        ...

    @abstractmethod
    def path(self) -> Path:
        """Get the path to the global config file (for error messages)."""
        ...


T = TypeVar("T")


def _expect_type(
    data: dict[str, object], key: str, expected: type[T], config_path: Path
) -> T | None:
    value = data.get(key)
    if value is None:
        return None
    if not isinstance(value, expected):
        raise ValueError(
            f"Invalid '{key}' in {config_path}: expected {expected.__name__}, "
            f"got {type(value).__name__}"
        )
    return value


class RealConfigStore(ConfigStore):
    """Production implementation that reads the TOML config file."""

    def load(self) -> GlobalConfig:
        config_path = self.path()
        if not config_path.exists():
            return GlobalConfig()

        try:
            data = tomllib.loads(config_path.read_text(encoding="utf-8"))
        except tomllib.TOMLDecodeError as e:
            raise ValueError(f"Malformed config file {config_path}: {e}") from e

        trunk_branch = _expect_type(data, "trunk_branch", str, config_path)
        default_remote = _expect_type(data, "default_remote", str, config_path)
        skip_gc = _expect_type(data, "skip_gc", bool, config_path)
        check_for_updates = _expect_type(data, "check_for_updates", bool, config_path)
        release_repository = _expect_type(data, "release_repository", str, config_path)

        return GlobalConfig(
            trunk_branch=trunk_branch or None,
            default_remote=default_remote or "origin",
            skip_gc=bool(skip_gc),
            check_for_updates=True if check_for_updates is None else check_for_updates,
            release_repository=release_repository or None,
        )

    def path(self) -> Path:
        override = os.environ.get(CONFIG_PATH_ENV_VAR)
        if override:
            return Path(override).expanduser()
        return Path.home() / ".config" / "git-tidy" / "config.toml"


class FakeConfigStore(ConfigStore):
    """In-memory config store for tests."""

    def __init__(
        self, config: GlobalConfig | None = None, *, load_error: str | None = None
    ) -> None:
        """Create FakeConfigStore.

        Args:
            config: Config to return from load(); None behaves like a missing file
            load_error: If set, load() raises ValueError with this message
        """
        self._config = config
        self._load_error = load_error

    def load(self) -> GlobalConfig:
        if self._load_error is not None:
            raise ValueError(self._load_error)
        if self._config is None:
            return GlobalConfig()
        return self._config

    def path(self) -> Path:
        return Path("/fake/git-tidy/config.toml")
