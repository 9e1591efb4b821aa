"""Git operations subpackage.

This subpackage provides abstractions over git operations with support for
testing via fakes.
"""

from gittidy.core.git.abc import Git
from gittidy.core.git.real import RealGit

__all__ = [
    "Git",
    "RealGit",
]
