"""Shared constants for git-tidy CLI commands."""

# Environment variable enabling DEBUG logging
DEBUG_ENV_VAR = "GIT_TIDY_DEBUG"
