import logging
import os

from gittidy.cli.commands.tidy import tidy_cmd
from gittidy.cli.constants import DEBUG_ENV_VAR

# Enable debug logging if GIT_TIDY_DEBUG environment variable is set
if os.getenv(DEBUG_ENV_VAR):
    logging.basicConfig(level=logging.DEBUG, format="[DEBUG %(name)s:%(lineno)d] %(message)s")

cli = tidy_cmd


def main() -> None:
    """CLI entry point used by the `git-tidy` console script."""
    cli()
