from __future__ import annotations

import logging
import sys

from html_grader.core.handlers.grade_handler import handle_grade
from html_grader.core.managers.config_manager import ConfigManager
from html_grader.core.utils.configure_logging import configure_logger

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    """Entrypoint for running the grader from the command line."""
    if argv is None:
        argv = sys.argv[1:]
    # Default handler first so settings.json problems are logged; handle_grade
    # applies the configured level once arguments are parsed.
    configure_logger()
    settings = ConfigManager()
    code = handle_grade(argv, settings)
    logger.debug("Exiting with status %d", code)
    return code


if __name__ == "__main__":
    sys.exit(main())
