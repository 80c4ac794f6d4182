# ============================================
# file: src/html_grader/core/handlers/grade_handler.py
# ============================================
from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from pathlib import Path
from typing import List, Optional

from html_grader.api import check_html_file, check_html_url
from html_grader.core.managers.config_manager import ConfigManager
from html_grader.core.services.report_service import ReportService
from html_grader.core.utils.configure_logging import configure_logger
from html_grader.core.utils.path_utils import PathUtils
from html_grader.core.utils.url_utils import UrlUtils
from html_grader.errors import ChecksFileError, FetchError
from html_grader.model import (
    DEFAULT_CHECKS_FILE,
    DEFAULT_HTML_FILE,
    DEFAULT_URL,
    DEFAULT_USER_AGENT,
    GraderConfig,
)

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_INVALID_INPUT = 1
EXIT_NETWORK_FAILURE = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="html-grader",
        description="Check an HTML file or URL for the presence of CSS selectors.",
    )
    parser.add_argument("-c", "--checks", default=DEFAULT_CHECKS_FILE, metavar="PATH",
                        help=f"Path to the JSON array of selectors (default: {DEFAULT_CHECKS_FILE}).")
    parser.add_argument("-f", "--file", nargs="?", const=DEFAULT_HTML_FILE, default=None, metavar="PATH",
                        help=f"Path to a local HTML file (default when given bare: {DEFAULT_HTML_FILE}).")
    parser.add_argument("-u", "--url", nargs="?", const=DEFAULT_URL, default=None,
                        help=f"URL to fetch and check (default when given bare: {DEFAULT_URL}).")
    parser.add_argument("--timeout", type=float, default=None,
                        help="Total GET timeout in seconds (default: settings.json http.timeout, else none).")
    parser.add_argument("--log-level", default=None,
                        help="Logging level, e.g. DEBUG or INFO (default: settings.json debug.level).")
    return parser


def build_config(pargs: argparse.Namespace, settings: ConfigManager) -> GraderConfig:
    """Merges parsed arguments with settings.json into one run configuration."""
    timeout = pargs.timeout if pargs.timeout is not None else settings.get_nested("http.timeout")
    return GraderConfig(
        checks_file=Path(pargs.checks),
        html_file=Path(pargs.file) if pargs.file is not None else None,
        url=pargs.url,
        timeout=timeout,
        user_agent=settings.get_nested("http.user_agent", DEFAULT_USER_AGENT),
    )


def _assert_file_exists(path: Path) -> bool:
    if not PathUtils.file_exists(path):
        print(f"{path} does not exist. Exiting.")
        return False
    return True


def run_file_check(config: GraderConfig) -> int:
    if not _assert_file_exists(config.checks_file) or not _assert_file_exists(config.html_file):
        return EXIT_INVALID_INPUT

    try:
        results = check_html_file(config.html_file, config.checks_file)
    except ChecksFileError as e:
        logger.error("Checks file rejected: %s", e)
        print(f"❌ Invalid checks file: {e}")
        return EXIT_INVALID_INPUT

    ReportService.emit(results)
    return EXIT_OK


def run_url_check(config: GraderConfig) -> int:
    if not UrlUtils.has_valid_format(config.url):
        print(f"{config.url} url is in invalid format. Exiting.")
        return EXIT_INVALID_INPUT
    if not _assert_file_exists(config.checks_file):
        return EXIT_INVALID_INPUT

    try:
        results = asyncio.run(check_html_url(
            config.url,
            config.checks_file,
            timeout=config.timeout,
            user_agent=config.user_agent,
        ))
    except ChecksFileError as e:
        logger.error("Checks file rejected: %s", e)
        print(f"❌ Invalid checks file: {e}")
        return EXIT_INVALID_INPUT
    except FetchError as e:
        logger.error("Fetching %s failed (status %s): %s", e.url, e.status, e.message)
        print(f"Error: {e.message}", file=sys.stderr)
        return EXIT_NETWORK_FAILURE

    ReportService.emit(results)
    return EXIT_OK


def handle_grade(args: List[str], settings: Optional[ConfigManager] = None) -> int:
    """Parses `args`, then grades the file (preferred) or the URL. Returns the exit code."""
    parser = build_parser()
    try:
        pargs = parser.parse_args(args)
    except SystemExit as e:
        return EXIT_OK if e.code == 0 else EXIT_INVALID_INPUT

    settings = settings or ConfigManager()
    configure_logger(pargs.log_level or settings.get_nested("debug.level", "WARNING"))
    config = build_config(pargs, settings)
    logger.debug("Run configuration: %s", config)

    if config.html_file is not None:
        return run_file_check(config)
    if config.url is not None:
        return run_url_check(config)

    print("No file or url specified, exit.")
    return EXIT_INVALID_INPUT
