# src/html_grader/api.py
"""
Programmatic entry points, one per CLI branch. Errors propagate to the caller:
ChecksFileError for a bad checks file, FetchError for a failed GET,
FileNotFoundError for a missing HTML file.
"""
from pathlib import Path
from typing import Dict, Optional, Union

from bs4 import BeautifulSoup

from html_grader.core.services.checker_service import CheckerService
from html_grader.core.services.checks_loader_service import ChecksLoaderService
from html_grader.core.services.document_loader_service import DocumentLoaderService
from html_grader.core.services.http_request_service import HttpRequestService
from html_grader.model import DEFAULT_USER_AGENT

PathLike = Union[str, Path]


def check_html(document: BeautifulSoup, checks_file: PathLike) -> Dict[str, bool]:
    return CheckerService.check(document, ChecksLoaderService.load(checks_file))


def check_html_file(html_file: PathLike, checks_file: PathLike) -> Dict[str, bool]:
    """Grades a local HTML file against the selectors in `checks_file`."""
    document = DocumentLoaderService().from_file(html_file)
    return check_html(document, checks_file)


async def check_html_url(
    url: str,
    checks_file: PathLike,
    timeout: Optional[float] = None,
    user_agent: str = DEFAULT_USER_AGENT,
) -> Dict[str, bool]:
    """Fetches `url` once and grades the response body against `checks_file`."""
    # Load checks first so a bad checks file never costs a request.
    check_list = ChecksLoaderService.load(checks_file)
    loader = DocumentLoaderService(HttpRequestService(timeout=timeout, user_agent=user_agent))
    document = await loader.from_url(url)
    return CheckerService.check(document, check_list)
