from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Union

from bs4 import BeautifulSoup

from html_grader.core.services.http_request_service import HttpRequestService
from html_grader.errors import FetchError

logger = logging.getLogger(__name__)


class DocumentLoaderService:
    """
    Turns a local file or the body of a GET response into a queryable
    BeautifulSoup tree. Both sources go through `from_text`, so the same
    markup always yields the same tree.
    """

    def __init__(self, http_service: Optional[HttpRequestService] = None):
        self.http_service = http_service

    @staticmethod
    def from_text(html: Union[str, bytes]) -> BeautifulSoup:
        return BeautifulSoup(html, "html.parser")

    def from_file(self, path: Union[str, Path]) -> BeautifulSoup:
        """Parses a local HTML file. The caller has already checked that it exists."""
        data = Path(path).read_bytes()
        logger.debug("Read %d bytes from %s", len(data), path)
        return self.from_text(data)

    async def from_url(self, url: str) -> BeautifulSoup:
        """
        Performs one GET against `url` and parses the body.

        Raises:
            FetchError: on transport failure or a non-2xx response.
        """
        service = self.http_service or HttpRequestService()
        async with service:
            result = await service.get(url)

        if not result.ok:
            raise FetchError(url, result.error, result.status)
        return self.from_text(result.content)
