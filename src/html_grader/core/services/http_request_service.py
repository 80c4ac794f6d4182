# src/html_grader/core/services/http_request_service.py
import asyncio
import logging
import time
from typing import Optional

import aiohttp

from html_grader.core.utils.url_utils import UrlUtils
from html_grader.model import DEFAULT_USER_AGENT, FetchResult

logger = logging.getLogger(__name__)


class HttpRequestService:
    """
    Executes single GET requests over an aiohttp session.
    One attempt per request: no retries, and no timeout unless one is configured.
    """

    def __init__(self, timeout: Optional[float] = None, user_agent: str = DEFAULT_USER_AGENT):
        self.timeout = timeout
        self.user_agent = user_agent
        self.session: Optional[aiohttp.ClientSession] = None

    async def __aenter__(self):
        await self.initialize()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()

    async def initialize(self):
        if not self.session or self.session.closed:
            timeout_obj = aiohttp.ClientTimeout(total=self.timeout)
            default_headers = {
                'Accept-Encoding': 'gzip, deflate',
                'User-Agent': self.user_agent
            }
            self.session = aiohttp.ClientSession(
                timeout=timeout_obj, headers=default_headers
            )
            logger.debug("HttpRequestService: Session initialized (timeout=%s).", self.timeout)

    async def close(self):
        if self.session and not self.session.closed:
            await self.session.close()
            logger.debug("HttpRequestService: Session closed.")

    async def get(self, url: str) -> FetchResult:
        """
        Fetches `url` and returns the outcome; transport failures are reported
        with status -1 instead of being raised.
        """
        start_time = time.perf_counter()

        if not self.session or self.session.closed:
            await self.initialize()

        try:
            async with self.session.get(url) as response:
                status = response.status
                content = await response.read()
                error = None
                if not 200 <= status < 300:
                    error = f"{status} {response.reason or ''}".strip()
                result = FetchResult(
                    status=status,
                    content=content,
                    error=error,
                    final_url=str(response.url),
                )
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            logger.debug("GET %s failed: %r", url, e)
            result = FetchResult(status=-1, error=str(e) or None)

        result.elapsed_time = round(time.perf_counter() - start_time, 4)
        logger.info(
            "GET %s -> %s in %.3fs", UrlUtils.get_base_url(url) or url, result.status, result.elapsed_time
        )
        return result

