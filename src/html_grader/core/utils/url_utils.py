# src/html_grader/core/utils/url_utils.py
import logging
from urllib.parse import urlparse

logger = logging.getLogger(__name__)


class UrlUtils:
    """A collection of static methods for URL validation."""

    @staticmethod
    def has_valid_format(url: str) -> bool:
        """
        A URL is accepted as long as it is a single token: no spaces, tabs or
        newlines anywhere in the string. Scheme and host are not enforced.
        """
        if not url or any(ch.isspace() for ch in url):
            logger.debug("Invalid URL format: %r", url)
            return False
        return True

    @staticmethod
    def get_base_url(url: str) -> str | None:
        """
        Extracts the core URL (scheme + netloc) from a given URL, used for log output.
        """
        try:
            parsed_url = urlparse(url)
        except ValueError:
            logger.debug("Could not parse invalid URL: %s", url)
            return None
        if not parsed_url.scheme or not parsed_url.netloc:
            return None
        return f"{parsed_url.scheme}://{parsed_url.netloc}"
