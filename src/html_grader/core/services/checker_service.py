# src/html_grader/core/services/checker_service.py
import logging
from typing import Dict

from bs4 import BeautifulSoup

from html_grader.model import CheckList

logger = logging.getLogger(__name__)


class CheckerService:
    """Evaluates a CheckList against a parsed document."""

    @staticmethod
    def check(document: BeautifulSoup, check_list: CheckList) -> Dict[str, bool]:
        """
        Maps every selector (in sorted order) to whether at least one element
        matches it. Duplicate selectors collapse into one key.
        """
        results: Dict[str, bool] = {}
        for selector in check_list.sorted_selectors():
            results[selector] = document.select_one(selector) is not None

        logger.debug(
            "%d/%d selectors present", sum(results.values()), len(results)
        )
        return results
