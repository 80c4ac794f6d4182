# src/html_grader/core/utils/path_utils.py
import logging
from pathlib import Path
from typing import Union

logger = logging.getLogger(__name__)


class PathUtils:
    """
    A central utility for resolving package paths and validating user-supplied ones.
    """

    @staticmethod
    def get_package_root() -> Path:
        """Returns the directory of the installed html_grader package."""
        return Path(__file__).resolve().parents[2]

    @staticmethod
    def get_settings_file() -> Path:
        return PathUtils.get_package_root() / "settings.json"

    @staticmethod
    def file_exists(path: Union[str, Path]) -> bool:
        """True if `path` points at an existing regular file."""
        exists = Path(path).is_file()
        if not exists:
            logger.debug("File check failed for %s", path)
        return exists
