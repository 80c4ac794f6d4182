# src/html_grader/core/services/checks_loader_service.py
import json
import logging
from pathlib import Path
from typing import Union

from pydantic import ValidationError

from html_grader.core.services.json_service import read_json_file
from html_grader.errors import ChecksFileError
from html_grader.model import CheckList

logger = logging.getLogger(__name__)


class ChecksLoaderService:
    """Reads a checks file (a JSON array of CSS selectors) into a CheckList."""

    @staticmethod
    def load(path: Union[str, Path]) -> CheckList:
        try:
            raw = read_json_file(path)
        except json.JSONDecodeError as e:
            raise ChecksFileError(path, f"not valid JSON ({e})") from e
        except UnicodeDecodeError as e:
            raise ChecksFileError(path, f"not UTF-8 text ({e})") from e

        try:
            check_list = CheckList(selectors=raw)
        except ValidationError as e:
            reasons = "; ".join(err["msg"] for err in e.errors())
            raise ChecksFileError(path, reasons) from e

        logger.debug("Loaded %d selectors from %s", len(check_list.selectors), path)
        return check_list
