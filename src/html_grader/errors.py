# src/html_grader/errors.py
from pathlib import Path
from typing import Optional, Union


class GraderError(Exception):
    """Base class for all errors raised by html-grader."""


class ChecksFileError(GraderError):
    """The checks file is not valid JSON or holds invalid selectors."""

    def __init__(self, path: Union[str, Path], reason: str):
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"{self.path}: {reason}")


class FetchError(GraderError):
    """
    A GET request failed at transport level or returned a non-2xx status.
    The message is the server/transport message when one is available.
    """

    def __init__(self, url: str, message: Optional[str] = None, status: Optional[int] = None):
        self.url = url
        self.status = status
        self.message = message or "no response from server"
        super().__init__(self.message)
