# src/html_grader/model.py
from pathlib import Path
from typing import List, Optional

import soupsieve
from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_CHECKS_FILE = "checks.json"
DEFAULT_HTML_FILE = "index.html"
DEFAULT_URL = "http://localhost:5000"
DEFAULT_USER_AGENT = "html-grader/1.0"


class CheckList(BaseModel):
    """The selectors to evaluate against one document."""
    model_config = ConfigDict(frozen=True)

    selectors: List[str]

    @field_validator("selectors", mode="before")
    @classmethod
    def _require_list(cls, v):
        if not isinstance(v, list):
            raise ValueError(f"expected a JSON array of selectors, got {type(v).__name__}")
        return v

    @field_validator("selectors", mode="after")
    @classmethod
    def _validate_selectors(cls, v: List[str]) -> List[str]:
        for index, selector in enumerate(v):
            if not selector.strip():
                raise ValueError(f"selector at index {index} is empty")
            try:
                soupsieve.compile(selector)
            except (soupsieve.SelectorSyntaxError, NotImplementedError) as e:
                raise ValueError(f"selector {selector!r} is malformed or unsupported: {e}") from e
        return v

    def sorted_selectors(self) -> List[str]:
        return sorted(self.selectors)


class GraderConfig(BaseModel):
    """Options of a single run, built once from the command line and settings.json."""
    model_config = ConfigDict(frozen=True)

    checks_file: Path = Field(default=Path(DEFAULT_CHECKS_FILE))
    html_file: Optional[Path] = None
    url: Optional[str] = None
    timeout: Optional[float] = Field(default=None, description="Total GET timeout in seconds; None waits forever.")
    user_agent: str = DEFAULT_USER_AGENT


class FetchResult(BaseModel):
    status: int
    content: Optional[bytes] = Field(default=None, description="Raw body; decoding is left to the HTML parser.")
    error: Optional[str] = None
    final_url: Optional[str] = None
    elapsed_time: float = 0.0

    @property
    def ok(self) -> bool:
        return 200 <= self.status < 300 and self.content is not None
