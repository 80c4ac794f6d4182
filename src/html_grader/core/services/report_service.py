import sys
from typing import Dict, Optional, TextIO

from html_grader.core.services.json_service import to_json


class ReportService:
    """Writes a result mapping as 4-space indented JSON."""

    @staticmethod
    def render(results: Dict[str, bool]) -> str:
        return to_json(results, indent=4)

    @staticmethod
    def emit(results: Dict[str, bool], stream: Optional[TextIO] = None) -> None:
        print(ReportService.render(results), file=stream or sys.stdout)
