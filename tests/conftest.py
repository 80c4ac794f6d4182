# tests/conftest.py
import json

import pytest

SAMPLE_HTML = "<html><body><div>x</div></body></html>"

RICH_HTML = """<!DOCTYPE html>
<html>
<head><title>Grader</title></head>
<body>
  <div id="header"><h1>Welcome</h1></div>
  <ul class="nav"><li><a href="/about">About</a></li></ul>
  <p class="lead">Text</p>
</body>
</html>
"""


@pytest.fixture
def write_checks(tmp_path):
    """Writes a checks file into tmp_path; accepts a list (dumped as JSON) or raw text."""
    def _write(content, name="checks.json"):
        path = tmp_path / name
        path.write_text(content if isinstance(content, str) else json.dumps(content), encoding="utf-8")
        return path
    return _write


@pytest.fixture
def write_html(tmp_path):
    def _write(content=SAMPLE_HTML, name="index.html"):
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path
    return _write


@pytest.fixture
def sample_html():
    return SAMPLE_HTML


@pytest.fixture
def rich_html():
    return RICH_HTML
