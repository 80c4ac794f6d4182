# tests/core/services/test_url_grading.py
import asyncio
import socket

import pytest
from aiohttp import test_utils, web

from html_grader.api import check_html_file, check_html_url
from html_grader.core.services.http_request_service import HttpRequestService
from html_grader.errors import ChecksFileError, FetchError


def _make_app(html, status=200):
    async def index(request):
        return web.Response(text=html, content_type="text/html", status=status)

    async def moved(request):
        raise web.HTTPFound("/")

    app = web.Application()
    app.router.add_get("/", index)
    app.router.add_get("/old", moved)
    return app


def _serve(html, coro_factory, status=200):
    """Runs a local aiohttp server and awaits coro_factory(base_url) against it."""
    async def _run():
        async with test_utils.TestServer(_make_app(html, status)) as server:
            return await coro_factory(str(server.make_url("/")).rstrip("/"))
    return asyncio.run(_run())


def _closed_port_url():
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as s:
        s.bind(("127.0.0.1", 0))
        port = s.getsockname()[1]
    return f"http://127.0.0.1:{port}/"


def test_url_matches_file_result(rich_html, write_checks, write_html):
    checks = write_checks(["#header", "a[href]", "footer", "title"])
    from_url = _serve(rich_html, lambda base: check_html_url(base + "/", checks))
    from_file = check_html_file(write_html(rich_html), checks)

    assert from_url == from_file
    assert list(from_url) == ["#header", "a[href]", "footer", "title"]


def test_redirect_is_followed(sample_html, write_checks):
    checks = write_checks(["div"])
    assert _serve(sample_html, lambda base: check_html_url(base + "/old", checks)) == {"div": True}


def test_error_response_raises_fetch_error(sample_html, write_checks):
    checks = write_checks(["div"])
    with pytest.raises(FetchError) as exc_info:
        _serve(sample_html, lambda base: check_html_url(base + "/", checks), status=500)
    assert exc_info.value.status == 500
    assert exc_info.value.message == "500 Internal Server Error"


def test_unreachable_server_raises_fetch_error(write_checks):
    with pytest.raises(FetchError) as exc_info:
        asyncio.run(check_html_url(_closed_port_url(), write_checks(["div"])))
    assert exc_info.value.status == -1
    assert exc_info.value.message


def test_bad_checks_file_skips_request(write_checks):
    """The checks file is validated before any request goes out."""
    with pytest.raises(ChecksFileError):
        asyncio.run(check_html_url(_closed_port_url(), write_checks("[")))


def test_http_service_reports_status_and_user_agent(write_checks):
    seen = {}

    async def index(request):
        seen["ua"] = request.headers.get("User-Agent")
        return web.Response(text="<p>hi</p>", content_type="text/html")

    async def _run():
        app = web.Application()
        app.router.add_get("/", index)
        async with test_utils.TestServer(app) as server:
            async with HttpRequestService(timeout=5, user_agent="grader-test/0.1") as service:
                return await service.get(str(server.make_url("/")))

    result = asyncio.run(_run())
    assert result.ok
    assert result.status == 200
    assert result.content == b"<p>hi</p>"
    assert result.error is None
    assert seen["ua"] == "grader-test/0.1"


def test_non_utf8_body_matches_file_result(tmp_path, write_checks):
    """The response body reaches the parser as bytes, so <meta charset> is honoured."""
    body = b'<html><head><meta charset="windows-1252"></head><body><p>caf\xe9</p></body></html>'
    html_file = tmp_path / "index.html"
    html_file.write_bytes(body)
    checks = write_checks(['p:-soup-contains("café")', "p"])

    async def index(request):
        return web.Response(body=body, content_type="text/html")

    async def _run():
        app = web.Application()
        app.router.add_get("/", index)
        async with test_utils.TestServer(app) as server:
            return await check_html_url(str(server.make_url("/")), checks)

    from_url = asyncio.run(_run())
    from_file = check_html_file(html_file, checks)

    assert from_url == from_file
    assert from_url['p:-soup-contains("café")'] is True
