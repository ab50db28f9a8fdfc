"""Tests for the HTTP session: cookie loading, headers, and error mapping."""

import json
from collections.abc import Callable
from pathlib import Path
from typing import Any

import httpx
import pytest

from src.core.config import HttpConfig
from src.transport.session import (
    FetchError,
    HttpSession,
    NotFoundError,
    _load_cookies,
    build_headers,
)


def _session(
    handler: Callable[[httpx.Request], httpx.Response], **config: Any,
) -> HttpSession:
    return HttpSession(HttpConfig(**config), transport=httpx.MockTransport(handler))


# ---------------------------------------------------------------------------
# TestLoadCookies
# ---------------------------------------------------------------------------


class TestLoadCookies:
    """Cookie file loading: various success and failure paths."""

    def test_valid_cookie_file(self, tmp_path: Path) -> None:
        cookie_file = tmp_path / "cookies.json"
        cookies = [
            {"name": "li_at", "value": "abc123", "domain": ".linkedin.com", "path": "/"},
            {"name": "JSESSIONID", "value": "ajax:1", "domain": ".linkedin.com", "path": "/"},
        ]
        cookie_file.write_text(json.dumps(cookies))
        assert _load_cookies(str(cookie_file)) == {"li_at": "abc123", "JSESSIONID": "ajax:1"}

    def test_no_path_returns_empty(self) -> None:
        assert _load_cookies(None) == {}

    def test_missing_file_returns_empty(self) -> None:
        assert _load_cookies("/nonexistent/path/cookies.json") == {}

    def test_not_array_returns_empty(self, tmp_path: Path) -> None:
        cookie_file = tmp_path / "cookies.json"
        cookie_file.write_text('{"key": "value"}')
        assert _load_cookies(str(cookie_file)) == {}

    def test_invalid_json_returns_empty(self, tmp_path: Path) -> None:
        cookie_file = tmp_path / "cookies.json"
        cookie_file.write_text("not-json{{{")
        assert _load_cookies(str(cookie_file)) == {}

    def test_malformed_entries_skipped(self, tmp_path: Path) -> None:
        cookie_file = tmp_path / "cookies.json"
        cookie_file.write_text(json.dumps([{"name": "only-name"}, "junk", {"name": "a", "value": 1}]))
        assert _load_cookies(str(cookie_file)) == {"a": "1"}


# ---------------------------------------------------------------------------
# TestHeaders
# ---------------------------------------------------------------------------


class TestBuildHeaders:
    def test_uses_config(self) -> None:
        headers = build_headers(HttpConfig(user_agent="test-agent", accept_language="de-DE"))
        assert headers["User-Agent"] == "test-agent"
        assert headers["Accept-Language"] == "de-DE"
        assert headers["Accept"].startswith("text/html")


# ---------------------------------------------------------------------------
# TestHttpSession
# ---------------------------------------------------------------------------


class TestHttpSession:
    def test_client_before_enter_raises(self) -> None:
        session = HttpSession(HttpConfig())
        with pytest.raises(RuntimeError, match="not entered"):
            _ = session.client

    async def test_get_text_success(self) -> None:
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, text="<html>ok</html>")

        async with _session(handler, user_agent="test-agent") as session:
            body = await session.get_text("/jobs/view/1")

        assert body == "<html>ok</html>"
        assert str(seen[0].url) == "https://www.linkedin.com/jobs/view/1"
        assert seen[0].headers["user-agent"] == "test-agent"

    async def test_client_closed_after_exit(self) -> None:
        session = _session(lambda request: httpx.Response(200))
        async with session:
            pass
        with pytest.raises(RuntimeError):
            _ = session.client

    async def test_404_raises_not_found(self) -> None:
        async with _session(lambda request: httpx.Response(404)) as session:
            with pytest.raises(NotFoundError) as exc_info:
                await session.get_text("/company/nope")
        assert exc_info.value.status_code == 404

    async def test_server_error_raises_fetch_error(self) -> None:
        async with _session(lambda request: httpx.Response(500)) as session:
            with pytest.raises(FetchError) as exc_info:
                await session.get_text("/jobs/view/1")
        assert not isinstance(exc_info.value, NotFoundError)
        assert exc_info.value.status_code == 500

    async def test_transport_error_raises_fetch_error(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            msg = "connection refused"
            raise httpx.ConnectError(msg, request=request)

        async with _session(handler) as session:
            with pytest.raises(FetchError, match="connection refused") as exc_info:
                await session.get_text("/jobs/view/1")
        assert exc_info.value.status_code is None

    async def test_cookies_sent(self, tmp_path: Path) -> None:
        cookie_file = tmp_path / "cookies.json"
        cookie_file.write_text(json.dumps([{"name": "li_at", "value": "secret"}]))
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, text="")

        async with _session(handler, cookies_path=str(cookie_file)) as session:
            await session.get_text("/search/results/companies/?keywords=acme")

        assert "li_at=secret" in seen[0].headers["cookie"]
