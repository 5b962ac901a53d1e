"""Tests for the HTTP fetcher.

Mocking strategy:
- ``respx`` patches ``httpx`` at the transport layer so no real network calls
  are made during ``fetch_url`` tests.
- ``settings`` fields are monkeypatched to exercise the size ceiling and the
  User-Agent header.
"""

from __future__ import annotations

import httpx
import pytest
import respx

from backend.scraper.fetcher import _normalize_url, fetch_url
from backend.scraper.models import ErrorKind, FetchError, RawPage

_SIMPLE_HTML = """\
<!DOCTYPE html>
<html>
<head><title>Test Page</title></head>
<body><main><p>This is the main content of the test page.</p></main></body>
</html>
"""


class TestNormalizeUrl:
    def test_keeps_http_and_https(self) -> None:
        assert _normalize_url("https://example.com") == "https://example.com"
        assert _normalize_url("http://example.com") == "http://example.com"

    def test_prefixes_schemeless_url(self) -> None:
        assert _normalize_url("example.com/a") == "http://example.com/a"

    def test_strips_surrounding_whitespace(self) -> None:
        assert _normalize_url("  https://example.com  ") == "https://example.com"


class TestFetchUrl:
    def test_successful_fetch_returns_raw_page(self) -> None:
        with respx.mock:
            respx.get("https://example.com/article").mock(
                return_value=httpx.Response(200, text=_SIMPLE_HTML)
            )
            raw = fetch_url("https://example.com/article")

        assert isinstance(raw, RawPage)
        assert raw.url == "https://example.com/article"
        assert raw.status_code == 200
        assert b"<title>Test Page</title>" in raw.content

    def test_schemeless_url_is_fetched_over_http(self) -> None:
        with respx.mock:
            route = respx.get("http://example.com/a").mock(
                return_value=httpx.Response(200, text=_SIMPLE_HTML)
            )
            raw = fetch_url("example.com/a")

        assert route.called
        assert raw.url == "http://example.com/a"

    def test_sends_configured_user_agent(self, monkeypatch) -> None:
        monkeypatch.setattr("backend.scraper.fetcher.settings.user_agent", "test-agent/0.1")
        with respx.mock:
            route = respx.get("https://example.com/").mock(
                return_value=httpx.Response(200, text=_SIMPLE_HTML)
            )
            fetch_url("https://example.com/")

        assert route.calls.last.request.headers["User-Agent"] == "test-agent/0.1"

    def test_follows_redirects(self) -> None:
        with respx.mock:
            respx.get("https://example.com/old").mock(
                return_value=httpx.Response(301, headers={"Location": "https://example.com/new"})
            )
            respx.get("https://example.com/new").mock(
                return_value=httpx.Response(200, text=_SIMPLE_HTML)
            )
            raw = fetch_url("https://example.com/old")

        assert raw.status_code == 200
        assert b"main content" in raw.content

    def test_body_is_truncated_at_ceiling(self, monkeypatch) -> None:
        monkeypatch.setattr("backend.scraper.fetcher.settings.max_response_bytes", 16)
        with respx.mock:
            respx.get("https://example.com/big").mock(
                return_value=httpx.Response(200, content=b"x" * 1000)
            )
            raw = fetch_url("https://example.com/big")

        assert raw.content == b"x" * 16

    def test_http_error_status_raises_fetch_error(self) -> None:
        with respx.mock:
            respx.get("https://example.com/missing").mock(
                return_value=httpx.Response(404, text="Not Found")
            )
            with pytest.raises(FetchError) as excinfo:
                fetch_url("https://example.com/missing")

        assert excinfo.value.kind is ErrorKind.FETCH_FAILED
        assert "404" in str(excinfo.value)

    def test_transport_error_raises_fetch_error(self) -> None:
        with respx.mock:
            respx.get("https://unreachable.example/").mock(
                side_effect=httpx.ConnectError("connection refused")
            )
            with pytest.raises(FetchError):
                fetch_url("https://unreachable.example/")

    def test_timeout_raises_fetch_error(self) -> None:
        with respx.mock:
            respx.get("https://slow.example/").mock(side_effect=httpx.ReadTimeout("too slow"))
            with pytest.raises(FetchError):
                fetch_url("https://slow.example/")
