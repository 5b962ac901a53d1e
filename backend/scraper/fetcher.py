"""HTTP fetcher: one GET with a timeout and a response size ceiling."""

from __future__ import annotations

import httpx
from loguru import logger

from backend.config import settings
from backend.scraper.models import FetchError, RawPage


def _normalize_url(url: str) -> str:
    url = url.strip()
    if not url.startswith("http"):
        url = "http://" + url
    return url


def _read_capped(response: httpx.Response, limit: int) -> bytes:
    """Read the streamed body, silently dropping everything past *limit* bytes."""
    buf = bytearray()
    for chunk in response.iter_bytes():
        remaining = limit - len(buf)
        if remaining <= 0:
            break
        buf.extend(chunk[:remaining])
    return bytes(buf)


def fetch_url(url: str) -> RawPage:
    """Fetch *url* and return a :class:`RawPage`.

    A URL without an ``http`` scheme prefix gets ``http://`` prepended.
    Redirects are followed.  Bodies larger than
    ``settings.max_response_bytes`` are truncated.

    Raises:
        FetchError: On transport failure, timeout, or a 4xx/5xx response.
    """
    url = _normalize_url(url)
    logger.debug(f"Fetching {url}")

    try:
        with httpx.Client(
            headers={"User-Agent": settings.user_agent},
            timeout=settings.request_timeout,
            follow_redirects=True,
        ) as client:
            with client.stream("GET", url) as response:
                if response.status_code >= 400:
                    raise FetchError(f"bad upstream status {response.status_code}")
                content = _read_capped(response, settings.max_response_bytes)
                status_code = response.status_code
    except httpx.HTTPError as exc:
        raise FetchError(f"request to {url} failed: {exc}") from exc

    return RawPage(url=url, content=content, status_code=status_code)
