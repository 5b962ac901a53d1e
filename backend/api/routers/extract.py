"""Article extraction endpoint.

Routes
------
GET /extract?url=<url>[&key=<api key>]

The API key may also be sent in the ``X-API-Key`` header, which takes
precedence over the query parameter.
"""

from __future__ import annotations

import json
from typing import Any, Optional

from fastapi import APIRouter, Header, HTTPException, Query, Request
from fastapi.responses import JSONResponse
from loguru import logger
from pydantic import BaseModel

from backend.scraper import (
    Article,
    ErrorKind,
    ExtractionError,
    extract_page,
    fetch_url,
)

router = APIRouter()


# ---------------------------------------------------------------------------
# Schemas
# ---------------------------------------------------------------------------

class ArticleResponse(BaseModel):
    title: str
    author: Optional[str] = None
    content: str

    @classmethod
    def from_article(cls, article: Article) -> "ArticleResponse":
        return cls(title=article.title, author=article.author or None, content=article.content)


class PrettyJSONResponse(JSONResponse):
    def render(self, content: Any) -> bytes:
        return json.dumps(content, ensure_ascii=False, indent=2).encode("utf-8")


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

_ERROR_STATUS = {
    ErrorKind.FETCH_FAILED: 502,
    ErrorKind.PARSE_FAILED: 502,
    ErrorKind.NO_CONTENT_DETECTED: 422,
}


def _error(status_code: int, error: str, message: str) -> HTTPException:
    return HTTPException(status_code=status_code, detail={"error": error, "message": message})


# ---------------------------------------------------------------------------
# Endpoint
# ---------------------------------------------------------------------------

@router.get(
    "",
    response_model=ArticleResponse,
    response_model_exclude_none=True,
    response_class=PrettyJSONResponse,
)
def extract_endpoint(
    request: Request,
    url: Optional[str] = Query(None, description="Page to extract."),
    key: str = Query("", description="API key (alternative to the X-API-Key header)."),
    x_api_key: str = Header(""),
) -> ArticleResponse:
    """Fetch *url* and return its title, author and main text."""
    api_key = x_api_key or key

    if not request.app.state.key_validator.is_valid(api_key):
        logger.info("Rejected request with invalid API key")
        raise _error(401, "invalid_api_key", "invalid api key")

    if not request.app.state.rate_limiter.check(api_key):
        logger.info(f"Rate limit exceeded for key {api_key or 'anon'!r}")
        raise _error(429, "rate_limited", "rate limit exceeded")

    if not url or not url.strip():
        raise _error(400, "missing_url", "missing url param")

    try:
        raw = fetch_url(url)
        article = extract_page(raw)
    except ExtractionError as exc:
        logger.warning(f"Extraction of {url!r} failed ({exc.kind.value}): {exc}")
        raise _error(
            _ERROR_STATUS[exc.kind], exc.kind.value, f"failed to extract: {exc}"
        ) from exc

    return ArticleResponse.from_article(article)
