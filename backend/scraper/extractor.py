"""Content extraction: turns raw HTML into an :class:`Article`.

The pipeline is one deterministic pass with no I/O and no shared state, so
it is safe to call from any number of threads at once:

    parse → title/author → select body → normalise → non-empty check
"""

from __future__ import annotations

from loguru import logger

from backend.scraper.dom import parse_html
from backend.scraper.metadata import extract_author, extract_title
from backend.scraper.models import Article, NoContentDetectedError, RawPage
from backend.scraper.scoring import select_body
from backend.scraper.text import normalize


def extract(raw_html: bytes | str) -> Article:
    """Extract the title, author and body text from *raw_html*.

    Raises:
        ParseFailedError: If the markup cannot be parsed.
        NoContentDetectedError: If no heuristic tier finds any body text.
    """
    document = parse_html(raw_html)

    title = extract_title(document)
    author = extract_author(document)
    content = normalize(select_body(document))

    if not content.strip():
        raise NoContentDetectedError("no article content detected")

    return Article(title=title, author=author, content=content)


def extract_page(raw: RawPage) -> Article:
    """Run :func:`extract` on a fetched page."""
    article = extract(raw.content)
    logger.debug(f"Extracted {len(article.content)} chars from {raw.url}")
    return article
