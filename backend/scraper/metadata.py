"""Title and author lookup from the usual places in a page."""

from __future__ import annotations

from backend.scraper.dom import Document, text_content
from backend.scraper.selector import compile_selector, first

_OG_TITLE = compile_selector("meta[property='og:title']")
_TITLE = compile_selector("title")
_META_AUTHOR = compile_selector("meta[name='author']")

# Tried one at a time, in this order.
AUTHOR_SELECTORS = tuple(compile_selector(s) for s in (".author", ".byline", "[rel=author]"))


def extract_title(document: Document) -> str:
    """Return the ``og:title`` meta content, else the ``<title>`` text, else ``""``."""
    meta = first(document, _OG_TITLE)
    if meta is not None:
        title = meta.get("content", "").strip()
        if title:
            return title
    title_el = first(document, _TITLE)
    if title_el is not None:
        return text_content(title_el).strip()
    return ""


def extract_author(document: Document) -> str:
    """Return the author meta content, else the first byline-like element's text.

    Only the first element matching each selector is looked at; if its text
    is blank the next selector is tried.
    """
    meta = first(document, _META_AUTHOR)
    if meta is not None:
        author = meta.get("content", "").strip()
        if author:
            return author
    for selector in AUTHOR_SELECTORS:
        el = first(document, selector)
        if el is None:
            continue
        author = text_content(el).strip()
        if author:
            return author
    return ""
