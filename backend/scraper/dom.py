"""Parsed page wrapper over BeautifulSoup.

The extraction heuristics only ever read the tree.  bs4 walks it through
its ``next_element`` chain (``descendants``, ``get_text``), never by
recursion, so pathologically deep markup is safe to traverse.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator

from bs4 import BeautifulSoup
from bs4.element import CData, NavigableString, Tag

from backend.scraper.models import ParseFailedError

# String types that count as visible text; the same set ``Tag.get_text``
# uses for ordinary elements (comments, doctypes and script bodies excluded).
TEXT_STRING_TYPES = (NavigableString, CData)


@dataclass(frozen=True)
class Document:
    """A parsed page.  Treat ``soup`` as read-only."""

    soup: BeautifulSoup

    @property
    def root(self) -> Tag:
        return self.soup


def iter_elements(node: Tag) -> Iterator[Tag]:
    """Yield every element below *node* in document order (not *node* itself)."""
    for descendant in node.descendants:
        if isinstance(descendant, Tag):
            yield descendant


def is_text(node: object) -> bool:
    return type(node) in TEXT_STRING_TYPES


def text_content(node: Tag) -> str:
    """Concatenate all visible text below *node*, untrimmed."""
    return node.get_text()


def parse_html(markup: bytes | str) -> Document:
    """Parse raw HTML into a :class:`Document`.

    Byte input goes through bs4's encoding detection.  Multi-valued
    attributes such as ``class`` are kept as their literal source string.

    Raises:
        ParseFailedError: If the markup cannot be decoded or parsed.
    """
    try:
        soup = BeautifulSoup(markup, "html.parser", multi_valued_attributes=None)
    except Exception as exc:
        raise ParseFailedError(f"could not parse HTML: {exc}") from exc
    return Document(soup=soup)
