"""CSS selector matching over a parsed page, backed by soupsieve.

Selectors are compiled once and cached.  Substring matching
(``[class*=content]``) is a literal, case-sensitive test on the raw
attribute value: it is not token-aware, so ``class="noncontent"`` matches.
Content-container heuristics depend on that looseness; leave it alone.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Iterator, Optional, Union

import soupsieve
from bs4.element import Tag

from backend.scraper.dom import Document

Selector = soupsieve.SoupSieve


@lru_cache(maxsize=128)
def compile_selector(text: str) -> Selector:
    """Compile *text* into a reusable selector.

    Raises:
        soupsieve.SelectorSyntaxError: If *text* is not a valid selector.
    """
    return soupsieve.compile(text)


def _scope(scope: Union[Document, Tag]) -> Tag:
    return scope.root if isinstance(scope, Document) else scope


def match(scope: Union[Document, Tag], selector: Union[Selector, str]) -> Iterator[Tag]:
    """Lazily yield elements below *scope* matching *selector*, in document order."""
    if isinstance(selector, str):
        selector = compile_selector(selector)
    return selector.iselect(_scope(scope))


def first(scope: Union[Document, Tag], selector: Union[Selector, str]) -> Optional[Tag]:
    return next(match(scope, selector), None)
