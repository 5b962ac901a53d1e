"""Body selection: find the subtree most likely to hold the article text.

This is a greedy, single-pass heuristic.  A fixed list of structural
selectors is tried in priority order and the one whose matches gather the
most paragraph text wins; ties go to the earlier selector.  If none of them
yields anything, every ``<div>`` is scored on its own, and failing that the
whole document's paragraphs are used.  There is no link-density or
tag-density weighting.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional

from bs4.element import Tag
from loguru import logger

from backend.scraper.dom import Document
from backend.scraper.selector import Selector, compile_selector, match
from backend.scraper.text import gather_text, gathered_lengths

CANDIDATE_SELECTORS: tuple[tuple[str, Selector], ...] = tuple(
    (s, compile_selector(s))
    for s in (
        "article",
        "main",
        "[id*=content]",
        "[class*=content]",
        ".post",
        ".entry-content",
        ".article-body",
        ".post-body",
    )
)

_DIV = compile_selector("div")


@dataclass(frozen=True)
class Candidate:
    selector: str
    nodes: tuple[Tag, ...]
    text: str

    @property
    def length(self) -> int:
        return len(self.text.strip())


def score_candidates(document: Document) -> list[Candidate]:
    """Evaluate each candidate selector that matches at least one element."""
    candidates = []
    for label, selector in CANDIDATE_SELECTORS:
        nodes = tuple(match(document, selector))
        if not nodes:
            continue
        candidates.append(Candidate(label, nodes, gather_text(nodes)))
    return candidates


def _longest(candidates: Iterable[Candidate]) -> Optional[Candidate]:
    best: Optional[Candidate] = None
    for candidate in candidates:
        # strict ">" keeps the first of equally long candidates
        if candidate.length > (best.length if best else 0):
            best = candidate
    return best


def _largest_div(document: Document) -> Optional[Tag]:
    """The div with the most gathered text; the first one wins ties."""
    lengths = gathered_lengths(document.root)
    best: Optional[Tag] = None
    best_length = 0
    for div in match(document, _DIV):
        length = lengths[id(div)]
        if length > best_length:
            best, best_length = div, length
    return best


def select_body(document: Document) -> str:
    """Return the raw (un-normalised) text of the best body candidate."""
    best = _longest(score_candidates(document))
    if best is None:
        div = _largest_div(document)
        if div is not None:
            best = Candidate("div", (div,), gather_text((div,)))
    if best is None:
        logger.debug("No container matched; gathering from the whole document")
        return gather_text((document.root,))

    logger.debug(f"Body chosen from {best.selector!r} ({best.length} chars)")
    return best.text
