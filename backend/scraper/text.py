"""Paragraph gathering and whitespace normalisation.

Both walks below are linear in the size of the subtree.  Element text is
built bottom-up from the children's already-built text instead of calling
``get_text`` on every nested paragraph, which would revisit the same
subtree once per ancestor.
"""

from __future__ import annotations

from typing import Iterable, Iterator

from bs4.element import Tag

from backend.scraper.dom import is_text

TEXT_TAGS = frozenset({"p", "h1", "h2", "h3"})
PARAGRAPH_BREAK = "\n\n"


def _postorder(root: Tag) -> list[Tag]:
    """Elements below *root*, children before parents."""
    elements = [d for d in root.descendants if isinstance(d, Tag)]
    elements.reverse()
    return elements


def _paragraphs(root: Tag) -> Iterator[tuple[Tag, str]]:
    """Yield ``(element, untrimmed text)`` for each text element below *root*.

    Results come in document order.  Only elements inside some text element
    have their text assembled; everything else is skipped.
    """
    order = [d for d in root.descendants if isinstance(d, Tag)]

    wanted: set[int] = set()
    for el in order:
        if el.name in TEXT_TAGS or id(el.parent) in wanted:
            wanted.add(id(el))

    built: dict[int, str] = {}
    found: dict[int, str] = {}
    for el in reversed(order):
        if id(el) not in wanted:
            continue
        text = "".join(
            built.pop(id(child)) if isinstance(child, Tag) else str(child)
            for child in el.contents
            if isinstance(child, Tag) or is_text(child)
        )
        built[id(el)] = text
        if el.name in TEXT_TAGS:
            found[id(el)] = text

    for el in order:
        if id(el) in found:
            yield el, found[id(el)]


def gather_text(roots: Iterable[Tag]) -> str:
    """Join the paragraph and heading text found below *roots*.

    Roots are walked in the order given, each depth-first; the roots
    themselves are not candidates, only their descendants.  An element
    reachable from two roots (nested matches) contributes once.  Each
    element's text is trimmed and blank ones are skipped.
    """
    covered: set[int] = set()
    seen: set[int] = set()
    parts: list[str] = []
    for root in roots:
        # a root nested in an earlier root has nothing new to add
        if id(root) in covered:
            continue
        covered.update(id(d) for d in root.descendants if isinstance(d, Tag))
        for el, text in _paragraphs(root):
            if id(el) in seen:
                continue
            seen.add(id(el))
            text = text.strip()
            if text:
                parts.append(text)
    return PARAGRAPH_BREAK.join(parts)


def gathered_lengths(root: Tag) -> dict[int, int]:
    """Map ``id(element)`` to ``len(gather_text([element]))`` for every element below *root*.

    One post-order pass.  Each element carries its text length and the
    width of its leading and trailing whitespace, which is enough to know
    every paragraph's trimmed length without building any string.
    """
    # id -> (text length, leading whitespace, trailing whitespace)
    spans: dict[int, tuple[int, int, int]] = {}
    # id -> (sum of trimmed paragraph lengths below, number of such paragraphs)
    totals: dict[int, tuple[int, int]] = {}

    for el in _postorder(root):
        length = lead = trail = 0
        chars = count = 0
        for child in el.contents:
            if isinstance(child, Tag):
                c_len, c_lead, c_trail = spans[id(child)]
                c_chars, c_count = totals[id(child)]
                chars += c_chars
                count += c_count
                if child.name in TEXT_TAGS and c_lead < c_len:
                    chars += c_len - c_lead - c_trail
                    count += 1
            elif is_text(child):
                s = str(child)
                c_len = len(s)
                c_lead = c_len - len(s.lstrip())
                c_trail = c_len - len(s.rstrip())
            else:
                continue
            # fold the child's span onto the right of the running span
            if lead == length:
                lead = length + c_lead
            trail = c_trail if c_lead < c_len else trail + c_len
            length += c_len
        spans[id(el)] = (length, lead, trail)
        totals[id(el)] = (chars, count)

    return {
        key: chars + len(PARAGRAPH_BREAK) * (count - 1) if count else 0
        for key, (chars, count) in totals.items()
    }


def normalize(text: str) -> str:
    """Drop carriage returns, trim, and cap blank-line runs at one blank line.

    Idempotent: ``normalize(normalize(s)) == normalize(s)``.
    """
    text = text.replace("\r", "").strip()
    while "\n\n\n" in text:
        text = text.replace("\n\n\n", "\n\n")
    return text
