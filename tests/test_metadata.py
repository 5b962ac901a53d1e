"""Tests for title and author lookup."""

from __future__ import annotations

from backend.scraper.dom import parse_html
from backend.scraper.metadata import extract_author, extract_title


class TestExtractTitle:
    def test_og_title_wins_over_title_tag(self) -> None:
        doc = parse_html(
            '<html><head><title>Site | Page</title>'
            '<meta property="og:title" content="  The Real Headline "></head></html>'
        )
        assert extract_title(doc) == "The Real Headline"

    def test_blank_og_title_falls_back_to_title_tag(self) -> None:
        doc = parse_html(
            '<html><head><meta property="og:title" content="   ">'
            "<title> Fallback </title></head></html>"
        )
        assert extract_title(doc) == "Fallback"

    def test_first_title_element_only(self) -> None:
        doc = parse_html("<title>First</title><svg><title>Icon</title></svg>")
        assert extract_title(doc) == "First"

    def test_missing_title_returns_empty(self) -> None:
        assert extract_title(parse_html("<html><body></body></html>")) == ""

    def test_title_with_attributes(self) -> None:
        doc = parse_html('<html><head><title lang="en">My Title</title></head></html>')
        assert extract_title(doc) == "My Title"


class TestExtractAuthor:
    def test_meta_author_wins(self) -> None:
        doc = parse_html(
            '<head><meta name="author" content=" Ada Lovelace "></head>'
            '<body><span class="byline">Someone Else</span></body>'
        )
        assert extract_author(doc) == "Ada Lovelace"

    def test_byline_class_fallback(self) -> None:
        doc = parse_html('<body><p class="byline">Jane Doe</p></body>')
        assert extract_author(doc) == "Jane Doe"

    def test_author_class_checked_before_byline(self) -> None:
        doc = parse_html(
            '<span class="byline">Byline Name</span><span class="author">Author Name</span>'
        )
        assert extract_author(doc) == "Author Name"

    def test_blank_author_class_moves_to_next_selector(self) -> None:
        doc = parse_html('<span class="author">  </span><span class="byline">Jane</span>')
        assert extract_author(doc) == "Jane"

    def test_only_first_match_of_each_selector_is_considered(self) -> None:
        doc = parse_html('<span class="author"> </span><span class="author">Second</span>')
        assert extract_author(doc) == ""

    def test_rel_author_link(self) -> None:
        doc = parse_html('<a rel="author" href="/people/sam">Sam Smith</a>')
        assert extract_author(doc) == "Sam Smith"

    def test_class_list_containing_byline(self) -> None:
        doc = parse_html('<div class="meta byline small">By Jo</div>')
        assert extract_author(doc) == "By Jo"

    def test_nothing_found_returns_empty(self) -> None:
        doc = parse_html("<html><body><p>No attribution here.</p></body></html>")
        assert extract_author(doc) == ""
