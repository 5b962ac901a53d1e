"""Scraper package — web fetch & article extraction."""

from backend.scraper.extractor import extract, extract_page
from backend.scraper.fetcher import fetch_url
from backend.scraper.models import (
    Article,
    ErrorKind,
    ExtractionError,
    FetchError,
    NoContentDetectedError,
    ParseFailedError,
    RawPage,
)

__all__ = [
    "fetch_url",
    "extract",
    "extract_page",
    "Article",
    "RawPage",
    "ErrorKind",
    "ExtractionError",
    "FetchError",
    "NoContentDetectedError",
    "ParseFailedError",
]
