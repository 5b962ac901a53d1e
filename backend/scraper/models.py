"""Data models and error types for the extraction pipeline."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True)
class RawPage:
    """The raw HTTP response for a single URL fetch."""

    url: str
    content: bytes
    status_code: int


@dataclass(frozen=True)
class Article:
    """Clean article extracted from one HTML document.

    ``content`` is never empty: a page with no detectable body raises
    :class:`NoContentDetectedError` instead of producing an ``Article``.
    """

    title: str
    author: str
    content: str


class ErrorKind(str, Enum):
    PARSE_FAILED = "parse_failed"
    NO_CONTENT_DETECTED = "no_content_detected"
    FETCH_FAILED = "fetch_failed"


class ExtractionError(Exception):
    """Base class for every failure the pipeline reports to its caller."""

    kind: ErrorKind = ErrorKind.PARSE_FAILED

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ParseFailedError(ExtractionError):
    """The input bytes could not be turned into a node tree."""

    kind = ErrorKind.PARSE_FAILED


class NoContentDetectedError(ExtractionError):
    """The page parsed fine but no heuristic tier found any body text."""

    kind = ErrorKind.NO_CONTENT_DETECTED


class FetchError(ExtractionError):
    """The upstream page could not be retrieved."""

    kind = ErrorKind.FETCH_FAILED
