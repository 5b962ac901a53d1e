"""Loguru logging configuration.

Call :func:`configure_logging` once at application startup (the API lifespan
and the CLI both do).  Modules simply ``from loguru import logger``.
"""

from __future__ import annotations

import logging
import sys

from loguru import logger

from backend.config import settings

_VALID_LEVELS = ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL")

_HUMAN_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
    "<level>{message}</level>"
)


class InterceptHandler(logging.Handler):
    """Redirect standard library logging records (uvicorn, httpx) to loguru."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level: str | int = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        # Walk back to the frame that actually issued the logging call
        frame, depth = logging.currentframe(), 2
        while frame and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).log(level, record.getMessage())


def configure_logging(log_level: str | None = None, enable_json: bool | None = None) -> None:
    """Configure the loguru sinks for the process.

    Args:
        log_level: Minimum level; defaults to ``settings.log_level``.  Unknown
            values fall back to ``INFO``.
        enable_json: Emit one JSON object per record instead of the
            human-readable format; defaults to ``settings.log_json``.
    """
    level = (log_level or settings.log_level).upper()
    if level not in _VALID_LEVELS:
        level = "INFO"
    if enable_json is None:
        enable_json = settings.log_json

    logger.remove()
    if enable_json:
        logger.add(sys.stderr, level=level, serialize=True)
    else:
        logger.add(sys.stderr, format=_HUMAN_FORMAT, level=level, colorize=True)

    logging.basicConfig(handlers=[InterceptHandler()], level=0, force=True)
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)

    logger.debug(f"Logging configured: level={level}, json={enable_json}")


__all__ = ["configure_logging", "InterceptHandler"]
