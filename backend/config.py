"""Centralised settings for the Clean Article Extractor backend.

All runtime configuration is resolved here in one place.  Values can be
overridden via environment variables or a `.env` file in the project root
(loaded automatically when this module is imported).
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv

# Load .env from the project root (two levels up from this file)
_env_path = Path(__file__).resolve().parent.parent / ".env"
load_dotenv(_env_path, override=False)


def _env_bool(name: str, default: str) -> bool:
    return os.environ.get(name, default).strip().lower() in ("1", "true", "yes", "on")


def _env_list(name: str, default: str) -> frozenset[str]:
    raw = os.environ.get(name, default)
    return frozenset(item.strip() for item in raw.split(",") if item.strip())


@dataclass
class Settings:
    # ------------------------------------------------------------------
    # Fetcher
    # ------------------------------------------------------------------
    request_timeout: float = field(
        default_factory=lambda: float(os.environ.get("REQUEST_TIMEOUT", "10.0"))
    )
    max_response_bytes: int = field(
        default_factory=lambda: int(os.environ.get("MAX_RESPONSE_BYTES", "5000000"))
    )
    user_agent: str = field(
        default_factory=lambda: os.environ.get(
            "USER_AGENT", "clean-article-extractor/1.0 (+https://example.com)"
        )
    )

    # ------------------------------------------------------------------
    # Access control
    # ------------------------------------------------------------------
    api_keys: frozenset[str] = field(
        default_factory=lambda: _env_list("API_KEYS", "demo-key-123")
    )
    allow_anonymous: bool = field(
        default_factory=lambda: _env_bool("ALLOW_ANONYMOUS", "true")
    )
    rate_limit_requests: int = field(
        default_factory=lambda: int(os.environ.get("RATE_LIMIT_REQUESTS", "100"))
    )
    rate_limit_window: float = field(
        default_factory=lambda: float(os.environ.get("RATE_LIMIT_WINDOW", "3600"))
    )

    # ------------------------------------------------------------------
    # Logging
    # ------------------------------------------------------------------
    log_level: str = field(
        default_factory=lambda: os.environ.get("LOG_LEVEL", "INFO").upper()
    )
    log_json: bool = field(default_factory=lambda: _env_bool("LOG_JSON", "false"))


# Module-level singleton; import this everywhere:
#   from backend.config import settings
settings = Settings()
