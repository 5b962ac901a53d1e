"""API-key validation and fixed-window per-key rate limiting.

Both are plain objects held on ``app.state`` so tests can swap them out.
Neither knows anything about extraction.
"""

from __future__ import annotations

import asyncio
import threading
import time
from typing import Callable, Iterable, Optional

from loguru import logger

ANONYMOUS = "anon"


class ApiKeyValidator:
    """Accepts keys from a fixed set; an empty key means anonymous demo access."""

    def __init__(self, valid_keys: Iterable[str], allow_anonymous: bool = True) -> None:
        self._valid_keys = frozenset(valid_keys)
        self.allow_anonymous = allow_anonymous

    def is_valid(self, key: str) -> bool:
        if not key:
            return self.allow_anonymous
        return key in self._valid_keys


class RateLimiter:
    """Counts requests per caller and refuses them once a quota is reached.

    Counters live in one dict behind one lock; FastAPI runs sync endpoints
    in a thread pool, so :meth:`check` may be called concurrently.  All
    counters are cleared together at each wall-clock window boundary by
    :meth:`run_reset_loop`.
    """

    def __init__(
        self,
        max_requests: int,
        window_seconds: float,
        clock: Callable[[], float] = time.time,
    ) -> None:
        if max_requests < 0:
            raise ValueError("max_requests must be >= 0")
        if window_seconds <= 0:
            raise ValueError("window_seconds must be > 0")
        self.max_requests = max_requests
        self.window_seconds = window_seconds
        self._clock = clock
        self._lock = threading.Lock()
        self._counts: dict[str, int] = {}

    def check(self, key: str) -> bool:
        """Record one request for *key*; return ``False`` if over quota.

        Refused requests are not counted.
        """
        bucket = key or ANONYMOUS
        with self._lock:
            count = self._counts.get(bucket, 0)
            if count >= self.max_requests:
                return False
            self._counts[bucket] = count + 1
            return True

    def count(self, key: str) -> int:
        with self._lock:
            return self._counts.get(key or ANONYMOUS, 0)

    def reset(self) -> None:
        with self._lock:
            self._counts = {}

    def seconds_until_reset(self, now: Optional[float] = None) -> float:
        """Seconds from *now* to the next multiple of the window length."""
        if now is None:
            now = self._clock()
        return self.window_seconds - (now % self.window_seconds)

    async def run_reset_loop(self) -> None:
        """Clear all counters at every window boundary until cancelled."""
        while True:
            await asyncio.sleep(self.seconds_until_reset())
            self.reset()
            logger.info("Rate-limit counters reset")
