"""Simple in-memory rate limiting helpers."""

from __future__ import annotations

import asyncio
import time
from collections import deque
from dataclasses import dataclass
from typing import Callable, Deque, Dict, Optional

from app import config


class RateLimitExceeded(Exception):
    """Raised when a key has used up its allowance for the current window."""

    def __init__(self, key: str, retry_after: float) -> None:
        super().__init__(f"Rate limit exceeded for {key}")
        self.key = key
        self.retry_after = retry_after


@dataclass
class _Bucket:
    hits: Deque[float]


class RateLimiter:
    """An asyncio-friendly sliding window rate limiter."""

    def __init__(
        self,
        *,
        limit: int,
        window_seconds: float,
        clock: Optional[Callable[[], float]] = None,
    ) -> None:
        if limit <= 0:
            raise ValueError("limit must be positive")
        if window_seconds <= 0:
            raise ValueError("window_seconds must be positive")
        self.limit = limit
        self.window = window_seconds
        self._clock = clock or time.monotonic
        self._lock = asyncio.Lock()
        self._buckets: Dict[str, _Bucket] = {}

    async def _acquire(self, key: str) -> Optional[float]:
        """Record a hit and return None, or return seconds until a slot frees up."""

        now = self._clock()
        cutoff = now - self.window

        async with self._lock:
            bucket = self._buckets.get(key)
            if bucket is None:
                bucket = _Bucket(deque())
                self._buckets[key] = bucket

            hits = bucket.hits
            while hits and hits[0] <= cutoff:
                hits.popleft()

            if len(hits) >= self.limit:
                return max(0.0, hits[0] + self.window - now)

            hits.append(now)
            return None

    async def try_acquire(self, key: str) -> bool:
        return await self._acquire(key) is None

    async def check(self, key: str) -> None:
        retry_after = await self._acquire(key)
        if retry_after is not None:
            raise RateLimitExceeded(key, retry_after)


_submission_limiter: Optional[RateLimiter] = None


def get_submission_rate_limiter() -> Optional[RateLimiter]:
    """Return the shared rate limiter for arena submissions (if configured)."""

    global _submission_limiter
    if _submission_limiter is not None:
        return _submission_limiter

    limit = config.submission_rate_limit()
    window = config.submission_rate_window()
    if limit <= 0 or window <= 0:
        return None

    _submission_limiter = RateLimiter(limit=limit, window_seconds=window)
    return _submission_limiter


__all__ = ["RateLimitExceeded", "RateLimiter", "get_submission_rate_limiter"]
