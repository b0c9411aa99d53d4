import asyncio

import pytest

from app import rate_limiter as rate_limiter_module
from app.rate_limiter import RateLimiter, RateLimitExceeded, get_submission_rate_limiter


def test_rate_limiter_enforces_limit():
    async def _run():
        limiter = RateLimiter(limit=2, window_seconds=10)
        await limiter.check("handle:ada")
        await limiter.check("handle:ada")
        with pytest.raises(RateLimitExceeded):
            await limiter.check("handle:ada")
        # Other keys have their own allowance.
        assert await limiter.try_acquire("handle:bob") is True

    asyncio.run(_run())


def test_rate_limiter_window_slides():
    now = [100.0]

    async def _run():
        limiter = RateLimiter(limit=1, window_seconds=5, clock=lambda: now[0])
        assert await limiter.try_acquire("k") is True
        now[0] = 103.0
        with pytest.raises(RateLimitExceeded) as excinfo:
            await limiter.check("k")
        assert excinfo.value.retry_after == pytest.approx(2.0)
        now[0] = 105.5
        assert await limiter.try_acquire("k") is True

    asyncio.run(_run())


def test_rate_limiter_rejects_bad_config():
    with pytest.raises(ValueError):
        RateLimiter(limit=0, window_seconds=1)
    with pytest.raises(ValueError):
        RateLimiter(limit=1, window_seconds=0)


def test_submission_limiter_disabled_by_default(monkeypatch):
    monkeypatch.setattr(rate_limiter_module, "_submission_limiter", None)
    monkeypatch.delenv("ARENA_SUBMISSION_RATE_LIMIT", raising=False)
    assert get_submission_rate_limiter() is None


def test_submission_limiter_from_env(monkeypatch):
    monkeypatch.setattr(rate_limiter_module, "_submission_limiter", None)
    monkeypatch.setenv("ARENA_SUBMISSION_RATE_LIMIT", "3")
    monkeypatch.setenv("ARENA_SUBMISSION_RATE_WINDOW", "30")

    limiter = get_submission_rate_limiter()

    assert limiter is not None
    assert limiter.limit == 3
    assert limiter.window == 30.0
    assert get_submission_rate_limiter() is limiter
