# app/config.py
from __future__ import annotations

import os
from typing import List

from dotenv import load_dotenv

load_dotenv()

DEFAULT_LEADERBOARD_SIZE = 20


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return float(raw)
    except ValueError:
        return default


def _split_csv(raw: str | None) -> List[str]:
    if not raw:
        return []
    return [item.strip() for item in raw.split(",") if item.strip()]


def leaderboard_size() -> int:
    """Global bound on retained leaderboard entries (all challenges combined)."""

    size = _env_int("ARENA_LEADERBOARD_SIZE", DEFAULT_LEADERBOARD_SIZE)
    return size if size > 0 else DEFAULT_LEADERBOARD_SIZE


def submission_rate_limit() -> int:
    return _env_int("ARENA_SUBMISSION_RATE_LIMIT", 0)


def submission_rate_window() -> float:
    return _env_float("ARENA_SUBMISSION_RATE_WINDOW", 60.0)


def allowed_origins() -> List[str]:
    return _split_csv(os.getenv("ALLOWED_ORIGINS", "").strip())


def log_level() -> str:
    return os.getenv("LOG_LEVEL", "INFO").strip().upper() or "INFO"


__all__ = [
    "DEFAULT_LEADERBOARD_SIZE",
    "allowed_origins",
    "leaderboard_size",
    "log_level",
    "submission_rate_limit",
    "submission_rate_window",
]
