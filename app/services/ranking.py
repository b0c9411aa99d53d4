"""Bounded, always-sorted leaderboard of arena submissions."""

from __future__ import annotations

import logging
import threading
import uuid
from datetime import datetime, timezone
from typing import Callable, List, Optional

from app import config
from app.models.challenge import ChallengeSummary
from app.models.submission import SubmissionRecord
from app.services.catalog import ChallengeCatalog, get_challenge_catalog

_LOGGER = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _new_id() -> str:
    return uuid.uuid4().hex


class RankingStore:
    """Keeps the top ``max_entries`` submissions across every challenge.

    The bound is global: a new entry may evict the lowest-ranked record of a
    different challenge. Records are kept in canonical order at all times
    (score desc, runtime asc, submission time asc), so queries never sort.
    """

    def __init__(
        self,
        catalog: Optional[ChallengeCatalog] = None,
        *,
        max_entries: int = config.DEFAULT_LEADERBOARD_SIZE,
        clock: Optional[Callable[[], datetime]] = None,
        id_factory: Optional[Callable[[], str]] = None,
    ) -> None:
        if max_entries <= 0:
            raise ValueError("max_entries must be positive")
        self.catalog = catalog
        self.max_entries = max_entries
        self._clock = clock or _utcnow
        self._id_factory = id_factory or _new_id
        self._lock = threading.Lock()
        self._entries: List[SubmissionRecord] = []
        self._last_submitted_at: Optional[datetime] = None

    def __len__(self) -> int:
        return len(self._entries)

    def _next_timestamp(self) -> datetime:
        # Caller holds the lock.
        now = self._clock()
        if self._last_submitted_at is not None and now < self._last_submitted_at:
            now = self._last_submitted_at
        self._last_submitted_at = now
        return now

    def insert(
        self,
        challenge: ChallengeSummary,
        handle: str,
        score: float,
        tests_passed: int,
        total_tests: int,
        runtime_ms: float,
    ) -> List[SubmissionRecord]:
        """Rank a completed run and return the whole post-insert leaderboard.

        Inputs are stored as given; range checks belong to the caller.
        """

        with self._lock:
            record = SubmissionRecord(
                id=self._id_factory(),
                challenge_id=challenge.id,
                challenge_title=challenge.title,
                handle=handle,
                score=score,
                tests_passed=tests_passed,
                total_tests=total_tests,
                runtime_ms=runtime_ms,
                submitted_at=self._next_timestamp(),
            )
            # Stable sort: identical keys keep insertion order.
            entries = sorted([*self._entries, record], key=SubmissionRecord.rank_key)
            evicted = len(entries) - self.max_entries
            self._entries = entries[: self.max_entries]
            snapshot = list(self._entries)

        _LOGGER.debug(
            "Ranked submission %s for %s (score=%s runtime=%sms)",
            record.id,
            record.challenge_id,
            score,
            runtime_ms,
        )
        if evicted > 0:
            _LOGGER.debug("Evicted %s leaderboard entr%s", evicted, "y" if evicted == 1 else "ies")
        return snapshot

    def query(self, challenge_id: Optional[str] = None) -> List[SubmissionRecord]:
        # _entries is replaced on insert, never mutated in place.
        entries = list(self._entries)
        if not challenge_id:
            return entries
        return [entry for entry in entries if entry.challenge_id == challenge_id]

    def lookup_challenge_summary(self, challenge_id: str):
        if self.catalog is None:
            return None
        return self.catalog.get_challenge_by_id(challenge_id)

    def reset(self) -> None:
        with self._lock:
            self._entries = []
            self._last_submitted_at = None


_store: Optional[RankingStore] = None
_store_lock = threading.Lock()


def get_ranking_store() -> RankingStore:
    """Return the process-wide store, creating it on first use."""

    global _store
    if _store is not None:
        return _store
    with _store_lock:
        if _store is None:
            _store = RankingStore(get_challenge_catalog(), max_entries=config.leaderboard_size())
            _LOGGER.info("Created arena leaderboard (max %s entries)", _store.max_entries)
    return _store


__all__ = ["RankingStore", "get_ranking_store"]
