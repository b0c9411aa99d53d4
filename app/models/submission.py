# app/models/submission.py
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Tuple


@dataclass(frozen=True)
class SubmissionRecord:
    id: str
    challenge_id: str
    # Snapshot of the title at submission time; never re-fetched.
    challenge_title: str
    handle: str
    score: float
    tests_passed: int
    total_tests: int
    runtime_ms: float
    submitted_at: datetime

    def rank_key(self) -> Tuple[float, float, datetime]:
        """Canonical leaderboard order: score desc, runtime asc, earliest first."""
        return (-self.score, self.runtime_ms, self.submitted_at)

    def __repr__(self) -> str:
        return (
            f"<SubmissionRecord id={self.id} chal={self.challenge_id} "
            f"score={self.score} runtime={self.runtime_ms}>"
        )
