"""Turns a graded arena run into a leaderboard update."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import List

from app.models.challenge import ChallengeSummary
from app.models.submission import SubmissionRecord
from app.services.ranking import RankingStore

_LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class RunSummary:
    passed: bool
    tests_passed: int
    total_tests: int
    score: int
    runtime_ms: float


@dataclass(frozen=True)
class RunOutcome:
    summary: RunSummary
    leaderboard: List[SubmissionRecord]


def score_for(tests_passed: int, total_tests: int) -> int:
    """
    Percentage of tests passed, rounded half up.
    A run with no tests scores zero.
    """
    if total_tests <= 0:
        return 0
    return int(math.floor(tests_passed * 100 / total_tests + 0.5))


def record_graded_run(
    store: RankingStore,
    challenge: ChallengeSummary,
    handle: str,
    tests_passed: int,
    total_tests: int,
    runtime_ms: float,
) -> RunOutcome:
    """Only runs that pass every test make it onto the leaderboard."""

    score = score_for(tests_passed, total_tests)
    passed = total_tests > 0 and tests_passed == total_tests

    if passed:
        leaderboard = store.insert(
            challenge,
            handle=handle,
            score=score,
            tests_passed=tests_passed,
            total_tests=total_tests,
            runtime_ms=runtime_ms,
        )
    else:
        _LOGGER.info(
            "Run by %s on %s passed %s/%s tests; not ranked",
            handle,
            challenge.id,
            tests_passed,
            total_tests,
        )
        leaderboard = store.query()

    summary = RunSummary(
        passed=passed,
        tests_passed=tests_passed,
        total_tests=total_tests,
        score=score,
        runtime_ms=runtime_ms,
    )
    return RunOutcome(summary=summary, leaderboard=leaderboard)


__all__ = ["RunOutcome", "RunSummary", "record_graded_run", "score_for"]
