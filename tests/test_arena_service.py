import sys
from pathlib import Path
from types import SimpleNamespace

sys.path.append(str(Path(__file__).resolve().parents[1]))

from app.services.arena import record_graded_run, score_for  # noqa: E402
from app.services.ranking import RankingStore  # noqa: E402

CHALLENGE = SimpleNamespace(id="rate-limiter", title="Implement a token bucket rate limiter")


def test_score_for_rounds_half_up():
    assert score_for(3, 3) == 100
    assert score_for(2, 3) == 67
    assert score_for(1, 3) == 33
    assert score_for(1, 8) == 13  # 12.5
    assert score_for(0, 5) == 0
    assert score_for(0, 0) == 0


def test_passing_run_is_ranked():
    store = RankingStore()
    outcome = record_graded_run(store, CHALLENGE, "ada", 3, 3, 42)

    assert outcome.summary.passed is True
    assert outcome.summary.score == 100
    assert [e.handle for e in outcome.leaderboard] == ["ada"]
    assert store.query("rate-limiter")[0].runtime_ms == 42


def test_partial_run_is_not_ranked():
    store = RankingStore()
    record_graded_run(store, CHALLENGE, "ada", 3, 3, 42)

    outcome = record_graded_run(store, CHALLENGE, "bob", 2, 3, 5)

    assert outcome.summary.passed is False
    assert outcome.summary.score == 67
    assert [e.handle for e in outcome.leaderboard] == ["ada"]
    assert len(store) == 1


def test_run_without_tests_is_not_ranked():
    store = RankingStore()
    outcome = record_graded_run(store, CHALLENGE, "ada", 0, 0, 1)
    assert outcome.summary.passed is False
    assert outcome.leaderboard == []


def test_faster_perfect_run_ranks_first():
    store = RankingStore()
    record_graded_run(store, CHALLENGE, "slow", 3, 3, 90)
    outcome = record_graded_run(store, CHALLENGE, "fast", 3, 3, 15)
    assert [e.handle for e in outcome.leaderboard] == ["fast", "slow"]
