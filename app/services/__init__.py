"""Service layer: challenge catalog, ranking store and run intake."""

from .arena import RunOutcome, RunSummary, record_graded_run, score_for
from .catalog import ChallengeCatalog, get_challenge_catalog
from .ranking import RankingStore, get_ranking_store

__all__ = [
    "ChallengeCatalog",
    "RankingStore",
    "RunOutcome",
    "RunSummary",
    "get_challenge_catalog",
    "get_ranking_store",
    "record_graded_run",
    "score_for",
]
