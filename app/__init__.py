"""Coding arena leaderboard: ranking store, challenge catalog and HTTP API."""

from .services.catalog import ChallengeCatalog, get_challenge_catalog  # noqa: F401
from .services.ranking import RankingStore, get_ranking_store  # noqa: F401

__all__ = ["ChallengeCatalog", "RankingStore", "get_challenge_catalog", "get_ranking_store"]
