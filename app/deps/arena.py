# app/deps/arena.py
from fastapi import Request

from app.services.catalog import ChallengeCatalog, get_challenge_catalog
from app.services.ranking import RankingStore, get_ranking_store


def ranking_store(request: Request) -> RankingStore:
    """The store attached to the app, or the process-wide one."""
    store = getattr(request.app.state, "ranking_store", None)
    return store if store is not None else get_ranking_store()


def challenge_catalog(request: Request) -> ChallengeCatalog:
    catalog = getattr(request.app.state, "challenge_catalog", None)
    return catalog if catalog is not None else get_challenge_catalog()
