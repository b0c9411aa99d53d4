# app/routes/leaderboard.py
from typing import Optional

from fastapi import APIRouter, Depends, Query

from app.deps.arena import ranking_store
from app.schemas import LeaderboardEntryRead, LeaderboardResponse
from app.services.ranking import RankingStore

router = APIRouter(prefix="/arena/leaderboard", tags=["Leaderboard"])


# --------- GET /arena/leaderboard ---------
@router.get("", response_model=LeaderboardResponse)
async def get_leaderboard(
    challenge_id: Optional[str] = Query(
        None,
        alias="challengeId",
        description="Limit to one challenge; omitted means the global board.",
    ),
    store: RankingStore = Depends(ranking_store),
):
    """
    Global arena leaderboard:
      - Top entries across all challenges, best first.
      - Tie-breakers: faster runtime, then earlier submission.
      - A challenge filter keeps global order and may return fewer entries,
        since the size bound applies to all challenges combined.
    """
    entries = store.query(challenge_id)
    return LeaderboardResponse(
        leaderboard=[LeaderboardEntryRead.model_validate(entry) for entry in entries]
    )
