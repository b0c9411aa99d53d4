# app/routes/challenges.py
from typing import List

from fastapi import APIRouter, Depends, HTTPException

from app.deps.arena import challenge_catalog
from app.schemas import ChallengeSummaryRead
from app.services.catalog import ChallengeCatalog

router = APIRouter(prefix="/arena/challenges", tags=["Arena"])


@router.get("", response_model=List[ChallengeSummaryRead])
async def list_challenges(catalog: ChallengeCatalog = Depends(challenge_catalog)):
    return [ChallengeSummaryRead.model_validate(s) for s in catalog.get_challenge_summaries()]


@router.get("/{challenge_id}", response_model=ChallengeSummaryRead)
async def get_challenge(
    challenge_id: str,
    catalog: ChallengeCatalog = Depends(challenge_catalog),
):
    challenge = catalog.get_challenge_by_id(challenge_id)
    if challenge is None:
        raise HTTPException(status_code=404, detail="Challenge not found")
    return ChallengeSummaryRead.model_validate(challenge.summary())
