# app/routes/submissions.py
import math

from fastapi import APIRouter, Depends, HTTPException

from app.deps.arena import challenge_catalog, ranking_store
from app.rate_limiter import RateLimitExceeded, get_submission_rate_limiter
from app.schemas import (
    LeaderboardEntryRead,
    RunSubmission,
    RunSummaryRead,
    SubmissionResult,
)
from app.services.arena import record_graded_run
from app.services.catalog import ChallengeCatalog
from app.services.ranking import RankingStore

router = APIRouter(prefix="/arena", tags=["Arena"])


# -------------------------------------------------------------------
# POST /arena/submissions – rank a graded run
# -------------------------------------------------------------------
@router.post("/submissions", response_model=SubmissionResult)
async def submit_run(
    submission: RunSubmission,
    store: RankingStore = Depends(ranking_store),
    catalog: ChallengeCatalog = Depends(challenge_catalog),
):
    limiter = get_submission_rate_limiter()
    if limiter is not None:
        try:
            await limiter.check(f"handle:{submission.handle.lower()}")
        except RateLimitExceeded as exc:
            raise HTTPException(
                status_code=429,
                detail="Too many submissions. Please slow down.",
                headers={"Retry-After": str(max(1, math.ceil(exc.retry_after)))},
            )

    challenge = catalog.get_challenge_by_id(submission.challenge_id)
    if challenge is None:
        raise HTTPException(status_code=404, detail="Challenge not found")

    outcome = record_graded_run(
        store,
        challenge,
        handle=submission.handle,
        tests_passed=submission.tests_passed,
        total_tests=submission.total_tests,
        runtime_ms=submission.runtime_ms,
    )

    return SubmissionResult(
        summary=RunSummaryRead.model_validate(outcome.summary),
        leaderboard=[LeaderboardEntryRead.model_validate(e) for e in outcome.leaderboard],
        message=None if outcome.summary.passed else "Not all tests passed; run was not ranked.",
    )
