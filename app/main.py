import logging
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app import config
from app.services.catalog import ChallengeCatalog, get_challenge_catalog
from app.services.ranking import RankingStore, get_ranking_store

# ----- Logging -----
logging.basicConfig(
    level=config.log_level(),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s"
)

# ----- Routers -----
from app.routes.challenges import router as challenge_router  # noqa: E402
from app.routes.leaderboard import router as leaderboard_router  # noqa: E402
from app.routes.submissions import router as submission_router  # noqa: E402


def create_app(
    store: Optional[RankingStore] = None,
    catalog: Optional[ChallengeCatalog] = None,
) -> FastAPI:
    """Build the arena API around an explicit store and catalog.

    Without arguments the process-wide singletons are used.
    """

    if store is None:
        store = get_ranking_store()
    if catalog is None:
        catalog = store.catalog if store.catalog is not None else get_challenge_catalog()

    app = FastAPI(
        title="Arena Leaderboard",
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
    )
    app.state.ranking_store = store
    app.state.challenge_catalog = catalog

    # ----- CORS (enabled only if ALLOWED_ORIGINS is set) -----
    allowed_origins = config.allowed_origins()
    if allowed_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=allowed_origins,
            allow_credentials=True,
            allow_methods=["GET", "POST", "OPTIONS"],
            allow_headers=["Content-Type", "Accept", "Origin", "X-Requested-With"],
            max_age=86400,
        )

    # ----- Include routers -----
    app.include_router(challenge_router)
    app.include_router(leaderboard_router)
    app.include_router(submission_router)

    # ----- Health check endpoint -----
    @app.get("/health", tags=["meta"])
    async def health():
        return {"ok": True}

    logging.info(
        "Arena API ready (%s challenges, leaderboard bound %s).",
        len(catalog),
        store.max_entries,
    )
    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("app.main:app", host="127.0.0.1", port=8000, reload=True)
