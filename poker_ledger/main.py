from __future__ import annotations

from fastapi import FastAPI

from poker_ledger.api.games import router as games_router
from poker_ledger.api.players import router as players_router
from poker_ledger.api.stats import router as stats_router
from poker_ledger.config import configure_logging
from poker_ledger.storage import models  # noqa: F401
from poker_ledger.storage.database import Base, engine


def create_app() -> FastAPI:
    configure_logging()
    Base.metadata.create_all(bind=engine)

    app = FastAPI(title="Poker Ledger API")
    app.include_router(players_router)
    app.include_router(games_router)
    app.include_router(stats_router)
    return app


app = create_app()
