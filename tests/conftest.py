import os

os.environ.setdefault("DATABASE_URL", "sqlite+pysqlite:///:memory:")

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from poker_ledger.service import LedgerService
from poker_ledger.services.stats_service import StatsService
from poker_ledger.storage import models  # noqa: F401
from poker_ledger.storage.database import Base
from poker_ledger.storage.repository import PokerRepository


@pytest.fixture
def session_factory() -> sessionmaker[Session]:
    engine = create_engine(
        "sqlite+pysqlite:///:memory:",
        future=True,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    return sessionmaker(bind=engine, autocommit=False, autoflush=False, future=True)


@pytest.fixture
def repo(session_factory: sessionmaker[Session]) -> PokerRepository:
    return PokerRepository(session_factory)


@pytest.fixture
def service(repo: PokerRepository) -> LedgerService:
    return LedgerService(repo, StatsService(max_workers=2))
