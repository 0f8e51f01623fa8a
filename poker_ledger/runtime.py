from __future__ import annotations

from poker_ledger.service import LedgerService
from poker_ledger.storage.database import SessionLocal
from poker_ledger.storage.repository import PokerRepository

repo = PokerRepository(SessionLocal)
service = LedgerService(repo)


def get_service() -> LedgerService:
    return service
