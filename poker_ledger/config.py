from __future__ import annotations

import logging
import os

DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./poker_ledger.db")
LOG_LEVEL = os.getenv("POKER_LEDGER_LOG_LEVEL", "INFO")
STATS_WORKERS = int(os.getenv("POKER_LEDGER_STATS_WORKERS", "4"))

MIN_PLAYERS = 2
MAX_PLAYERS = 9
MAX_AMOUNT = 1_000_000

MIN_USERNAME_LENGTH = 2
MAX_USERNAME_LENGTH = 50
USERNAME_PATTERN = r"^[A-Za-z0-9 _-]+$"


def configure_logging(level: str | None = None) -> None:
    logging.basicConfig(
        level=(level or LOG_LEVEL).upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
