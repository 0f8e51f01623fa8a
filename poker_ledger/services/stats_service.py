from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass

from poker_ledger.config import STATS_WORKERS
from poker_ledger.domain import (
    HistoricalEntry,
    PlayerStatistics,
    best_single_game,
    compute_statistics,
    most_active_player,
    top_performers,
    worst_single_game,
)

logger = logging.getLogger(__name__)

PlayerRecord = tuple[int, Sequence[HistoricalEntry]]


@dataclass
class StatisticsSummary:
    top_performers: list[PlayerStatistics]
    most_active: PlayerStatistics | None
    best_game: tuple[str, int] | None
    worst_game: tuple[str, int] | None


class StatsService:
    """Computes statistics for a whole roster, one independent job per player."""

    def __init__(self, max_workers: int = STATS_WORKERS) -> None:
        self.max_workers = max(1, max_workers)

    def compute_roster(self, records: Mapping[str, PlayerRecord]) -> list[PlayerStatistics]:
        if not records:
            return []

        with ThreadPoolExecutor(max_workers=self.max_workers) as pool:
            futures = [
                pool.submit(compute_statistics, name, balance, list(history))
                for name, (balance, history) in records.items()
            ]
            stats = [future.result() for future in futures]

        logger.debug("Computed statistics for %d players", len(stats))
        return sorted(stats, key=lambda item: item.current_balance, reverse=True)

    def summary(self, stats: Sequence[PlayerStatistics]) -> StatisticsSummary:
        return StatisticsSummary(
            top_performers=top_performers(stats),
            most_active=most_active_player(stats),
            best_game=best_single_game(stats),
            worst_game=worst_single_game(stats),
        )
