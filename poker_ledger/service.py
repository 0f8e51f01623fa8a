from __future__ import annotations

import logging
import re
from datetime import date

from poker_ledger.config import (
    MAX_PLAYERS,
    MAX_USERNAME_LENGTH,
    MIN_PLAYERS,
    MIN_USERNAME_LENGTH,
    USERNAME_PATTERN,
)
from poker_ledger.domain import (
    DomainValidationError,
    GameRound,
    HistoricalEntry,
    ImbalancedRoundError,
    InternalInvariantViolation,
    PlayerStatistics,
    SettlementResult,
    compute_settlement,
    compute_statistics,
)
from poker_ledger.services.stats_service import StatisticsSummary, StatsService
from poker_ledger.storage.repository import GameDayRow, PokerRepository

logger = logging.getLogger(__name__)

_USERNAME_RE = re.compile(USERNAME_PATTERN)


class PlayerNotFoundError(DomainValidationError):
    """Raised when a name is not on the roster."""


def validate_username(name: str) -> str:
    if not name.strip():
        raise DomainValidationError("username cannot be empty")
    if name.strip() != name:
        raise DomainValidationError("username cannot start or end with spaces")
    if len(name) < MIN_USERNAME_LENGTH:
        raise DomainValidationError(f"username too short (minimum {MIN_USERNAME_LENGTH} characters)")
    if len(name) > MAX_USERNAME_LENGTH:
        raise DomainValidationError(f"username too long (maximum {MAX_USERNAME_LENGTH} characters)")
    if not _USERNAME_RE.match(name):
        raise DomainValidationError(
            "username may contain only letters, numbers, spaces, hyphens and underscores"
        )
    return name


class LedgerService:
    def __init__(self, repo: PokerRepository, stats: StatsService | None = None) -> None:
        self.repo = repo
        self.stats = stats or StatsService()

    def add_player(self, name: str) -> int:
        return self.repo.add_player(validate_username(name))

    def balances(self) -> list[tuple[str, int]]:
        return self.repo.list_balances()

    def preview_game(self, game_round: GameRound) -> SettlementResult:
        if not MIN_PLAYERS <= len(game_round) <= MAX_PLAYERS:
            raise DomainValidationError(f"a game needs between {MIN_PLAYERS} and {MAX_PLAYERS} players")
        try:
            return compute_settlement(game_round)
        except ImbalancedRoundError as exc:
            logger.info("Rejected round: %s of %d", exc.kind.value, exc.amount)
            raise
        except InternalInvariantViolation:
            logger.exception("Settlement engine invariant violated for %d players", len(game_round))
            raise

    def finish_game(self, game_round: GameRound, played_on: date | None = None) -> tuple[int, SettlementResult]:
        roster = set(self.repo.list_player_names())
        unknown = [name for name in game_round.player_names if name not in roster]
        if unknown:
            raise PlayerNotFoundError(f"unknown players: {', '.join(unknown)}")

        result = self.preview_game(game_round)
        for line in result.log:
            logger.debug(line)

        game_day_id = self.repo.record_settlement(played_on or date.today(), result.net_by_player)
        logger.info("Settled game day %s with %d transfers", game_day_id, len(result.transfers))
        return game_day_id, result

    def game_days(self) -> list[GameDayRow]:
        return self.repo.list_game_days()

    def results_by_day(self, game_day_id: int) -> list[tuple[str, int]] | None:
        return self.repo.get_results_by_day(game_day_id)

    def player_history(self, name: str) -> list[HistoricalEntry]:
        self._ensure_player(name)
        return self.repo.get_player_history(name)

    def player_statistics(self, name: str) -> PlayerStatistics:
        balance = self._ensure_player(name)
        return compute_statistics(name, balance, self.repo.get_player_history(name))

    def all_statistics(self) -> list[PlayerStatistics]:
        return self.stats.compute_roster(self.repo.get_all_histories())

    def statistics_summary(self) -> StatisticsSummary:
        return self.stats.summary(self.all_statistics())

    def _ensure_player(self, name: str) -> int:
        balance = self.repo.get_balance(name)
        if balance is None:
            raise PlayerNotFoundError(f"player not found: {name}")
        return balance
