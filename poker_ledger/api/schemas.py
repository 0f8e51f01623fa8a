from __future__ import annotations

from dataclasses import asdict
from datetime import date
from typing import Any

from pydantic import BaseModel, Field

from poker_ledger.config import MAX_AMOUNT, MAX_PLAYERS
from poker_ledger.domain import (
    GameRound,
    PlayerEntry,
    PlayerStatistics,
    SettlementResult,
    streak_description,
    win_rate_percentage,
)


class ErrorResponse(BaseModel):
    code: str
    message: str
    details: Any | None = None


class ErrorEnvelope(BaseModel):
    detail: ErrorResponse


class CreatePlayerRequest(BaseModel):
    name: str = Field(..., examples=["alice"])


class PlayerBalanceResponse(BaseModel):
    name: str
    balance: int


class PlayerRowRequest(BaseModel):
    name: str | None = Field(default=None, examples=["alice"])
    buy_in: int | None = Field(default=None, ge=0, le=MAX_AMOUNT, examples=[100])
    cash_out: int | None = Field(default=None, ge=0, le=MAX_AMOUNT, examples=[150])


class SettleGameRequest(BaseModel):
    players: list[PlayerRowRequest] = Field(..., max_length=MAX_PLAYERS)
    played_on: date | None = None

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "players": [
                        {"name": "alice", "buy_in": 100, "cash_out": 150},
                        {"name": "bob", "buy_in": 100, "cash_out": 50},
                        {"name": "carol", "buy_in": 100, "cash_out": 100},
                    ],
                }
            ]
        }
    }

    def to_round(self) -> GameRound:
        return GameRound(entries=tuple(PlayerEntry(row.name, row.buy_in, row.cash_out) for row in self.players))


class TransferResponse(BaseModel):
    from_player: str = Field(..., alias="from")
    to_player: str = Field(..., alias="to")
    amount: int

    model_config = {"populate_by_name": True}


class SettlementResponse(BaseModel):
    game_day_id: int | None = None
    net: dict[str, int]
    transfers: list[TransferResponse]
    log: list[str]

    @classmethod
    def from_result(cls, result: SettlementResult, game_day_id: int | None = None) -> "SettlementResponse":
        return cls(
            game_day_id=game_day_id,
            net=result.net_by_player,
            transfers=[
                TransferResponse(from_player=t.from_player, to_player=t.to_player, amount=t.amount)
                for t in result.transfers
            ],
            log=result.log,
        )


class GameDayResponse(BaseModel):
    id: int
    played_on: date


class GameDayResultsResponse(BaseModel):
    id: int
    players: list[PlayerBalanceResponse]


class PlayerStatisticsResponse(BaseModel):
    player_name: str
    total_games: int
    games_won: int
    games_lost: int
    total_winnings: int
    current_balance: int
    average_win_loss: float
    best_game: int
    worst_game: int
    current_streak: int
    longest_win_streak: int
    longest_loss_streak: int
    win_rate: float
    streak_description: str

    @classmethod
    def from_stats(cls, stats: PlayerStatistics) -> "PlayerStatisticsResponse":
        return cls(
            **asdict(stats),
            win_rate=win_rate_percentage(stats),
            streak_description=streak_description(stats.current_streak),
        )


class HistoryPointResponse(BaseModel):
    played_on: date
    net: int
    cumulative: int


class SingleGameResponse(BaseModel):
    player_name: str
    amount: int


class StatisticsSummaryResponse(BaseModel):
    top_performers: list[PlayerStatisticsResponse]
    most_active: PlayerStatisticsResponse | None = None
    best_game: SingleGameResponse | None = None
    worst_game: SingleGameResponse | None = None
