from __future__ import annotations

from fastapi import APIRouter, Depends, status

from poker_ledger.api.errors import error_responses, player_not_found
from poker_ledger.api.schemas import (
    HistoryPointResponse,
    PlayerStatisticsResponse,
    SingleGameResponse,
    StatisticsSummaryResponse,
)
from poker_ledger.domain import historical_series
from poker_ledger.runtime import get_service
from poker_ledger.service import LedgerService, PlayerNotFoundError

router = APIRouter(prefix="/stats", tags=["stats"])


def _single_game(pair: tuple[str, int] | None) -> SingleGameResponse | None:
    if pair is None:
        return None
    return SingleGameResponse(player_name=pair[0], amount=pair[1])


@router.get("/players", response_model=list[PlayerStatisticsResponse])
def all_player_stats(service: LedgerService = Depends(get_service)) -> list[PlayerStatisticsResponse]:
    return [PlayerStatisticsResponse.from_stats(stats) for stats in service.all_statistics()]


@router.get(
    "/players/{name}",
    response_model=PlayerStatisticsResponse,
    responses=error_responses(status.HTTP_404_NOT_FOUND),
)
def player_stats(name: str, service: LedgerService = Depends(get_service)) -> PlayerStatisticsResponse:
    try:
        stats = service.player_statistics(name)
    except PlayerNotFoundError as exc:
        raise player_not_found(name, exc) from exc
    return PlayerStatisticsResponse.from_stats(stats)


@router.get(
    "/players/{name}/history",
    response_model=list[HistoryPointResponse],
    responses=error_responses(status.HTTP_404_NOT_FOUND),
)
def player_history(name: str, service: LedgerService = Depends(get_service)) -> list[HistoryPointResponse]:
    try:
        history = service.player_history(name)
    except PlayerNotFoundError as exc:
        raise player_not_found(name, exc) from exc
    return [HistoryPointResponse(**point) for point in historical_series(history)]


@router.get("/summary", response_model=StatisticsSummaryResponse)
def stats_summary(service: LedgerService = Depends(get_service)) -> StatisticsSummaryResponse:
    summary = service.statistics_summary()
    return StatisticsSummaryResponse(
        top_performers=[PlayerStatisticsResponse.from_stats(stats) for stats in summary.top_performers],
        most_active=PlayerStatisticsResponse.from_stats(summary.most_active) if summary.most_active else None,
        best_game=_single_game(summary.best_game),
        worst_game=_single_game(summary.worst_game),
    )
