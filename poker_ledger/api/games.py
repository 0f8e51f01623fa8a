from __future__ import annotations

from fastapi import APIRouter, Depends, status

from poker_ledger.api.errors import api_error, domain_error, error_responses
from poker_ledger.api.schemas import (
    GameDayResponse,
    GameDayResultsResponse,
    PlayerBalanceResponse,
    SettleGameRequest,
    SettlementResponse,
)
from poker_ledger.domain import DomainValidationError
from poker_ledger.runtime import get_service
from poker_ledger.service import LedgerService

router = APIRouter(prefix="/games", tags=["games"])


@router.post(
    "/preview",
    response_model=SettlementResponse,
    summary="Compute transfers without saving",
    responses=error_responses(status.HTTP_400_BAD_REQUEST),
)
def preview_game(payload: SettleGameRequest, service: LedgerService = Depends(get_service)) -> SettlementResponse:
    try:
        result = service.preview_game(payload.to_round())
    except DomainValidationError as exc:
        raise domain_error(exc) from exc
    return SettlementResponse.from_result(result)


@router.post(
    "/settle",
    response_model=SettlementResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Settle a finished game and update balances",
    responses=error_responses(status.HTTP_400_BAD_REQUEST, status.HTTP_404_NOT_FOUND),
)
def settle_game(payload: SettleGameRequest, service: LedgerService = Depends(get_service)) -> SettlementResponse:
    try:
        game_day_id, result = service.finish_game(payload.to_round(), played_on=payload.played_on)
    except DomainValidationError as exc:
        raise domain_error(exc) from exc
    return SettlementResponse.from_result(result, game_day_id=game_day_id)


@router.get("/days", response_model=list[GameDayResponse], summary="All settled game days")
def list_game_days(service: LedgerService = Depends(get_service)) -> list[GameDayResponse]:
    return [GameDayResponse(id=row.id, played_on=row.played_on) for row in service.game_days()]


@router.get(
    "/days/{game_day_id}",
    response_model=GameDayResultsResponse,
    summary="Player results for one day",
    responses=error_responses(status.HTTP_404_NOT_FOUND),
)
def get_game_day(game_day_id: int, service: LedgerService = Depends(get_service)) -> GameDayResultsResponse:
    results = service.results_by_day(game_day_id)
    if results is None:
        raise api_error(
            code="game_day_not_found",
            message=f"Game day {game_day_id} not found",
            details={"id": game_day_id},
            status_code=status.HTTP_404_NOT_FOUND,
        )
    return GameDayResultsResponse(
        id=game_day_id,
        players=[PlayerBalanceResponse(name=name, balance=net) for name, net in results],
    )
