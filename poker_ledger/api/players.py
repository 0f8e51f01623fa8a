from __future__ import annotations

from fastapi import APIRouter, Depends, status

from poker_ledger.api.errors import domain_error, error_responses
from poker_ledger.api.schemas import CreatePlayerRequest, PlayerBalanceResponse
from poker_ledger.domain import DomainValidationError
from poker_ledger.runtime import get_service
from poker_ledger.service import LedgerService

router = APIRouter(prefix="/players", tags=["players"])


@router.post(
    "",
    response_model=PlayerBalanceResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Add a player to the roster",
    responses=error_responses(status.HTTP_400_BAD_REQUEST, status.HTTP_409_CONFLICT),
)
def create_player(payload: CreatePlayerRequest, service: LedgerService = Depends(get_service)) -> PlayerBalanceResponse:
    try:
        service.add_player(payload.name)
    except DomainValidationError as exc:
        raise domain_error(exc) from exc
    return PlayerBalanceResponse(name=payload.name, balance=0)


@router.get("", response_model=list[PlayerBalanceResponse], summary="Roster with cumulative balances")
def list_players(service: LedgerService = Depends(get_service)) -> list[PlayerBalanceResponse]:
    return [PlayerBalanceResponse(name=name, balance=balance) for name, balance in service.balances()]
