from __future__ import annotations

from typing import Any

from fastapi import HTTPException, status

from poker_ledger.api.schemas import ErrorEnvelope
from poker_ledger.domain import (
    DomainValidationError,
    ImbalancedRoundError,
    MissingFieldError,
    PlayerExistsError,
    imbalance_message,
)
from poker_ledger.service import PlayerNotFoundError


def api_error(
    *,
    code: str,
    message: str,
    details: Any | None = None,
    status_code: int = status.HTTP_400_BAD_REQUEST,
) -> HTTPException:
    return HTTPException(
        status_code=status_code,
        detail={
            "code": code,
            "message": message,
            "details": details,
        },
    )


def error_responses(*status_codes: int) -> dict[int | str, dict[str, Any]]:
    """OpenAPI `responses` entries documenting the `api_error` body."""
    return {code: {"model": ErrorEnvelope} for code in status_codes}

def player_not_found(name: str | None, exc: PlayerNotFoundError) -> HTTPException:
    return api_error(
        code="player_not_found",
        message=str(exc),
        details={"name": name} if name else None,
        status_code=status.HTTP_404_NOT_FOUND,
    )


def domain_error(exc: DomainValidationError) -> HTTPException:
    """Translate a user-correctable domain failure into the API error shape."""
    if isinstance(exc, MissingFieldError):
        return api_error(
            code="missing_field",
            message="Please fill all the fields",
            details={"row": exc.row, "field": exc.field},
        )
    if isinstance(exc, ImbalancedRoundError):
        return api_error(
            code="imbalanced_round",
            message=imbalance_message(exc),
            details={"kind": exc.kind.value, "amount": exc.amount},
        )
    if isinstance(exc, PlayerExistsError):
        return api_error(
            code="player_exists",
            message="Player already exists",
            details={"name": exc.name},
            status_code=status.HTTP_409_CONFLICT,
        )
    if isinstance(exc, PlayerNotFoundError):
        return player_not_found(None, exc)
    return api_error(code="validation_error", message=str(exc))
