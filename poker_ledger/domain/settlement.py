"""Domain logic for settling a poker round into peer-to-peer transfers."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field

from .game import (
    DomainValidationError,
    GameRound,
    ImbalanceKind,
    ImbalancedRoundError,
    InternalInvariantViolation,
    MissingFieldError,
)


@dataclass(frozen=True)
class TransferInstruction:
    from_player: str
    to_player: str
    amount: int

    def to_log_line(self) -> str:
        return f"{self.from_player} transfer {self.amount} to {self.to_player}"


@dataclass
class SettlementResult:
    net_by_player: dict[str, int]
    transfers: list[TransferInstruction] = field(default_factory=list)

    @property
    def log(self) -> list[str]:
        return [transfer.to_log_line() for transfer in self.transfers]


def validate_round(game_round: GameRound) -> None:
    for row, entry in enumerate(game_round.entries, start=1):
        if not entry.name:
            raise MissingFieldError(row, "name")
        if entry.buy_in is None:
            raise MissingFieldError(row, "buy_in")
        if entry.cash_out is None:
            raise MissingFieldError(row, "cash_out")
        if entry.buy_in < 0 or entry.cash_out < 0:
            raise DomainValidationError(f"row {row}: amounts must be non-negative")


def calculate_net(game_round: GameRound) -> dict[str, int]:
    validate_round(game_round)
    return {entry.name: entry.net for entry in game_round.entries}


def check_conservation(net: Mapping[str, int]) -> None:
    total = sum(net.values())
    if total < 0:
        raise ImbalancedRoundError(ImbalanceKind.EXCESS, -total)
    if total > 0:
        raise ImbalancedRoundError(ImbalanceKind.DEFICIT, total)


def build_transfers(net: Mapping[str, int]) -> list[TransferInstruction]:
    """Greedy largest-first matching of losers to gainers.

    Both sides are kept ordered by remaining amount, descending, with ties
    broken by the player's position in ``net``. After a partial transfer the
    reduced party is re-sorted into place before the next match.
    """
    # [remaining, input position, name]
    gainers = [[amount, idx, name] for idx, (name, amount) in enumerate(net.items()) if amount > 0]
    losers = [[-amount, idx, name] for idx, (name, amount) in enumerate(net.items()) if amount < 0]

    def _order(party: list) -> tuple[int, int]:
        return (-party[0], party[1])

    gainers.sort(key=_order)
    losers.sort(key=_order)

    transfers: list[TransferInstruction] = []
    while gainers and losers:
        gainer = gainers[0]
        loser = losers[0]

        amount = min(gainer[0], loser[0])
        transfers.append(TransferInstruction(from_player=loser[2], to_player=gainer[2], amount=amount))

        gainer[0] -= amount
        loser[0] -= amount

        if gainer[0] == 0:
            gainers.pop(0)
        else:
            gainers.sort(key=_order)
        if loser[0] == 0:
            losers.pop(0)
        else:
            losers.sort(key=_order)

    if gainers or losers:
        leftover = ", ".join(f"{party[2]}={party[0]}" for party in gainers + losers)
        raise InternalInvariantViolation(f"unmatched balances after settlement: {leftover}")

    return transfers


def compute_settlement(game_round: GameRound) -> SettlementResult:
    """Validate a round and turn its net balances into ordered transfers.

    Raises ``MissingFieldError`` or ``ImbalancedRoundError`` for bad input;
    no transfers are produced in that case.
    """
    net = calculate_net(game_round)
    check_conservation(net)
    return SettlementResult(net_by_player=net, transfers=build_transfers(net))


def imbalance_message(error: ImbalancedRoundError) -> str:
    if error.kind == ImbalanceKind.EXCESS:
        return f"You have an excess of {error.amount}."
    return f"You have a deficit of {error.amount}."
