from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Tuple


class DomainValidationError(ValueError):
    """Raised when a game rule is violated."""


class PlayerExistsError(DomainValidationError):
    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"player already exists: {name}")


class SettlementError(DomainValidationError):
    """Base class for user-correctable settlement failures."""


class MissingFieldError(SettlementError):
    def __init__(self, row: int, field: str) -> None:
        self.row = row
        self.field = field
        super().__init__(f"row {row}: {field} is required")


class ImbalanceKind(str, Enum):
    EXCESS = "excess"
    DEFICIT = "deficit"


class ImbalancedRoundError(SettlementError):
    def __init__(self, kind: ImbalanceKind, amount: int) -> None:
        self.kind = kind
        self.amount = amount
        super().__init__(f"round has {kind.value} of {amount}")


class InternalInvariantViolation(RuntimeError):
    """The settlement engine produced an inconsistent state; never caused by input."""


@dataclass(frozen=True)
class PlayerEntry:
    name: str | None
    buy_in: int | None
    cash_out: int | None

    def __post_init__(self) -> None:
        if self.name is not None:
            object.__setattr__(self, "name", self.name.strip())

    @property
    def net(self) -> int:
        return self.cash_out - self.buy_in


@dataclass(frozen=True)
class GameRound:
    entries: Tuple[PlayerEntry, ...]

    def __post_init__(self) -> None:
        entries = tuple(self.entries)
        names = [entry.name for entry in entries if entry.name]
        if len(set(names)) != len(names):
            raise DomainValidationError("players in round must be unique")
        object.__setattr__(self, "entries", entries)

    @classmethod
    def from_rows(cls, rows: Iterable[tuple[str | None, int | None, int | None]]) -> "GameRound":
        return cls(entries=tuple(PlayerEntry(name, buy_in, cash_out) for name, buy_in, cash_out in rows))

    @property
    def player_names(self) -> list[str]:
        return [entry.name for entry in self.entries if entry.name]

    def __len__(self) -> int:
        return len(self.entries)

