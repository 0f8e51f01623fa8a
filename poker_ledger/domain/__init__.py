from .game import (
    DomainValidationError,
    GameRound,
    ImbalanceKind,
    ImbalancedRoundError,
    InternalInvariantViolation,
    MissingFieldError,
    PlayerEntry,
    PlayerExistsError,
    SettlementError,
)
from .settlement import (
    SettlementResult,
    TransferInstruction,
    build_transfers,
    calculate_net,
    check_conservation,
    compute_settlement,
    imbalance_message,
)
from .statistics import (
    HistoricalEntry,
    PlayerStatistics,
    best_single_game,
    calculate_streaks,
    compute_statistics,
    historical_series,
    most_active_player,
    streak_description,
    top_performers,
    win_rate_percentage,
    worst_single_game,
)

__all__ = [
    "DomainValidationError",
    "GameRound",
    "HistoricalEntry",
    "ImbalanceKind",
    "ImbalancedRoundError",
    "InternalInvariantViolation",
    "MissingFieldError",
    "PlayerEntry",
    "PlayerExistsError",
    "PlayerStatistics",
    "SettlementError",
    "SettlementResult",
    "TransferInstruction",
    "best_single_game",
    "build_transfers",
    "calculate_net",
    "calculate_streaks",
    "check_conservation",
    "compute_settlement",
    "compute_statistics",
    "historical_series",
    "imbalance_message",
    "most_active_player",
    "streak_description",
    "top_performers",
    "win_rate_percentage",
    "worst_single_game",
]
