"""Per-player performance statistics derived from settled game history."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class HistoricalEntry:
    date: date
    net_result: int


@dataclass(frozen=True)
class PlayerStatistics:
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


@dataclass(frozen=True)
class StreakData:
    current_streak: int = 0
    longest_win_streak: int = 0
    longest_loss_streak: int = 0


def sort_history(history: Iterable[HistoricalEntry]) -> list[HistoricalEntry]:
    # stable: entries sharing a date keep the order they were supplied in
    return sorted(history, key=lambda entry: entry.date)


def calculate_streaks(results: Iterable[int]) -> StreakData:
    """Single pass over chronologically ordered results.

    ``current_streak`` is signed: positive for consecutive wins, negative for
    consecutive losses. A zero result is skipped and neither extends nor
    breaks a run.
    """
    current = 0
    win_run = loss_run = 0
    longest_win = longest_loss = 0

    for result in results:
        if result > 0:
            current = current + 1 if current >= 0 else 1
            win_run += 1
            loss_run = 0
            longest_win = max(longest_win, win_run)
        elif result < 0:
            current = current - 1 if current <= 0 else -1
            loss_run += 1
            win_run = 0
            longest_loss = max(longest_loss, loss_run)

    return StreakData(current_streak=current, longest_win_streak=longest_win, longest_loss_streak=longest_loss)


def compute_statistics(
    player_name: str,
    current_balance: int,
    history: Iterable[HistoricalEntry],
) -> PlayerStatistics:
    """Recompute a player's aggregate from scratch.

    The history is sorted by date here; callers need not pre-sort it. Draws
    count toward ``total_games`` only. An empty history yields zeroed values.
    """
    ordered = sort_history(history)
    results = [entry.net_result for entry in ordered]

    total_games = len(results)
    total_winnings = sum(results)
    streaks = calculate_streaks(results)

    return PlayerStatistics(
        player_name=player_name,
        total_games=total_games,
        games_won=sum(1 for result in results if result > 0),
        games_lost=sum(1 for result in results if result < 0),
        total_winnings=total_winnings,
        current_balance=current_balance,
        average_win_loss=total_winnings / total_games if total_games else 0.0,
        best_game=max(results, default=0),
        worst_game=min(results, default=0),
        current_streak=streaks.current_streak,
        longest_win_streak=streaks.longest_win_streak,
        longest_loss_streak=streaks.longest_loss_streak,
    )


def historical_series(history: Iterable[HistoricalEntry]) -> list[dict[str, object]]:
    """Date-ordered chart series with a running cumulative total."""
    series: list[dict[str, object]] = []
    running = 0
    for entry in sort_history(history):
        running += entry.net_result
        series.append({"played_on": entry.date, "net": entry.net_result, "cumulative": running})
    return series


def top_performers(stats: Sequence[PlayerStatistics], limit: int = 3) -> list[PlayerStatistics]:
    return sorted(stats, key=lambda item: item.current_balance, reverse=True)[:limit]


def most_active_player(stats: Sequence[PlayerStatistics]) -> PlayerStatistics | None:
    return max(stats, key=lambda item: item.total_games, default=None)


def best_single_game(stats: Sequence[PlayerStatistics]) -> tuple[str, int] | None:
    best = max(stats, key=lambda item: item.best_game, default=None)
    return (best.player_name, best.best_game) if best else None


def worst_single_game(stats: Sequence[PlayerStatistics]) -> tuple[str, int] | None:
    worst = min(stats, key=lambda item: item.worst_game, default=None)
    return (worst.player_name, worst.worst_game) if worst else None


def win_rate_percentage(stats: PlayerStatistics) -> float:
    if stats.total_games > 0:
        return stats.games_won / stats.total_games * 100
    return 0.0


def streak_description(streak: int) -> str:
    if streak > 0:
        return f"{streak} game winning streak"
    if streak < 0:
        return f"{abs(streak)} game losing streak"
    return "No current streak"
