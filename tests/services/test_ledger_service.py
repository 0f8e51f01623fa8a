from datetime import date

import pytest

from poker_ledger.domain import DomainValidationError, GameRound, ImbalancedRoundError, PlayerExistsError
from poker_ledger.service import PlayerNotFoundError, validate_username


@pytest.fixture
def roster(service):
    for name in ("alice", "bob", "carol", "dave"):
        service.add_player(name)
    return service


@pytest.mark.parametrize("name", ["", "a", " alice", "alice!", "x" * 51])
def test_invalid_usernames(name: str) -> None:
    with pytest.raises(DomainValidationError):
        validate_username(name)


def test_valid_username() -> None:
    assert validate_username("Big_Al-2 Jr") == "Big_Al-2 Jr"


def test_finish_game_persists_nets(roster) -> None:
    game_round = GameRound.from_rows([("alice", 100, 150), ("bob", 100, 50), ("carol", 100, 100)])

    game_day_id, result = roster.finish_game(game_round, played_on=date(2024, 3, 1))

    assert result.log == ["bob transfer 50 to alice"]
    assert roster.results_by_day(game_day_id) == [("alice", 50), ("carol", 0), ("bob", -50)]
    assert dict(roster.balances()) == {"alice": 50, "bob": -50, "carol": 0, "dave": 0}


def test_imbalanced_game_is_not_persisted(roster) -> None:
    game_round = GameRound.from_rows([("alice", 100, 150), ("bob", 100, 100)])

    with pytest.raises(ImbalancedRoundError):
        roster.finish_game(game_round)

    assert roster.game_days() == []


def test_finish_game_requires_roster_players(roster) -> None:
    with pytest.raises(PlayerNotFoundError):
        roster.finish_game(GameRound.from_rows([("alice", 10, 0), ("zed", 0, 10)]))


def test_player_count_limits(roster) -> None:
    with pytest.raises(DomainValidationError):
        roster.preview_game(GameRound.from_rows([("alice", 10, 10)]))


def test_statistics_after_games(roster) -> None:
    roster.finish_game(GameRound.from_rows([("alice", 0, 30), ("bob", 30, 0)]), played_on=date(2024, 1, 1))
    roster.finish_game(GameRound.from_rows([("alice", 0, 10), ("carol", 10, 0)]), played_on=date(2024, 1, 8))

    alice = roster.player_statistics("alice")
    assert alice.total_games == 2
    assert alice.current_balance == 40
    assert alice.current_streak == 2

    summary = roster.statistics_summary()
    assert [s.player_name for s in summary.top_performers] == ["alice", "dave", "carol"]
    assert summary.worst_game == ("bob", -30)

    with pytest.raises(PlayerNotFoundError):
        roster.player_statistics("ghost")


def test_duplicate_player_is_reported_as_existing(roster) -> None:
    with pytest.raises(PlayerExistsError):
        roster.add_player("alice")
