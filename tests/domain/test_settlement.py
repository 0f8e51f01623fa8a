from collections import defaultdict

import pytest

from poker_ledger.domain import (
    GameRound,
    ImbalanceKind,
    ImbalancedRoundError,
    InternalInvariantViolation,
    MissingFieldError,
    SettlementError,
    TransferInstruction,
    build_transfers,
    compute_settlement,
    imbalance_message,
)


def _round(*rows):
    return GameRound.from_rows(rows)


BALANCED_ROUNDS = [
    _round(("A", 100, 150), ("B", 100, 50), ("C", 100, 100)),
    _round(("A", 0, 100), ("B", 0, 50), ("C", 50, 0), ("D", 100, 0)),
    _round(("A", 200, 30), ("B", 50, 120), ("C", 75, 75), ("D", 10, 95), ("E", 40, 55)),
    _round(("A", 10, 0), ("B", 10, 0), ("C", 10, 0), ("D", 0, 15), ("E", 0, 15)),
    _round(("A", 30, 60), ("B", 30, 50), ("C", 30, 20), ("D", 50, 10)),
]


def test_single_transfer_with_break_even_player() -> None:
    result = compute_settlement(_round(("A", 100, 150), ("B", 100, 50), ("C", 100, 100)))

    assert result.net_by_player == {"A": 50, "B": -50, "C": 0}
    assert result.transfers == [TransferInstruction(from_player="B", to_player="A", amount=50)]
    assert result.log == ["B transfer 50 to A"]


def test_largest_loser_pays_largest_gainer_first() -> None:
    result = compute_settlement(_round(("A", 0, 100), ("B", 0, 50), ("C", 50, 0), ("D", 100, 0)))

    assert result.transfers == [
        TransferInstruction("D", "A", 100),
        TransferInstruction("C", "B", 50),
    ]


def test_ties_after_partial_transfer_follow_input_order() -> None:
    # A:+30 B:+20 C:-10 D:-40; after D pays A, C and D both owe 10
    result = compute_settlement(_round(("A", 30, 60), ("B", 30, 50), ("C", 30, 20), ("D", 50, 10)))

    assert result.transfers == [
        TransferInstruction("D", "A", 30),
        TransferInstruction("C", "B", 10),
        TransferInstruction("D", "B", 10),
    ]


def test_equal_gainers_keep_input_order() -> None:
    result = compute_settlement(_round(("A", 0, 50), ("B", 0, 50), ("C", 100, 0)))

    assert [(t.from_player, t.to_player, t.amount) for t in result.transfers] == [("C", "A", 50), ("C", "B", 50)]


def test_deficit_reports_exact_amount() -> None:
    with pytest.raises(ImbalancedRoundError) as exc_info:
        compute_settlement(_round(("A", 100, 150), ("B", 100, 100)))

    assert exc_info.value.kind == ImbalanceKind.DEFICIT
    assert exc_info.value.amount == 50
    assert imbalance_message(exc_info.value) == "You have a deficit of 50."


def test_excess_reports_exact_amount() -> None:
    with pytest.raises(ImbalancedRoundError) as exc_info:
        compute_settlement(_round(("A", 100, 20), ("B", 100, 100)))

    assert exc_info.value.kind == ImbalanceKind.EXCESS
    assert exc_info.value.amount == 80
    assert imbalance_message(exc_info.value) == "You have an excess of 80."


@pytest.mark.parametrize(
    "rows, field",
    [
        ((("A", 100, 100), ("", 50, 50)), "name"),
        ((("A", 100, 100), ("   ", 50, 50)), "name"),
        ((("A", None, 100), ("B", 100, 100)), "buy_in"),
        ((("A", 100, 100), ("B", 100, None)), "cash_out"),
    ],
)
def test_missing_fields_are_reported(rows, field) -> None:
    with pytest.raises(MissingFieldError) as exc_info:
        compute_settlement(GameRound.from_rows(rows))

    assert exc_info.value.field == field
    assert isinstance(exc_info.value, SettlementError)


def test_all_break_even_round_needs_no_transfers() -> None:
    result = compute_settlement(_round(("A", 100, 100), ("B", 20, 20)))

    assert result.transfers == []


@pytest.mark.parametrize("game_round", BALANCED_ROUNDS)
def test_transfers_reproduce_net_balances(game_round) -> None:
    result = compute_settlement(game_round)

    received = defaultdict(int)
    for transfer in result.transfers:
        received[transfer.to_player] += transfer.amount
        received[transfer.from_player] -= transfer.amount

    assert {name: received[name] for name in result.net_by_player} == result.net_by_player


@pytest.mark.parametrize("game_round", BALANCED_ROUNDS)
def test_transfers_are_bounded_positive_and_between_distinct_players(game_round) -> None:
    result = compute_settlement(game_round)
    active = sum(1 for amount in result.net_by_player.values() if amount != 0)

    assert len(result.transfers) <= max(active - 1, 0)
    assert all(t.amount > 0 and t.from_player != t.to_player for t in result.transfers)


@pytest.mark.parametrize("game_round", BALANCED_ROUNDS)
def test_settlement_is_deterministic(game_round) -> None:
    assert compute_settlement(game_round).transfers == compute_settlement(game_round).transfers


def test_unbalanced_net_is_an_internal_error_not_a_user_error() -> None:
    with pytest.raises(InternalInvariantViolation) as exc_info:
        build_transfers({"A": 50, "B": -30})

    assert not isinstance(exc_info.value, SettlementError)
