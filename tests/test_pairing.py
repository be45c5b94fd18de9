import random
from collections import Counter

import pytest

from chessscoreboard.constants import BYE
from chessscoreboard.exceptions import (
    DuplicatePlayerException,
    InvalidPairingException,
    InvalidPlayerDataException,
    TournamentStateException,
)
from chessscoreboard.models import MatchOutcome
from chessscoreboard.pairing import (
    generate_knockout_bracket,
    generate_next_knockout_round,
    generate_round_robin_matches,
    shuffle_players,
)


def _names(n):
    return [f"P{i}" for i in range(1, n + 1)]


def test_shuffle_preserves_elements_and_input():
    items = ["a", "b", "b", "c", "d", "d", "d"]
    original = list(items)

    result = shuffle_players(items, random.Random(7))

    assert Counter(result) == Counter(original)
    assert items == original
    assert result is not items


@pytest.mark.parametrize("items", [[], ["solo"]])
def test_shuffle_trivial_inputs_return_copy(items):
    result = shuffle_players(items)
    assert result == items
    assert result is not items


def test_shuffle_is_reproducible_with_seed():
    players = _names(10)
    assert shuffle_players(players, random.Random(42)) == shuffle_players(
        players, random.Random(42)
    )


def test_shuffle_reaches_every_permutation_of_three():
    rng = random.Random(2025)
    seen = {tuple(shuffle_players(["A", "B", "C"], rng)) for _ in range(600)}
    assert len(seen) == 6


def test_round_robin_example():
    matches = generate_round_robin_matches(["A", "B", "C"])

    assert [(m.id, m.player1, m.player2) for m in matches] == [
        ("m1", "A", "B"),
        ("m2", "A", "C"),
        ("m3", "B", "C"),
    ]
    assert all(m.result is None for m in matches)
    assert all(m.round is None and m.winner is None for m in matches)


@pytest.mark.parametrize("n", range(0, 12))
def test_round_robin_every_pair_once(n):
    players = _names(n)
    matches = generate_round_robin_matches(players)

    assert len(matches) == n * (n - 1) // 2
    pairs = [frozenset((m.player1, m.player2)) for m in matches]
    assert len(set(pairs)) == len(pairs)
    assert all(m.player1 != m.player2 for m in matches)
    assert [m.id for m in matches] == [f"m{k}" for k in range(1, len(matches) + 1)]


def test_round_robin_orders_by_input_index():
    players = ["Zoe", "Adam", "Mia", "Bob"]
    matches = generate_round_robin_matches(players)

    indices = [(players.index(m.player1), players.index(m.player2)) for m in matches]
    assert indices == sorted(indices)
    assert all(i < j for i, j in indices)


def test_round_robin_rejects_duplicates():
    with pytest.raises(DuplicatePlayerException):
        generate_round_robin_matches(["A", "B", "A"])


@pytest.mark.parametrize("players", [None, "ABC", 5])
def test_generators_reject_missing_player_list(players):
    with pytest.raises(InvalidPairingException):
        generate_round_robin_matches(players)
    with pytest.raises(InvalidPairingException):
        generate_knockout_bracket(players)


def test_round_robin_rejects_bye_name():
    with pytest.raises(InvalidPlayerDataException):
        generate_round_robin_matches(["A", BYE])


def test_knockout_five_players():
    matches = generate_knockout_bracket(_names(5), random.Random(1))

    assert [m.id for m in matches] == ["r1_m1", "r1_m2", "r1_m3"]
    assert all(m.round == 1 for m in matches)
    byes = [m for m in matches if m.result is MatchOutcome.BYE]
    assert len(byes) == 1
    assert byes[0].player2 == BYE
    assert byes[0].winner == byes[0].player1
    assert byes[0] is matches[-1]


@pytest.mark.parametrize("n", range(0, 12))
def test_knockout_match_count_and_byes(n):
    players = _names(n)
    matches = generate_knockout_bracket(players, random.Random(n))

    assert len(matches) == (n + 1) // 2
    bye_count = sum(1 for m in matches if m.result is MatchOutcome.BYE)
    assert bye_count == n % 2

    entrants = [p for m in matches for p in m.players()]
    assert sorted(entrants) == sorted(players)

    for match in matches:
        if match.result is not MatchOutcome.BYE:
            assert match.result is None
            assert match.winner is None


def test_knockout_single_player_gets_bye():
    matches = generate_knockout_bracket(["Solo"])

    assert len(matches) == 1
    assert matches[0].player1 == "Solo"
    assert matches[0].player2 == BYE
    assert matches[0].winner == "Solo"


def test_knockout_empty():
    assert generate_knockout_bracket([]) == []


def test_knockout_is_randomised():
    players = _names(8)
    orderings = {
        tuple(p for m in generate_knockout_bracket(players) for p in m.players())
        for _ in range(100)
    }
    assert len(orderings) > 1


def test_knockout_does_not_mutate_input():
    players = _names(7)
    generate_knockout_bracket(players)
    assert players == _names(7)


def _decide_all(matches):
    for match in matches:
        if match.winner is None:
            match.result = MatchOutcome.PLAYER1
            match.winner = match.player1


def test_next_round_pairs_winners_in_bracket_order():
    first = generate_knockout_bracket(_names(6), random.Random(3))
    _decide_all(first)

    second = generate_next_knockout_round(first)

    assert [m.id for m in second] == ["r2_m1", "r2_m2"]
    assert all(m.round == 2 for m in second)
    assert second[0].player1 == first[0].winner
    assert second[0].player2 == first[1].winner
    assert second[1].player1 == first[2].winner
    assert second[1].player2 == BYE
    assert second[1].result is MatchOutcome.BYE


def test_next_round_uses_latest_round_only():
    matches = generate_knockout_bracket(_names(4), random.Random(5))
    _decide_all(matches)
    matches += generate_next_knockout_round(matches)

    with pytest.raises(TournamentStateException, match="final"):
        generate_next_knockout_round(matches)


def test_next_round_requires_winners():
    matches = generate_knockout_bracket(_names(4), random.Random(5))
    with pytest.raises(TournamentStateException, match="without a winner"):
        generate_next_knockout_round(matches)


def test_next_round_requires_a_bracket():
    with pytest.raises(TournamentStateException):
        generate_next_knockout_round([])
    with pytest.raises(TournamentStateException):
        generate_next_knockout_round(generate_round_robin_matches(["A", "B"]))
