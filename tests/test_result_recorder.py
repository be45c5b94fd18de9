import logging

import pytest

from chessscoreboard.constants import BYE
from chessscoreboard.exceptions import InvalidResultException, ResultNotFoundException
from chessscoreboard.models import Match, MatchOutcome
from chessscoreboard.tournament import ResultRecorder


@pytest.fixture
def recorder():
    return ResultRecorder()


def _league_match():
    return Match(id="m1", player1="A", player2="B")


def _knockout_match():
    return Match(id="r1_m1", player1="A", player2="B", round=1)


def _bye_match():
    return Match(
        id="r1_m2",
        player1="C",
        player2=BYE,
        result=MatchOutcome.BYE,
        round=1,
        winner="C",
    )


def test_record_league_result(recorder):
    match = recorder.record_result(_league_match(), "draw")
    assert match.result is MatchOutcome.DRAW
    assert match.winner is None


@pytest.mark.parametrize(
    "outcome, winner",
    [(MatchOutcome.PLAYER1, "A"), ("player2", "B"), (" Player1 ", "A")],
)
def test_record_knockout_sets_winner(recorder, outcome, winner):
    match = recorder.record_result(_knockout_match(), outcome)
    assert match.winner == winner


def test_knockout_draw_rejected(recorder):
    with pytest.raises(InvalidResultException, match="draws are not allowed"):
        recorder.record_result(_knockout_match(), "draw")


def test_unknown_outcome_rejected(recorder):
    with pytest.raises(InvalidResultException):
        recorder.record_result(_league_match(), "white")


def test_manual_bye_rejected(recorder):
    with pytest.raises(InvalidResultException):
        recorder.record_result(_league_match(), "bye")


def test_bye_match_cannot_take_result(recorder):
    with pytest.raises(InvalidResultException):
        recorder.record_result(_bye_match(), "player1")
    with pytest.raises(InvalidResultException):
        recorder.clear_result(_bye_match())


def test_overwrite_is_logged(recorder, caplog):
    match = recorder.record_result(_league_match(), "player1")
    with caplog.at_level(logging.WARNING, logger="chessscoreboard"):
        recorder.record_result(match, "player2")
    assert match.result is MatchOutcome.PLAYER2
    assert "overwriting" in caplog.text


def test_clear_result(recorder):
    match = recorder.record_result(_knockout_match(), "player1")
    recorder.clear_result(match)
    assert match.result is None
    assert match.winner is None


def test_find_match(recorder):
    matches = [_league_match(), Match(id="m2", player1="A", player2="C")]
    assert recorder.find_match(matches, "m2") is matches[1]
    with pytest.raises(ResultNotFoundException):
        recorder.find_match(matches, "m9")
