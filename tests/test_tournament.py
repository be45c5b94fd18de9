import json
import random
from datetime import datetime, timezone

import pytest

from chessscoreboard.exceptions import (
    DuplicatePlayerException,
    FileLoadException,
    InvalidPlayerDataException,
    TournamentStateException,
)
from chessscoreboard.models import Match, MatchOutcome
from chessscoreboard.tournament import Tournament, TournamentConfig, TournamentFormat


def _play_out(tournament):
    """Give every pending knockout match to player1 and advance to the final."""
    while tournament.champion is None:
        for match in tournament.pending_matches():
            tournament.record_result(match.id, "player1")
        if tournament.champion is None:
            tournament.advance_round()


def test_create_league():
    tournament = Tournament.create(
        "Club Championship", "league", [" Anna ", "Ben", "", "Cleo"]
    )

    assert tournament.players == ["Anna", "Ben", "Cleo"]
    assert [m.id for m in tournament.matches] == ["m1", "m2", "m3"]
    assert tournament.config.format is TournamentFormat.LEAGUE
    assert not tournament.is_complete


def test_create_rejects_too_few_players():
    with pytest.raises(InvalidPlayerDataException):
        Tournament.create("Solo", TournamentFormat.LEAGUE, ["Anna", "  "])


def test_create_rejects_duplicates():
    with pytest.raises(DuplicatePlayerException):
        Tournament.create("Dup", TournamentFormat.KNOCKOUT, ["Anna", "Anna "])


def test_league_standings_and_completion():
    tournament = Tournament.create("League", "league", ["A", "B", "C"])
    tournament.record_result("m1", "player1")
    tournament.record_result("m2", "draw")
    tournament.record_result("m3", MatchOutcome.PLAYER2)

    assert tournament.is_complete
    assert [s.name for s in tournament.standings()] == ["A", "C", "B"]


def test_advance_round_rejected_for_league():
    tournament = Tournament.create("League", "league", ["A", "B"])
    with pytest.raises(TournamentStateException):
        tournament.advance_round()


@pytest.mark.parametrize("n", [2, 3, 5, 8, 11])
def test_knockout_plays_out_to_a_champion(n):
    players = [f"P{i}" for i in range(n)]
    tournament = Tournament.create("Cup", "knockout", players, rng=random.Random(n))

    _play_out(tournament)

    assert tournament.is_complete
    assert tournament.champion in players
    # every non-bye match eliminates exactly one player
    played = [m for m in tournament.matches if not m.is_bye]
    assert len(played) == n - 1


def test_earlier_rounds_are_locked_after_advancing():
    tournament = Tournament.create(
        "Cup", "knockout", ["A", "B", "C", "D"], rng=random.Random(4)
    )
    tournament.record_result("r1_m1", "player1")
    tournament.record_result("r1_m2", "player2")
    tournament.advance_round()

    with pytest.raises(TournamentStateException):
        tournament.record_result("r1_m1", "player2")
    with pytest.raises(TournamentStateException):
        tournament.clear_result("r1_m2")


def test_dict_roundtrip_preserves_state():
    tournament = Tournament.create(
        "Cup", "knockout", ["A", "B", "C"], rng=random.Random(1)
    )
    tournament.record_result("r1_m1", "player2")

    restored = Tournament.from_dict(tournament.to_dict())

    assert restored.players == tournament.players
    assert restored.matches == tournament.matches
    assert restored.config == tournament.config


def test_save_and_load(tmp_path):
    tournament = Tournament.create("League", "league", ["A", "B", "C"])
    tournament.record_result("m2", "draw")

    path = tournament.save(tmp_path / "league")

    assert path.name == "league.json"
    data = json.loads(path.read_text(encoding="utf-8"))
    assert data["matches"][1]["result"] == "draw"
    assert "round" not in data["matches"][0]

    loaded = Tournament.load(path)
    assert loaded.matches[1].result is MatchOutcome.DRAW
    assert loaded.config.name == "League"


def test_load_missing_file(tmp_path):
    with pytest.raises(FileLoadException):
        Tournament.load(tmp_path / "missing.json")


def test_load_rejects_unknown_result(tmp_path):
    path = tmp_path / "bad.json"
    path.write_text(
        json.dumps(
            {
                "config": {"name": "Bad"},
                "players": ["A", "B"],
                "matches": [
                    {"id": "m1", "player1": "A", "player2": "B", "result": "white"}
                ],
            }
        ),
        encoding="utf-8",
    )
    with pytest.raises(FileLoadException):
        Tournament.load(path)


@pytest.mark.parametrize("content", ["[]", "\"x\"", "42", "{\"config\": []}"])
def test_load_rejects_non_object_files(tmp_path, content):
    path = tmp_path / "odd.json"
    path.write_text(content, encoding="utf-8")
    with pytest.raises(FileLoadException):
        Tournament.load(path)


def test_save_keeps_existing_suffix(tmp_path):
    tournament = Tournament.create("Cup", "league", ["A", "B"])

    path = tournament.save(tmp_path / "cup.txt")

    assert path == tmp_path / "cup.txt"
    assert Tournament.load(path).players == ["A", "B"]


def test_config_from_dict_parses_timestamp():
    config = TournamentConfig.from_dict(
        {"name": "Open", "format": "knockout", "created_at": "2026-03-05T10:30:00Z"}
    )
    assert config.format is TournamentFormat.KNOCKOUT
    assert config.created_at == datetime(2026, 3, 5, 10, 30, tzinfo=timezone.utc)


def test_config_defaults():
    config = TournamentConfig.from_dict({})
    assert config.name == "Untitled Tournament"
    assert config.format is TournamentFormat.LEAGUE


def test_match_dict_shape():
    league = Match(id="m1", player1="A", player2="B")
    knockout = Match(id="r1_m1", player1="A", player2="B", round=1)
    assert league.to_dict() == {
        "id": "m1",
        "player1": "A",
        "player2": "B",
        "result": None,
    }
    assert knockout.to_dict()["round"] == 1
    assert knockout.to_dict()["winner"] is None
