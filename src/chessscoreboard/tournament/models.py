"""Core data models for tournament management.

A :class:`Tournament` ties a player list to the fixtures generated for it
and is the unit the persistence layer stores, one JSON document per event.
"""

# Chess Scoreboard
# Copyright (C) 2025  Chess Scoreboard developers
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.

import json
import random
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from dateutil import parser as date_parser

from chessscoreboard.constants import (
    DEFAULT_TOURNAMENT_NAME,
    FORMAT_KNOCKOUT,
    FORMAT_LEAGUE,
    SAVE_FILE_EXTENSION,
)
from chessscoreboard.exceptions import (
    FileLoadException,
    FileSaveException,
    InvalidPlayerDataException,
    InvalidResultException,
    TournamentStateException,
)
from chessscoreboard.models import Match, MatchOutcome, Standing
from chessscoreboard.pairing import (
    generate_knockout_bracket,
    generate_next_knockout_round,
    generate_round_robin_matches,
    latest_round,
)
from chessscoreboard.tournament.result_recorder import ResultRecorder
from chessscoreboard.tournament.standings import calculate_standings
from chessscoreboard.type_hints import MaybePlayer, PlayerName
from chessscoreboard.utils import setup_logger
from chessscoreboard.utils.validation import validate_player_names

logger = setup_logger(__name__)


class TournamentFormat(Enum):
    """Supported tournament formats."""

    LEAGUE = FORMAT_LEAGUE
    KNOCKOUT = FORMAT_KNOCKOUT


@dataclass
class TournamentConfig:
    """Configuration settings for a tournament.

    Attributes:
        name: Tournament name
        format: League (round-robin) or knockout
        created_at: When the tournament was created (UTC)
    """

    name: str
    format: TournamentFormat = TournamentFormat.LEAGUE
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def to_dict(self) -> Dict[str, Any]:
        """Serialize configuration to dictionary."""
        return {
            "name": self.name,
            "format": self.format.value,
            "created_at": self.created_at.isoformat(),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TournamentConfig":
        """Deserialize configuration from dictionary."""
        created_at = data.get("created_at")
        return cls(
            name=data.get("name", DEFAULT_TOURNAMENT_NAME),
            format=TournamentFormat(data.get("format", FORMAT_LEAGUE)),
            created_at=(
                date_parser.isoparse(created_at)
                if created_at
                else datetime.now(timezone.utc)
            ),
        )


class Tournament:
    """A tournament: its configuration, registered players and fixtures.

    Usage:
        tournament = Tournament.create("Club Championship", TournamentFormat.LEAGUE, names)
        tournament.record_result("m1", "player1")
        table = tournament.standings()
    """

    def __init__(
        self,
        config: TournamentConfig,
        players: List[PlayerName],
        matches: Optional[List[Match]] = None,
    ):
        self.config = config
        self.players = players
        self.matches: List[Match] = matches if matches is not None else []
        self.recorder = ResultRecorder()

    @classmethod
    def create(
        cls,
        name: str,
        tournament_format: Union[TournamentFormat, str],
        players: List[Optional[str]],
        rng: Optional[random.Random] = None,
    ) -> "Tournament":
        """Register players and generate the opening fixtures.

        Args:
            name: Tournament name
            tournament_format: League or knockout
            players: Raw player names; blanks are dropped, whitespace trimmed
            rng: Random source for knockout seeding

        Raises:
            InvalidPlayerDataException: If fewer than two players remain
            DuplicatePlayerException: If a name occurs more than once
        """
        tournament_format = TournamentFormat(tournament_format)
        names = validate_player_names(players)
        if len(names) < 2:
            raise InvalidPlayerDataException(
                "A tournament needs at least 2 players"
            )

        config = TournamentConfig(name=name, format=tournament_format)
        if tournament_format is TournamentFormat.KNOCKOUT:
            matches = generate_knockout_bracket(names, rng)
        else:
            matches = generate_round_robin_matches(names)

        logger.info(
            "Created %s tournament '%s' with %s players and %s matches",
            tournament_format.value,
            name,
            len(names),
            len(matches),
        )
        return cls(config, names, matches)

    @property
    def is_knockout(self) -> bool:
        return self.config.format is TournamentFormat.KNOCKOUT

    @property
    def current_round_number(self) -> int:
        """Latest knockout round, or 0 for a league."""
        rounds = [m.round for m in self.matches if m.round is not None]
        return max(rounds) if rounds else 0

    @property
    def is_complete(self) -> bool:
        if self.is_knockout:
            return self.champion is not None
        return all(m.is_settled for m in self.matches)

    @property
    def champion(self) -> MaybePlayer:
        """Winner of the knockout final, once it has been played."""
        if not self.is_knockout:
            return None
        final = latest_round(self.matches)
        if len(final) == 1:
            return final[0].winner
        return None

    def pending_matches(self) -> List[Match]:
        return [m for m in self.matches if not m.is_settled]

    def standings(self) -> List[Standing]:
        return calculate_standings(self.players, self.matches)

    def _ensure_editable(self, match: Match) -> None:
        if match.is_knockout and match.round < self.current_round_number:
            raise TournamentStateException(
                f"Match {match.id} belongs to round {match.round}, "
                f"but the bracket has already advanced to round {self.current_round_number}"
            )

    def record_result(
        self, match_id: str, outcome: Union[MatchOutcome, str]
    ) -> Match:
        """Record a result for the match with the given id."""
        match = self.recorder.find_match(self.matches, match_id)
        self._ensure_editable(match)
        return self.recorder.record_result(match, outcome)

    def clear_result(self, match_id: str) -> Match:
        """Reset the match with the given id to pending."""
        match = self.recorder.find_match(self.matches, match_id)
        self._ensure_editable(match)
        return self.recorder.clear_result(match)

    def advance_round(self) -> List[Match]:
        """Generate the next knockout round from the current winners.

        Raises:
            TournamentStateException: For leagues, or when the current round
                is unfinished or already the final
        """
        if not self.is_knockout:
            raise TournamentStateException("Only knockout tournaments have rounds")
        next_round = generate_next_knockout_round(self.matches)
        self.matches.extend(next_round)
        return next_round

    def to_dict(self) -> Dict[str, Any]:
        """Serialize tournament to dictionary."""
        return {
            "config": self.config.to_dict(),
            "players": list(self.players),
            "matches": [m.to_dict() for m in self.matches],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Tournament":
        """Deserialize tournament from dictionary."""
        return cls(
            config=TournamentConfig.from_dict(data.get("config", {})),
            players=list(data.get("players", [])),
            matches=[Match.from_dict(m) for m in data.get("matches", [])],
        )

    def save(self, path: Union[str, Path]) -> Path:
        """Write the tournament to a JSON save file.

        The save file extension is appended when ``path`` has no suffix;
        any other path is written exactly as given.

        Raises:
            FileSaveException: If the file cannot be written
        """
        path = Path(path)
        if not path.suffix:
            path = path.with_name(path.name + SAVE_FILE_EXTENSION)
        try:
            with open(path, "w", encoding="utf-8") as f:
                json.dump(self.to_dict(), f, indent=2)
        except OSError as e:
            raise FileSaveException(f"Could not save tournament to {path}: {e}") from e
        logger.info("Saved tournament '%s' to %s", self.config.name, path)
        return path

    @classmethod
    def load(cls, path: Union[str, Path]) -> "Tournament":
        """Read a tournament from a JSON save file.

        Raises:
            FileLoadException: If the file is missing or not a valid save file
        """
        path = Path(path)
        try:
            with open(path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise FileLoadException(f"Could not load tournament from {path}: {e}") from e
        if not isinstance(data, dict):
            raise FileLoadException(
                f"Malformed tournament file {path}: expected a JSON object"
            )
        try:
            tournament = cls.from_dict(data)
        except (
            AttributeError,
            KeyError,
            TypeError,
            ValueError,
            InvalidResultException,
        ) as e:
            raise FileLoadException(f"Malformed tournament file {path}: {e}") from e
        logger.debug("Loaded tournament '%s' from %s", tournament.config.name, path)
        return tournament
