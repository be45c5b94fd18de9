"""Match data class and result enumeration."""

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

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Optional, Union

from chessscoreboard.constants import (
    BYE,
    RESULT_BYE,
    RESULT_DRAW,
    RESULT_PLAYER1,
    RESULT_PLAYER2,
)
from chessscoreboard.exceptions import InvalidResultException
from chessscoreboard.type_hints import MaybePlayer, PlayerName


class MatchOutcome(Enum):
    """Recorded outcome of a match. An unplayed match has no outcome (None)."""

    PLAYER1 = RESULT_PLAYER1
    PLAYER2 = RESULT_PLAYER2
    DRAW = RESULT_DRAW
    BYE = RESULT_BYE

    @classmethod
    def parse(
        cls, value: Union["MatchOutcome", str, None]
    ) -> Optional["MatchOutcome"]:
        """Convert a stored result tag to an outcome.

        Args:
            value: An outcome, its string tag, or None for an unset result

        Returns:
            The matching outcome, or None

        Raises:
            InvalidResultException: If the tag is not a known result
        """
        if value is None or isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise InvalidResultException(f"Unknown match result: {value!r}") from None


SCORED_OUTCOMES = frozenset(
    {MatchOutcome.PLAYER1, MatchOutcome.PLAYER2, MatchOutcome.DRAW}
)


@dataclass
class Match:
    """A scheduled or completed pairing.

    Attributes
    ----------
    id : str
        Generator-assigned identifier (``m3`` or ``r1_m2``).
    player1 : str or None
        First player.
    player2 : str or None
        Second player, or the ``BYE`` placeholder.
    result : MatchOutcome or None
        Outcome once recorded; None while the match is pending. A string
        tag such as ``"draw"`` is converted on construction.
    round : int or None
        Knockout round number (1-indexed). None for league matches.
    winner : str or None
        Knockout winner. Set at generation time only for a bye.
    """

    id: str
    player1: MaybePlayer
    player2: MaybePlayer
    result: Optional[MatchOutcome] = None
    round: Optional[int] = None
    winner: MaybePlayer = None

    def __post_init__(self):
        self.result = MatchOutcome.parse(self.result)

    @property
    def is_knockout(self) -> bool:
        return self.round is not None

    @property
    def is_bye(self) -> bool:
        return (
            self.result is MatchOutcome.BYE
            or self.player1 == BYE
            or self.player2 == BYE
        )

    @property
    def is_scored(self) -> bool:
        """Whether the result counts towards the standings."""
        return self.result in SCORED_OUTCOMES

    @property
    def is_settled(self) -> bool:
        return self.result is not None

    def players(self) -> List[PlayerName]:
        """Real participants of this match, without the bye placeholder."""
        return [p for p in (self.player1, self.player2) if p is not None and p != BYE]

    def to_dict(self) -> Dict[str, Any]:
        """Serialize match to dictionary."""
        data: Dict[str, Any] = {
            "id": self.id,
            "player1": self.player1,
            "player2": self.player2,
            "result": self.result.value if self.result is not None else None,
        }
        if self.is_knockout:
            data["round"] = self.round
            data["winner"] = self.winner
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Match":
        """Deserialize match from dictionary."""
        return cls(
            id=data["id"],
            player1=data.get("player1"),
            player2=data.get("player2"),
            result=data.get("result"),
            round=data.get("round"),
            winner=data.get("winner"),
        )
