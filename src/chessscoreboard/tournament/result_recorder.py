"""Result recording and validation for tournaments.

This module handles recording match results with proper validation and error checking.
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

from typing import Sequence, Union

from chessscoreboard.exceptions import InvalidResultException, ResultNotFoundException
from chessscoreboard.models import Match, MatchOutcome
from chessscoreboard.utils import setup_logger

logger = setup_logger(__name__)


class ResultRecorder:
    """Writes outcomes onto match records.

    This class is responsible for:
    - Rejecting results that make no sense for the match
    - Setting the knockout winner alongside the result
    - Keeping generated byes untouched
    """

    def find_match(self, matches: Sequence[Match], match_id: str) -> Match:
        """Look up a match by id.

        Raises:
            ResultNotFoundException: If no match has that id
        """
        for match in matches:
            if match.id == match_id:
                return match
        raise ResultNotFoundException(f"No match with id {match_id!r}")

    def record_result(
        self, match: Match, outcome: Union[MatchOutcome, str]
    ) -> Match:
        """Record the outcome of a single match.

        Args:
            match: The match to update in place
            outcome: ``player1``, ``player2`` or ``draw``

        Returns:
            The updated match

        Raises:
            InvalidResultException: If the outcome is unknown, is a bye, is a
                draw in a knockout match, or the match itself is a bye
        """
        parsed = MatchOutcome.parse(outcome)
        if parsed is None:
            raise InvalidResultException(
                f"Use clear_result to reset match {match.id}"
            )
        if match.is_bye:
            raise InvalidResultException(
                f"Match {match.id} is a bye and cannot take a result"
            )
        if parsed is MatchOutcome.BYE:
            raise InvalidResultException("Byes are assigned by the bracket generator")
        if match.is_knockout and parsed is MatchOutcome.DRAW:
            raise InvalidResultException(
                f"Knockout match {match.id} needs a winner; draws are not allowed"
            )

        if match.is_settled:
            logger.warning(
                "Match %s already has result %s, overwriting with %s",
                match.id,
                match.result.value,
                parsed.value,
            )

        match.result = parsed
        if match.is_knockout:
            match.winner = (
                match.player1 if parsed is MatchOutcome.PLAYER1 else match.player2
            )

        logger.debug(
            "Recorded: %s vs %s -> %s", match.player1, match.player2, parsed.value
        )
        return match

    def clear_result(self, match: Match) -> Match:
        """Reset a match to pending.

        Raises:
            InvalidResultException: If the match is a bye
        """
        if match.is_bye:
            raise InvalidResultException(f"Bye match {match.id} cannot be cleared")

        if not match.is_settled:
            logger.warning("Match %s has no result, nothing to clear", match.id)

        match.result = None
        match.winner = None
        logger.debug("Cleared result of match %s", match.id)
        return match
