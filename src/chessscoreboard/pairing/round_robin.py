"""League fixtures: every player meets every other player once."""

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

from itertools import combinations
from typing import List

from chessscoreboard.constants import ROUND_ROBIN_MATCH_ID
from chessscoreboard.models import Match
from chessscoreboard.type_hints import Players
from chessscoreboard.utils import setup_logger
from chessscoreboard.utils.validation import ensure_unique_players

logger = setup_logger(__name__)


def generate_round_robin_matches(players: Players) -> List[Match]:
    """Generate all pairings for a round-robin league.

    Pairs come out in input order: player 0 against everyone after it,
    then player 1 against everyone after it, and so on. Ids are ``m1``,
    ``m2``, ... in that order.

    Args:
        players: Registered player names

    Returns:
        ``n * (n - 1) / 2`` pending matches; empty for fewer than 2 players

    Raises:
        DuplicatePlayerException: If a name occurs more than once
        InvalidPlayerDataException: If a player is named like the bye placeholder
    """
    ensure_unique_players(players)

    matches = [
        Match(
            id=ROUND_ROBIN_MATCH_ID.format(number=number),
            player1=player1,
            player2=player2,
        )
        for number, (player1, player2) in enumerate(combinations(players, 2), start=1)
    ]

    logger.debug(
        "Generated %s round-robin matches for %s players", len(matches), len(players)
    )
    return matches
