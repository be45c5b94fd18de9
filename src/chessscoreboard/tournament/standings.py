"""Standings calculation for tournaments.

This module folds recorded match results into a ranked table.
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

from typing import Dict, Iterable, List

from chessscoreboard.constants import DRAW_SCORE, WIN_SCORE
from chessscoreboard.exceptions import PlayerNotFoundException
from chessscoreboard.models import Match, MatchOutcome, Standing
from chessscoreboard.type_hints import MaybePlayer, Players
from chessscoreboard.utils import setup_logger
from chessscoreboard.utils.validation import ensure_unique_players

logger = setup_logger(__name__)


def _lookup(stats: Dict[str, Standing], name: MaybePlayer, match: Match) -> Standing:
    standing = stats.get(name)
    if standing is None:
        raise PlayerNotFoundException(
            f"Match {match.id} refers to unknown player {name!r}"
        )
    return standing


def _record_win(winner: Standing, loser: Standing) -> None:
    winner.played += 1
    winner.wins += 1
    winner.points += WIN_SCORE
    loser.played += 1
    loser.losses += 1


def _record_draw(first: Standing, second: Standing) -> None:
    for standing in (first, second):
        standing.played += 1
        standing.draws += 1
        standing.points += DRAW_SCORE


def calculate_standings(players: Players, matches: Iterable[Match]) -> List[Standing]:
    """Build the ranked standings table.

    Only matches with a win or draw result are scored. Pending matches and
    byes are skipped, so a bye never counts as a game played.

    The table is sorted by points, then wins, both descending. Remaining
    ties keep the order of ``players``.

    Args:
        players: Registered player names
        matches: Every match of the tournament, settled or not

    Returns:
        One standing per player, best first

    Raises:
        PlayerNotFoundException: If a scored match names an unregistered player
        DuplicatePlayerException: If a name occurs more than once
    """
    ensure_unique_players(players)
    stats = {name: Standing(name=name) for name in players}

    for match in matches:
        if not match.is_scored:
            continue

        first = _lookup(stats, match.player1, match)
        second = _lookup(stats, match.player2, match)

        if match.result is MatchOutcome.PLAYER1:
            _record_win(first, second)
        elif match.result is MatchOutcome.PLAYER2:
            _record_win(second, first)
        else:
            _record_draw(first, second)

    # sorted() is stable, so equal rows stay in registration order
    table = sorted(stats.values(), key=lambda s: (-s.points, -s.wins))
    logger.debug("Calculated standings for %s players", len(table))
    return table
