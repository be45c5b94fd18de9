"""Single-elimination bracket generation.

The first round is seeded by a random shuffle of the registered players.
Later rounds pair the winners of the previous round in bracket order.
An odd number of entrants gives the last entrant a bye.
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

import random
from typing import List, Optional, Sequence

from chessscoreboard.constants import BYE, FIRST_ROUND, KNOCKOUT_MATCH_ID
from chessscoreboard.exceptions import TournamentStateException
from chessscoreboard.models import Match, MatchOutcome
from chessscoreboard.pairing.shuffle import shuffle_players
from chessscoreboard.type_hints import PlayerName, Players
from chessscoreboard.utils import setup_logger
from chessscoreboard.utils.validation import ensure_unique_players

logger = setup_logger(__name__)


def _pair_round(entrants: Sequence[PlayerName], round_number: int) -> List[Match]:
    """Pair consecutive entrants, padding an odd field with a bye."""
    slots = list(entrants)
    if len(slots) % 2 != 0:
        slots.append(BYE)

    matches = []
    for index in range(0, len(slots), 2):
        player1, player2 = slots[index], slots[index + 1]
        is_bye = player2 == BYE
        matches.append(
            Match(
                id=KNOCKOUT_MATCH_ID.format(round=round_number, number=index // 2 + 1),
                player1=player1,
                player2=player2,
                result=MatchOutcome.BYE if is_bye else None,
                round=round_number,
                winner=player1 if is_bye else None,
            )
        )
        if is_bye:
            logger.debug("Round %s: %s receives a bye", round_number, player1)

    return matches


def generate_knockout_bracket(
    players: Players, rng: Optional[random.Random] = None
) -> List[Match]:
    """Generate the first round of a knockout bracket.

    Args:
        players: Registered player names
        rng: Random source for the seeding shuffle

    Returns:
        ``ceil(n / 2)`` round-1 matches with ids ``r1_m1``, ``r1_m2``, ...

    Raises:
        DuplicatePlayerException: If a name occurs more than once
        InvalidPlayerDataException: If a player is named like the bye placeholder
    """
    ensure_unique_players(players)

    matches = _pair_round(shuffle_players(players, rng), FIRST_ROUND)
    logger.debug(
        "Generated knockout round %s: %s matches for %s players",
        FIRST_ROUND,
        len(matches),
        len(players),
    )
    return matches


def latest_round(matches: Sequence[Match]) -> List[Match]:
    """Matches of the highest round present in ``matches``."""
    rounds = [m.round for m in matches if m.round is not None]
    if not rounds:
        return []
    last = max(rounds)
    return [m for m in matches if m.round == last]


def generate_next_knockout_round(matches: Sequence[Match]) -> List[Match]:
    """Pair the winners of the latest round into the next round.

    Winners keep their bracket order, so the winner of ``r1_m1`` meets the
    winner of ``r1_m2``. There is no reshuffle after round one.

    Args:
        matches: All knockout matches generated so far

    Returns:
        Matches for round ``r + 1``

    Raises:
        TournamentStateException: If there is no round to advance from, the
            latest round is the final, or a match in it has no winner yet
    """
    current = latest_round(matches)
    if not current:
        raise TournamentStateException("No knockout round to advance from")

    round_number = current[0].round
    if len(current) == 1:
        raise TournamentStateException(
            f"Round {round_number} is the final; the bracket is complete"
        )

    undecided = [m.id for m in current if m.winner is None]
    if undecided:
        raise TournamentStateException(
            f"Round {round_number} has matches without a winner: {', '.join(undecided)}"
        )

    next_round = _pair_round([m.winner for m in current], round_number + 1)
    logger.info(
        "Advanced bracket to round %s with %s matches", round_number + 1, len(next_round)
    )
    return next_round
