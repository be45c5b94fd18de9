"""Chess Scoreboard: fixtures and standings for chess tournaments.

League (round-robin) and knockout fixtures are generated from a list of
player names; standings are recomputed from the recorded match results.
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

from chessscoreboard.auth import friendly_auth_error
from chessscoreboard.models import Match, MatchOutcome, Standing
from chessscoreboard.pairing import (
    generate_knockout_bracket,
    generate_next_knockout_round,
    generate_round_robin_matches,
    shuffle_players,
)
from chessscoreboard.tournament import (
    ResultRecorder,
    Tournament,
    TournamentConfig,
    TournamentFormat,
    calculate_standings,
)
from chessscoreboard.utils.dates import format_date

__version__ = "0.1.0"

__all__ = [
    "Match",
    "MatchOutcome",
    "Standing",
    "shuffle_players",
    "generate_round_robin_matches",
    "generate_knockout_bracket",
    "generate_next_knockout_round",
    "calculate_standings",
    "ResultRecorder",
    "Tournament",
    "TournamentConfig",
    "TournamentFormat",
    "friendly_auth_error",
    "format_date",
]
