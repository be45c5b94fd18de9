"""Tournament management for Chess Scoreboard.

This package ties the fixture generators to a player list, records results
and derives the standings table.
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

from chessscoreboard.tournament.models import (
    Tournament,
    TournamentConfig,
    TournamentFormat,
)
from chessscoreboard.tournament.result_recorder import ResultRecorder
from chessscoreboard.tournament.standings import calculate_standings

__all__ = [
    "Tournament",
    "TournamentConfig",
    "TournamentFormat",
    "ResultRecorder",
    "calculate_standings",
]
