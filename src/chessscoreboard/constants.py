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

# --- Constants ---
SAVE_FILE_EXTENSION = ".json"

# Game outcome scores
WIN_SCORE = 1.0
DRAW_SCORE = 0.5
LOSS_SCORE = 0.0

# Placeholder opponent used to pad an odd knockout round
BYE = "BYE"

# Result tags (serialized form of MatchOutcome)
RESULT_PLAYER1 = "player1"
RESULT_PLAYER2 = "player2"
RESULT_DRAW = "draw"
RESULT_BYE = "bye"

# Match id templates
ROUND_ROBIN_MATCH_ID = "m{number}"
KNOCKOUT_MATCH_ID = "r{round}_m{number}"
FIRST_ROUND = 1

# Tournament formats
FORMAT_LEAGUE = "league"
FORMAT_KNOCKOUT = "knockout"

DEFAULT_TOURNAMENT_NAME = "Untitled Tournament"

# Date display, e.g. "19 October 2026"
DATE_DISPLAY_FORMAT = "{day} {month} {year}"
UNKNOWN_DATE = "Unknown date"
