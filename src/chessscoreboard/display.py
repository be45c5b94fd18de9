"""Plain-text tables for terminal output."""

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

from typing import Sequence

from chessscoreboard.models import Match, MatchOutcome, Standing
from chessscoreboard.tournament import Tournament
from chessscoreboard.utils.dates import format_date

RESULT_LABELS = {
    None: "pending",
    MatchOutcome.PLAYER1: "1-0",
    MatchOutcome.PLAYER2: "0-1",
    MatchOutcome.DRAW: "0.5-0.5",
    MatchOutcome.BYE: "bye",
}


def format_points(points: float) -> str:
    """Show whole points without a decimal and half points as .5."""
    return f"{points:g}"


def format_standings(table: Sequence[Standing]) -> str:
    """Format the standings as an ASCII table, best first."""
    lines = [
        f"{'Rank':<6}{'Player':<24}{'P':>4}{'W':>4}{'D':>4}{'L':>4}{'Pts':>7}",
        "-" * 53,
    ]
    for rank, row in enumerate(table, 1):
        lines.append(
            f"{rank:<6}{row.name:<24}{row.played:>4}{row.wins:>4}"
            f"{row.draws:>4}{row.losses:>4}{format_points(row.points):>7}"
        )
    return "\n".join(lines)


def format_matches(matches: Sequence[Match]) -> str:
    """Format fixtures with their results, one line per match."""
    lines = []
    current_round = None
    for match in matches:
        if match.round is not None and match.round != current_round:
            current_round = match.round
            lines.append(f"--- Round {current_round} ---")
        line = (
            f"{match.id:<8}{match.player1 or '':<20} vs  {match.player2 or '':<20}"
            f"{RESULT_LABELS[match.result]}"
        )
        if match.is_knockout and match.winner and not match.is_bye:
            line += f"  (winner: {match.winner})"
        lines.append(line)
    return "\n".join(lines)


def format_tournament_header(tournament: Tournament) -> str:
    config = tournament.config
    header = (
        f"{config.name} ({config.format.value}, "
        f"{len(tournament.players)} players, created {format_date(config.created_at)})"
    )
    if tournament.champion:
        header += f"\nChampion: {tournament.champion}"
    return header
