"""Command-line interface for Chess Scoreboard.

Creates tournaments, records results and prints standings for tournaments
stored as JSON save files.
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

import argparse
import logging
import random
import sys
from pathlib import Path
from typing import List, Optional

from chessscoreboard.constants import FORMAT_KNOCKOUT, FORMAT_LEAGUE
from chessscoreboard.display import (
    format_matches,
    format_standings,
    format_tournament_header,
)
from chessscoreboard.exceptions import ChessScoreboardException, FileLoadException
from chessscoreboard.models import MatchOutcome
from chessscoreboard.shell import run_shell
from chessscoreboard.tournament import Tournament
from chessscoreboard.utils import set_log_level, setup_logger

logger = setup_logger(__name__)

OUTCOME_CHOICES = [
    MatchOutcome.PLAYER1.value,
    MatchOutcome.PLAYER2.value,
    MatchOutcome.DRAW.value,
]


def read_players_file(path: str) -> List[str]:
    """Read one player name per line.

    Raises:
        FileLoadException: If the file cannot be read
    """
    try:
        return Path(path).read_text(encoding="utf-8").splitlines()
    except OSError as e:
        raise FileLoadException(f"Could not read players from {path}: {e}") from e


def run_new_command(args: argparse.Namespace) -> int:
    players = list(args.players or [])
    if args.players_file:
        players.extend(read_players_file(args.players_file))

    rng = random.Random(args.seed) if args.seed is not None else None
    tournament = Tournament.create(args.name, args.format, players, rng=rng)
    path = tournament.save(args.output)

    print(format_tournament_header(tournament))
    print(format_matches(tournament.matches))
    print(f"\nSaved to {path}")
    return 0


def run_matches_command(args: argparse.Namespace) -> int:
    tournament = Tournament.load(args.file)
    matches = tournament.pending_matches() if args.pending else tournament.matches
    print(format_tournament_header(tournament))
    print(format_matches(matches))
    return 0


def run_result_command(args: argparse.Namespace) -> int:
    tournament = Tournament.load(args.file)
    match = tournament.record_result(args.match_id, args.outcome)
    tournament.save(args.file)
    print(format_matches([match]))
    return 0


def run_clear_command(args: argparse.Namespace) -> int:
    tournament = Tournament.load(args.file)
    match = tournament.clear_result(args.match_id)
    tournament.save(args.file)
    print(format_matches([match]))
    return 0


def run_standings_command(args: argparse.Namespace) -> int:
    tournament = Tournament.load(args.file)
    print(format_tournament_header(tournament))
    print(format_standings(tournament.standings()))
    return 0


def run_advance_command(args: argparse.Namespace) -> int:
    tournament = Tournament.load(args.file)
    next_round = tournament.advance_round()
    tournament.save(args.file)
    print(format_matches(next_round))
    return 0


def run_shell_command(args: argparse.Namespace) -> int:
    return run_shell(args.file)


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser with all subcommands."""
    parser = argparse.ArgumentParser(
        prog="chess-scoreboard",
        description="Generate chess tournament fixtures and standings",
    )
    parser.add_argument("--verbose", action="store_true", help="Enable verbose logging")

    subparsers = parser.add_subparsers(dest="command", required=True)

    new_parser = subparsers.add_parser("new", help="Create a tournament")
    new_parser.add_argument("name", help="Tournament name")
    new_parser.add_argument(
        "--format",
        choices=[FORMAT_LEAGUE, FORMAT_KNOCKOUT],
        default=FORMAT_LEAGUE,
        help="Tournament format (default: league)",
    )
    new_parser.add_argument("--players", nargs="+", help="Player names")
    new_parser.add_argument("--players-file", help="File with one player name per line")
    new_parser.add_argument("-o", "--output", required=True, help="Save file path")
    new_parser.add_argument(
        "--seed", type=int, help="Random seed for reproducible knockout seeding"
    )
    new_parser.set_defaults(func=run_new_command)

    matches_parser = subparsers.add_parser("matches", help="List fixtures")
    matches_parser.add_argument("file", help="Tournament save file")
    matches_parser.add_argument(
        "--pending", action="store_true", help="Only show matches without a result"
    )
    matches_parser.set_defaults(func=run_matches_command)

    result_parser = subparsers.add_parser("result", help="Record a match result")
    result_parser.add_argument("file", help="Tournament save file")
    result_parser.add_argument("match_id", help="Match id, e.g. m3 or r1_m2")
    result_parser.add_argument("outcome", choices=OUTCOME_CHOICES)
    result_parser.set_defaults(func=run_result_command)

    clear_parser = subparsers.add_parser("clear", help="Reset a match to pending")
    clear_parser.add_argument("file", help="Tournament save file")
    clear_parser.add_argument("match_id")
    clear_parser.set_defaults(func=run_clear_command)

    standings_parser = subparsers.add_parser("standings", help="Show the standings")
    standings_parser.add_argument("file", help="Tournament save file")
    standings_parser.set_defaults(func=run_standings_command)

    advance_parser = subparsers.add_parser(
        "advance", help="Pair the winners into the next knockout round"
    )
    advance_parser.add_argument("file", help="Tournament save file")
    advance_parser.set_defaults(func=run_advance_command)

    shell_parser = subparsers.add_parser("shell", help="Interactive result entry")
    shell_parser.add_argument("file", help="Tournament save file")
    shell_parser.set_defaults(func=run_shell_command)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for CLI.

    Returns:
        Exit code
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        set_log_level(logging.DEBUG)

    try:
        return args.func(args)
    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        return 130
    except ChessScoreboardException as e:
        logger.error("%s", e)
        return 1


if __name__ == "__main__":
    sys.exit(main())
