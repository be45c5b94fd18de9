"""Interactive result entry for a saved tournament.

Results are kept in memory until ``save`` (or ``quit``, which saves
pending changes) is entered.
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

from pathlib import Path
from typing import Dict, Optional, Union

from prompt_toolkit import PromptSession
from prompt_toolkit.completion import NestedCompleter
from prompt_toolkit.history import InMemoryHistory
from prompt_toolkit.styles import Style

from chessscoreboard.display import (
    format_matches,
    format_standings,
    format_tournament_header,
)
from chessscoreboard.exceptions import ChessScoreboardException
from chessscoreboard.models import MatchOutcome
from chessscoreboard.tournament import Tournament
from chessscoreboard.utils import setup_logger

logger = setup_logger(__name__)

COMMANDS = {
    "matches": "List all fixtures",
    "pending": "List fixtures without a result",
    "standings": "Show the standings table",
    "result": "result <match_id> <player1|player2|draw>",
    "clear": "clear <match_id>",
    "advance": "Pair the winners into the next knockout round",
    "save": "Write changes to the save file",
    "help": "Show this list",
    "quit": "Save and leave",
}

OUTCOMES = [
    MatchOutcome.PLAYER1.value,
    MatchOutcome.PLAYER2.value,
    MatchOutcome.DRAW.value,
]


def create_completer(tournament: Tournament) -> NestedCompleter:
    """Completer offering commands, match ids and outcomes."""
    outcomes = {outcome: None for outcome in OUTCOMES}
    match_ids = [m.id for m in tournament.matches if not m.is_bye]
    options: Dict[str, Optional[dict]] = {command: None for command in COMMANDS}
    options["result"] = {match_id: dict(outcomes) for match_id in match_ids}
    options["clear"] = {match_id: None for match_id in match_ids}
    return NestedCompleter.from_nested_dict(options)


def print_commands_list() -> None:
    for command, description in COMMANDS.items():
        print(f"  {command:<12}{description}")


class ScoreboardShell:
    """Executes shell commands against one tournament.

    Kept apart from the prompt loop so commands can be driven without a
    terminal.
    """

    def __init__(self, tournament: Tournament, path: Union[str, Path]):
        self.tournament = tournament
        self.path = Path(path)
        self.dirty = False

    def execute(self, line: str) -> Optional[str]:
        """Run one command line and return the text to print.

        Returns None once the user asks to quit.
        """
        parts = line.split()
        if not parts:
            return ""

        command, args = parts[0].lstrip("/").lower(), parts[1:]

        if command in ("quit", "exit", "q"):
            if self.dirty:
                self.save()
            return None
        if command in ("help", "?"):
            return "\n".join(f"{c:<12}{d}" for c, d in COMMANDS.items())
        if command == "matches":
            return format_matches(self.tournament.matches)
        if command == "pending":
            return format_matches(self.tournament.pending_matches())
        if command == "standings":
            return format_standings(self.tournament.standings())
        if command == "result":
            if len(args) != 2:
                return f"Usage: {COMMANDS['result']}"
            match = self.tournament.record_result(args[0], args[1])
            self.dirty = True
            return format_matches([match])
        if command == "clear":
            if len(args) != 1:
                return f"Usage: {COMMANDS['clear']}"
            match = self.tournament.clear_result(args[0])
            self.dirty = True
            return format_matches([match])
        if command == "advance":
            next_round = self.tournament.advance_round()
            self.dirty = True
            return format_matches(next_round)
        if command == "save":
            return f"Saved to {self.save()}"

        return f"Unknown command: {command}. Type help to see available commands"

    def save(self) -> Path:
        path = self.tournament.save(self.path)
        self.dirty = False
        return path


def run_shell(path: Union[str, Path]) -> int:
    """Run the interactive prompt until the user quits."""
    tournament = Tournament.load(path)
    shell = ScoreboardShell(tournament, path)

    print(format_tournament_header(tournament))
    print_commands_list()

    style = Style.from_dict({"prompt": "#00aa00 bold"})
    session: PromptSession = PromptSession(history=InMemoryHistory(), style=style)

    while True:
        try:
            line = session.prompt(
                "scoreboard> ", completer=create_completer(tournament)
            ).strip()
        except EOFError:
            line = "quit"

        try:
            output = shell.execute(line)
        except ChessScoreboardException as e:
            logger.debug("Command failed: %s", line, exc_info=True)
            print(f"Error: {e}")
            continue

        if output is None:
            break
        if output:
            print(output)

    return 0

