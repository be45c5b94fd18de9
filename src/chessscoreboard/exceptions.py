"""Exceptions for use in Chess Scoreboard"""

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


# ========== Base Application Exception ==========


class ChessScoreboardException(Exception):
    """Base exception for all Chess Scoreboard errors.

    Every error raised by the fixture generators, the standings calculator
    and the tournament container inherits from this class, so callers can
    catch them all with a single except clause.
    """

    pass


# ========== Pairing Exceptions ==========


class PairingException(ChessScoreboardException):
    """Base exception for pairing-related errors."""

    pass


class InvalidPairingException(PairingException):
    """Raised when a player list cannot be turned into fixtures."""

    pass


# ========== Tournament Exceptions ==========


class TournamentException(ChessScoreboardException):
    """Base exception for tournament-related errors."""

    pass


class TournamentStateException(TournamentException):
    """Raised when tournament is in an invalid state for the requested operation."""

    pass


class DuplicatePlayerException(TournamentException):
    """Raised when the same player name appears twice in a player list."""

    pass


# ========== Player Exceptions ==========


class PlayerException(ChessScoreboardException):
    """Base exception for player-related errors."""

    pass


class PlayerNotFoundException(PlayerException):
    """Raised when a match refers to a player missing from the player list."""

    pass


class InvalidPlayerDataException(PlayerException):
    """Raised when a player name is empty or reserved."""

    pass


# ========== Result Exceptions ==========


class ResultException(ChessScoreboardException):
    """Base exception for result recording errors."""

    pass


class InvalidResultException(ResultException):
    """Raised when a result tag is unknown or not allowed for the match."""

    pass


class ResultNotFoundException(ResultException):
    """Raised when a requested match cannot be found."""

    pass


# ========== File/Resource Exceptions ==========


class ResourceException(ChessScoreboardException):
    """Base exception for resource-related errors."""

    pass


class FileLoadException(ResourceException):
    """Raised when a file cannot be loaded."""

    pass


class FileSaveException(ResourceException):
    """Raised when a file cannot be saved."""

    pass
