"""Validation utilities for Chess Scoreboard.

This module provides reusable validation functions with consistent error handling.
"""

from collections.abc import Iterable as IterableABC
from typing import Iterable, List, Optional

from chessscoreboard.constants import BYE
from chessscoreboard.exceptions import (
    DuplicatePlayerException,
    InvalidPairingException,
    InvalidPlayerDataException,
)


class ValidationResult:
    """Result of a validation operation.

    Attributes:
        is_valid: Whether the validation passed
        error_message: Human-readable error message if invalid
        sanitized_value: Cleaned/normalized value if valid
    """

    def __init__(
        self,
        is_valid: bool,
        error_message: Optional[str] = None,
        sanitized_value: Optional[str] = None,
    ):
        self.is_valid = is_valid
        self.error_message = error_message
        self.sanitized_value = sanitized_value

    def __bool__(self) -> bool:
        """Allow using result in boolean context: if result: ..."""
        return self.is_valid

    def __repr__(self) -> str:
        if self.is_valid:
            return f"ValidationResult(VALID, {self.sanitized_value!r})"
        return f"ValidationResult(INVALID, {self.error_message!r})"


# ========== Player Name Validation ==========


def validate_player_name(name: Optional[str]) -> ValidationResult:
    """Validate a single player name.

    Example:
        >>> validate_player_name("  Magnus ").sanitized_value
        'Magnus'
    """
    if name is None or not str(name).strip():
        return ValidationResult(
            is_valid=False, error_message="Player name is required"
        )

    name = str(name).strip()
    if name.upper() == BYE:
        return ValidationResult(
            is_valid=False,
            error_message=f"'{name}' is reserved for byes and cannot be a player name",
        )

    return ValidationResult(is_valid=True, sanitized_value=name)


def ensure_unique_players(players: Iterable[str]) -> None:
    """Check a player list before fixtures are generated from it.

    Raises:
        InvalidPairingException: If ``players`` is not a collection of names
        InvalidPlayerDataException: If a player uses the bye placeholder name
        DuplicatePlayerException: If a name occurs more than once
    """
    if isinstance(players, str) or not isinstance(players, IterableABC):
        raise InvalidPairingException(
            f"Expected a list of player names, got {players!r}"
        )

    seen = set()
    for player in players:
        if player == BYE:
            raise InvalidPlayerDataException(
                f"'{BYE}' is reserved for byes and cannot be a player name"
            )
        if player in seen:
            raise DuplicatePlayerException(f"Duplicate player name: {player!r}")
        seen.add(player)


def validate_player_names(names: Iterable[Optional[str]]) -> List[str]:
    """Clean up a raw list of registered names.

    Blank entries are dropped and surrounding whitespace removed.

    Raises:
        InvalidPlayerDataException: If a name is reserved
        DuplicatePlayerException: If a name occurs more than once
    """
    cleaned = []
    for raw in names:
        if raw is None or not str(raw).strip():
            continue
        result = validate_player_name(raw)
        if not result:
            raise InvalidPlayerDataException(result.error_message)
        cleaned.append(result.sanitized_value)

    ensure_unique_players(cleaned)
    return cleaned
