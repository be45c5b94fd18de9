"""Type hints used in Chess Scoreboard."""

from typing import Optional, Sequence

# Players are identified by their display name
PlayerName = str
MaybePlayer = Optional[PlayerName]
Players = Sequence[PlayerName]
