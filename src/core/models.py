"""
Boundary layer data model(s).

These objects can be used to communicate with the Services.
Hence, both the API layer (higher) and the db layer (lower) will use model(s) defined here to send to/receive from the Services
(Decouples the data model specific to the DB layer or API layer from the information needed to send across boundaries)
"""

from dataclasses import dataclass

# Type aliases to make the models easier to read
PlayerId = int
GameId = int

# Integers are stored as signed 64-bit values
INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1


@dataclass
class PlayerModel:
    """A registered player. Immutable once stored."""

    id: PlayerId
    name: str


@dataclass
class GameModel:
    """A game session. The score ceiling is informational only."""

    id: GameId
    score_ceiling: int


@dataclass
class GamePlayerModel:
    """Association of a player with a game, carrying the running score."""

    id: int
    game_id: GameId
    player_id: PlayerId
    score: int = 0
