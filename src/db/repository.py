"""Protocol repositories (SQLAlchemy implementation in sql_repository.py, dictionary-backed fakes in the tests)"""

from typing import Protocol

from src.core.models import GameId, GameModel, GamePlayerModel, PlayerId, PlayerModel


class PlayerRepository(Protocol):
    """Persistence of registered players."""

    def create_player(self, name: str) -> PlayerModel:
        """Store a new player and return it with its newly assigned ID."""
        ...

    def get_player(self, player_id: PlayerId) -> PlayerModel | None:
        """Get player by ID, if record exists."""
        ...


class GameRepository(Protocol):
    """Persistence of game sessions."""

    def create_game(self, score_ceiling: int) -> GameModel:
        """Store a new game and return it with its newly assigned ID."""
        ...

    def get_game(self, game_id: GameId) -> GameModel | None:
        """Get game by ID, if record exists."""
        ...


class GamePlayerRepository(Protocol):
    """Persistence of the score ledger (player <-> game associations)."""

    def add_player_to_game(
        self, game_id: GameId, player_id: PlayerId
    ) -> GamePlayerModel:
        """Insert the association with a score of 0. Raises ConflictError if the pair already exists."""
        ...

    def apply_score_delta(
        self, game_id: GameId, player_id: PlayerId, delta: int
    ) -> int | None:
        """Atomically add delta to the stored score. Return the new score, or None if no such association exists."""
        ...

    def list_game_players(self, game_id: GameId) -> list[GamePlayerModel]:
        """All associations of one game, in storage order."""
        ...
