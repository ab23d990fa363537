"""Player directory: registration and lookup of players."""

import logging

from src.api.models import (
    GetPlayerRequest,
    PlayerCreatedResponse,
    PlayerResponse,
    RegisterPlayerRequest,
)
from src.core.exceptions import InvalidRequestError, NotFoundError
from src.core.models import PlayerModel
from src.db.repository import PlayerRepository

logger = logging.getLogger(__name__)


class PlayerService:
    """Orchestration of layers for the player directory."""

    def __init__(self, repository: PlayerRepository) -> None:
        self.repo = repository

    def register_player(self, request: RegisterPlayerRequest) -> PlayerCreatedResponse:
        """
        Register a new player.
        ----
        Names are not unique: registering the same name twice gives two distinct players.
        """
        if not request.name.strip():
            raise InvalidRequestError("name can't be blank")

        player = self.repo.create_player(request.name)
        logger.info("Registered player id=%d name=%r", player.id, player.name)
        return PlayerCreatedResponse(id=player.id)

    def get_player(self, request: GetPlayerRequest) -> PlayerResponse:
        player = self._fetch_player(request.player_id)
        return PlayerResponse(id=player.id, name=player.name)

    # -- Internal helpers --
    def _fetch_player(self, player_id: int) -> PlayerModel:
        player = self.repo.get_player(player_id)
        if player is None:
            raise NotFoundError(f"Player with {player_id=} not found.")
        return player
