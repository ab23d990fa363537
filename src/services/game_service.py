"""Game sessions: creation and metadata lookup."""

import logging

from src.api.models import (
    CreateGameRequest,
    GameCreatedResponse,
    GameResponse,
    GetGameRequest,
)
from src.core.exceptions import NotFoundError
from src.db.repository import GameRepository

logger = logging.getLogger(__name__)


class GameService:
    """Orchestration of layers for game sessions."""

    def __init__(self, repository: GameRepository) -> None:
        self.repo = repository

    def create_game(self, request: CreateGameRequest) -> GameCreatedResponse:
        """Create a game. The ceiling is stored as given, also when it is zero or negative."""
        if request.score_ceiling <= 0:
            logger.warning(
                "Creating game with non-positive score ceiling %d",
                request.score_ceiling,
            )
        game = self.repo.create_game(request.score_ceiling)
        logger.info("Created game id=%d score_ceiling=%d", game.id, game.score_ceiling)
        return GameCreatedResponse(id=game.id)

    def get_game(self, request: GetGameRequest) -> GameResponse:
        game = self.repo.get_game(request.game_id)
        if game is None:
            raise NotFoundError(f"Game with game_id={request.game_id} not found.")
        return GameResponse(id=game.id, score_ceiling=game.score_ceiling)
