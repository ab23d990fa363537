"""Orchestration of the score ledger: attaching players to games, applying score deltas and reading scores back."""

import logging

from src.api.models import (
    AttachPlayerRequest,
    GamePlayerCreatedResponse,
    GamePlayerScore,
    ListScoresRequest,
    ScoreDeltaRequest,
    ScoresResponse,
    ScoreUpdatedResponse,
    StandingsResponse,
)
from src.core.exceptions import NotFoundError, ReferentialError
from src.core.models import GameId, GamePlayerModel
from src.db.repository import GamePlayerRepository, GameRepository, PlayerRepository

logger = logging.getLogger(__name__)


class ScoreService:
    """Orchestration of layers for the score ledger."""

    def __init__(
        self,
        game_players: GamePlayerRepository,
        games: GameRepository,
        players: PlayerRepository,
    ) -> None:
        self.repo = game_players
        self.games = games
        self.players = players

    def attach_player(self, request: AttachPlayerRequest) -> GamePlayerCreatedResponse:
        """Add a registered player to an existing game, starting at a score of 0."""

        # Check references explicitly so a missing game/player is not reported as a store failure
        if self.games.get_game(request.game_id) is None:
            raise ReferentialError(f"Game with game_id={request.game_id} not found.")
        if self.players.get_player(request.player_id) is None:
            raise ReferentialError(
                f"Player with player_id={request.player_id} not found."
            )

        # Duplicates are rejected by the repository (ConflictError)
        game_player = self.repo.add_player_to_game(request.game_id, request.player_id)
        logger.info(
            "Attached player %d to game %d", game_player.player_id, game_player.game_id
        )
        return GamePlayerCreatedResponse(id=game_player.id)

    def apply_score_delta(self, request: ScoreDeltaRequest) -> ScoreUpdatedResponse:
        """Add the delta to the player's score for the game and return the new total."""
        new_score = self.repo.apply_score_delta(
            request.game_id, request.player_id, request.score
        )
        if new_score is None:
            raise NotFoundError(
                f"Player {request.player_id} is not part of game {request.game_id}."
            )
        logger.info(
            "Score of player %d in game %d changed by %+d to %d",
            request.player_id,
            request.game_id,
            request.score,
            new_score,
        )
        return ScoreUpdatedResponse(new_score=new_score)

    def list_scores(self, request: ListScoresRequest) -> ScoresResponse:
        """
        All (player, score) pairs of a game, in storage order.
        ----
        An unknown game simply has no scores: the result is empty, not an error.
        """
        rows = self.repo.list_game_players(request.game_id)
        return ScoresResponse(data=[self._to_score(row) for row in rows])

    def standings(self, game_id: GameId) -> StandingsResponse:
        """
        Scores of a game next to its score ceiling.
        ----
        Only reports who reached the ceiling. Nothing stops scores from going past it.
        """
        game = self.games.get_game(game_id)
        if game is None:
            raise NotFoundError(f"Game with {game_id=} not found.")

        scores = [self._to_score(row) for row in self.repo.list_game_players(game_id)]
        return StandingsResponse(
            game_id=game.id,
            score_ceiling=game.score_ceiling,
            scores=scores,
            reached_ceiling=[
                s.player_id for s in scores if s.score >= game.score_ceiling
            ],
        )

    # -- Internal helpers --
    def _to_score(self, row: GamePlayerModel) -> GamePlayerScore:
        return GamePlayerScore(
            game_id=row.game_id, player_id=row.player_id, score=row.score
        )
