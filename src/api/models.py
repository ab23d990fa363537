"""Requests and Response models"""

from typing import Annotated

from pydantic import BaseModel, Field, StrictInt

from src.core.models import INT64_MAX, INT64_MIN, GameId, PlayerId
from src.core.shared_types import Message

# JSON integers must fit the signed 64-bit columns they end up in
Int64 = Annotated[StrictInt, Field(ge=INT64_MIN, le=INT64_MAX)]


# --- REQUEST MODELS ---
class RegisterPlayerRequest(BaseModel):
    # Missing name is treated like a blank one (rejected by the PlayerService).
    name: str = ""


class GetPlayerRequest(BaseModel):
    player_id: Int64


class CreateGameRequest(BaseModel):
    score_ceiling: Int64


class GetGameRequest(BaseModel):
    game_id: Int64


class AttachPlayerRequest(BaseModel):
    game_id: Int64
    player_id: Int64


class ScoreDeltaRequest(BaseModel):
    """`score` is the delta to add to the current score, not the new total."""

    game_id: Int64
    player_id: Int64
    score: Int64


class ListScoresRequest(BaseModel):
    game_id: Int64


# --- RESPONSE MODELS ---
class Envelope(BaseModel):
    """Fields every response carries."""

    message: str
    success: bool = True


class ErrorResponse(Envelope):
    success: bool = False


class HealthResponse(Envelope):
    message: str = Message.ALL_GOOD


class PlayerCreatedResponse(Envelope):
    id: PlayerId
    message: str = Message.USER_CREATED


class PlayerResponse(Envelope):
    id: PlayerId
    name: str
    message: str = Message.PLAYER_FOUND


class GameCreatedResponse(Envelope):
    id: GameId
    message: str = Message.GAME_CREATED


class GameResponse(Envelope):
    id: GameId
    score_ceiling: int
    message: str = Message.GAME_FOUND


class GamePlayerCreatedResponse(Envelope):
    id: int
    message: str = Message.GAME_PLAYER_CREATED


class ScoreUpdatedResponse(Envelope):
    new_score: int
    message: str = Message.GAME_UPDATED


class GamePlayerScore(BaseModel):
    game_id: GameId
    player_id: PlayerId
    score: int


class ScoresResponse(Envelope):
    data: list[GamePlayerScore]
    message: str = Message.SCORES


class StandingsResponse(Envelope):
    game_id: GameId
    score_ceiling: int
    scores: list[GamePlayerScore]
    reached_ceiling: list[PlayerId]
    message: str = Message.STANDINGS
