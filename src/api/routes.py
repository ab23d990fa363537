"""HTTP routes. Each request gets its own db session and its own services."""

from typing import Annotated, Iterator

from fastapi import APIRouter, Depends, Path, Query, Request, status
from sqlalchemy.orm import Session

from src.api.models import (
    AttachPlayerRequest,
    CreateGameRequest,
    GameCreatedResponse,
    GamePlayerCreatedResponse,
    GameResponse,
    GetGameRequest,
    GetPlayerRequest,
    HealthResponse,
    ListScoresRequest,
    PlayerCreatedResponse,
    PlayerResponse,
    RegisterPlayerRequest,
    ScoreDeltaRequest,
    ScoresResponse,
    ScoreUpdatedResponse,
    StandingsResponse,
)
from src.core.models import INT64_MAX, INT64_MIN
from src.db.sql_repository import (
    SQLGamePlayerRepository,
    SQLGameRepository,
    SQLPlayerRepository,
)
from src.services.game_service import GameService
from src.services.player_service import PlayerService
from src.services.score_service import ScoreService

router = APIRouter()

# Ids in the path or query string must fit the signed 64-bit id columns
PathId = Annotated[int, Path(ge=INT64_MIN, le=INT64_MAX)]
QueryId = Annotated[int, Query(ge=INT64_MIN, le=INT64_MAX)]


# --- DEPENDENCIES ---
def get_session(request: Request) -> Iterator[Session]:
    yield from request.app.state.database.get_db()


SessionDep = Annotated[Session, Depends(get_session)]


def get_player_service(db: SessionDep) -> PlayerService:
    return PlayerService(SQLPlayerRepository(db))


def get_game_service(db: SessionDep) -> GameService:
    return GameService(SQLGameRepository(db))


def get_score_service(db: SessionDep) -> ScoreService:
    return ScoreService(
        game_players=SQLGamePlayerRepository(db),
        games=SQLGameRepository(db),
        players=SQLPlayerRepository(db),
    )


PlayerServiceDep = Annotated[PlayerService, Depends(get_player_service)]
GameServiceDep = Annotated[GameService, Depends(get_game_service)]
ScoreServiceDep = Annotated[ScoreService, Depends(get_score_service)]


# --- ROUTES ---
@router.get("/")
def health() -> HealthResponse:
    return HealthResponse()


@router.post("/players/add", status_code=status.HTTP_201_CREATED)
def register_player(
    request: RegisterPlayerRequest, service: PlayerServiceDep
) -> PlayerCreatedResponse:
    return service.register_player(request)


@router.get("/players/{player_id:int}")
def get_player(player_id: PathId, service: PlayerServiceDep) -> PlayerResponse:
    return service.get_player(GetPlayerRequest(player_id=player_id))


@router.post("/games/new", status_code=status.HTTP_201_CREATED)
def create_game(
    request: CreateGameRequest, service: GameServiceDep
) -> GameCreatedResponse:
    return service.create_game(request)


@router.get("/games")
def list_scores(game_id: QueryId, service: ScoreServiceDep) -> ScoresResponse:
    return service.list_scores(ListScoresRequest(game_id=game_id))


@router.get("/games/{game_id:int}")
def get_game(game_id: PathId, service: GameServiceDep) -> GameResponse:
    return service.get_game(GetGameRequest(game_id=game_id))


@router.get("/games/{game_id:int}/standings")
def standings(game_id: PathId, service: ScoreServiceDep) -> StandingsResponse:
    return service.standings(game_id)


@router.post("/games/players/add", status_code=status.HTTP_201_CREATED)
def attach_player(
    request: AttachPlayerRequest, service: ScoreServiceDep
) -> GamePlayerCreatedResponse:
    return service.attach_player(request)


@router.put("/games/update-score")
def apply_score_delta(
    request: ScoreDeltaRequest, service: ScoreServiceDep
) -> ScoreUpdatedResponse:
    return service.apply_score_delta(request)
