"""Unit tests for src/services/game_service.py"""

import logging

import pytest

from conftest import MockGameRepository
from src.core.exceptions import NotFoundError
from src.services.game_service import (
    CreateGameRequest,
    GameCreatedResponse,
    GameResponse,
    GameService,
    GetGameRequest,
)


def test_create_game(mock_games: MockGameRepository) -> None:
    service = GameService(mock_games)
    response = service.create_game(CreateGameRequest(score_ceiling=3000))

    assert isinstance(response, GameCreatedResponse)
    assert response.message == "game_created"

    stored = mock_games.get_game(response.id)
    assert stored is not None
    assert stored.score_ceiling == 3000


def test_create_games_get_fresh_ids(mock_games: MockGameRepository) -> None:
    service = GameService(mock_games)
    ids = {
        service.create_game(CreateGameRequest(score_ceiling=1000)).id for _ in range(3)
    }
    assert len(ids) == 3


def test_ceiling_round_trips(mock_games: MockGameRepository) -> None:
    """Game metadata returns the ceiling unchanged."""
    service = GameService(mock_games)
    created = service.create_game(CreateGameRequest(score_ceiling=2500))

    response = service.get_game(GetGameRequest(game_id=created.id))
    assert isinstance(response, GameResponse)
    assert response.id == created.id
    assert response.score_ceiling == 2500


@pytest.mark.parametrize("score_ceiling", [0, -1])
def test_non_positive_ceiling_accepted(
    mock_games: MockGameRepository,
    score_ceiling: int,
    caplog: pytest.LogCaptureFixture,
) -> None:
    """Accepted and stored as is, only a warning gets logged."""
    service = GameService(mock_games)
    with caplog.at_level(logging.WARNING, logger="src.services.game_service"):
        created = service.create_game(CreateGameRequest(score_ceiling=score_ceiling))

    assert "non-positive score ceiling" in caplog.text
    stored = service.get_game(GetGameRequest(game_id=created.id))
    assert stored.score_ceiling == score_ceiling


def test_get_unknown_game(mock_games: MockGameRepository) -> None:
    service = GameService(mock_games)
    with pytest.raises(NotFoundError):
        service.get_game(GetGameRequest(game_id=1))
