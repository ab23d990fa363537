"""
Pytest will auto-discover / import this file called 'conftest.py'.
This file defines fixtures/variables required for testing multiple layers.
"""

from pathlib import Path
from typing import Iterator

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import StaticPool
from sqlalchemy.orm import Session

from src.api.app import create_app
from src.core.config import Settings
from src.core.exceptions import ConflictError
from src.core.models import GameModel, GamePlayerModel, PlayerModel
from src.db.database import Database


# --- DATABASE FIXTURES ---
@pytest.fixture
def in_memory_database() -> Iterator[Database]:
    """In-memory SQLite database. A single connection shared between threads (needed by the TestClient)."""
    database = Database("sqlite:///:memory:", poolclass=StaticPool)
    database.create_tables()
    try:
        yield database
    finally:
        database.drop_tables()
        database.close()


@pytest.fixture
def db_session_repo(in_memory_database: Database) -> Iterator[Session]:
    """Connection to a test database. Tables are removed at teardown to make unit tests of repository independent of each other."""
    db = in_memory_database.session()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture
def file_database(tmp_path: Path) -> Iterator[Database]:
    """File backed SQLite database, so concurrent threads each get their own connection."""
    database = Database(f"sqlite:///{tmp_path / 'canastra_test.db'}")
    database.create_tables()
    try:
        yield database
    finally:
        database.close()


# --- API FIXTURES ---
@pytest.fixture
def client(in_memory_database: Database) -> Iterator[TestClient]:
    """Test client running the app (including startup/shutdown) against the in-memory database."""
    app = create_app(Settings(log_file=""), database=in_memory_database)
    with TestClient(app) as test_client:
        yield test_client


# --- MOCK DEPENDENCIES ----
class MockPlayerRepository:
    """Mock the PlayerRepository using a dictionary of player models."""

    def __init__(self) -> None:
        self._players: dict[int, PlayerModel] = {}

    def create_player(self, name: str) -> PlayerModel:
        player = PlayerModel(id=len(self._players) + 1, name=name)
        self._players[player.id] = player
        return player

    def get_player(self, player_id: int) -> PlayerModel | None:
        return self._players.get(player_id)

    def clear(self) -> None:
        self._players.clear()


class MockGameRepository:
    """Mock the GameRepository using a dictionary of game models."""

    def __init__(self) -> None:
        self._games: dict[int, GameModel] = {}

    def create_game(self, score_ceiling: int) -> GameModel:
        game = GameModel(id=len(self._games) + 1, score_ceiling=score_ceiling)
        self._games[game.id] = game
        return game

    def get_game(self, game_id: int) -> GameModel | None:
        return self._games.get(game_id)

    def clear(self) -> None:
        self._games.clear()


class MockGamePlayerRepository:
    """Mock the GamePlayerRepository using a dictionary keyed by (game_id, player_id)."""

    def __init__(self) -> None:
        self._rows: dict[tuple[int, int], GamePlayerModel] = {}

    def add_player_to_game(self, game_id: int, player_id: int) -> GamePlayerModel:
        if (game_id, player_id) in self._rows:
            raise ConflictError(
                f"Player {player_id} is already part of game {game_id}."
            )
        row = GamePlayerModel(
            id=len(self._rows) + 1, game_id=game_id, player_id=player_id, score=0
        )
        self._rows[(game_id, player_id)] = row
        return row

    def apply_score_delta(self, game_id: int, player_id: int, delta: int) -> int | None:
        row = self._rows.get((game_id, player_id))
        if row is None:
            return None
        row.score += delta
        return row.score

    def list_game_players(self, game_id: int) -> list[GamePlayerModel]:
        return [row for (g, _), row in self._rows.items() if g == game_id]

    def clear(self) -> None:
        self._rows.clear()


@pytest.fixture
def mock_players() -> Iterator[MockPlayerRepository]:
    repo = MockPlayerRepository()
    try:
        yield repo
    finally:
        repo.clear()


@pytest.fixture
def mock_games() -> Iterator[MockGameRepository]:
    repo = MockGameRepository()
    try:
        yield repo
    finally:
        repo.clear()


@pytest.fixture
def mock_game_players() -> Iterator[MockGamePlayerRepository]:
    repo = MockGamePlayerRepository()
    try:
        yield repo
    finally:
        repo.clear()
