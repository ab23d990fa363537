"""Implementation of the Repositories using SQLAlchemy"""

import logging
from contextlib import contextmanager
from typing import Iterator

from sqlalchemy import select, update
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from src.core.exceptions import (
    ConflictError,
    InvalidRequestError,
    ReferentialError,
    StoreError,
)
from src.core.models import (
    INT64_MAX,
    INT64_MIN,
    GameId,
    GameModel,
    GamePlayerModel,
    PlayerId,
    PlayerModel,
)
from src.db.schema import DBGame, DBGamePlayer, DBPlayer, utc_now

logger = logging.getLogger(__name__)


@contextmanager
def store_errors(db: Session, action: str) -> Iterator[None]:
    """Roll back and re-raise any SQLAlchemy failure as a StoreError."""
    try:
        yield
    except SQLAlchemyError as exc:
        db.rollback()
        raise StoreError(f"Store failure while trying to {action}.") from exc
    except OverflowError as exc:
        # Raised by the driver for integers that do not fit in 64 bits
        db.rollback()
        raise InvalidRequestError("integer out of range") from exc


class SQLPlayerRepository:
    """Players stored using SQL / methods implemented using SQLAlchemy"""

    def __init__(self, db_session: Session) -> None:
        self.db = db_session

    def create_player(self, name: str) -> PlayerModel:
        with store_errors(self.db, "create a player"):
            player_db = DBPlayer(name=name)
            self.db.add(player_db)
            self.db.commit()
            return self._to_model(player_db)

    def get_player(self, player_id: PlayerId) -> PlayerModel | None:
        query = select(DBPlayer).where(DBPlayer.id == player_id)
        with store_errors(self.db, "fetch a player"):
            player_db = self.db.scalar(query)
        return self._to_model(player_db) if player_db else None

    def _to_model(self, player_db: DBPlayer) -> PlayerModel:
        return PlayerModel(id=player_db.id, name=player_db.name)


class SQLGameRepository:
    """Games stored using SQL / methods implemented using SQLAlchemy"""

    def __init__(self, db_session: Session) -> None:
        self.db = db_session

    def create_game(self, score_ceiling: int) -> GameModel:
        with store_errors(self.db, "create a game"):
            game_db = DBGame(score_ceiling=score_ceiling)
            self.db.add(game_db)
            self.db.commit()
            return self._to_model(game_db)

    def get_game(self, game_id: GameId) -> GameModel | None:
        query = select(DBGame).where(DBGame.id == game_id)
        with store_errors(self.db, "fetch a game"):
            game_db = self.db.scalar(query)
        return self._to_model(game_db) if game_db else None

    def _to_model(self, game_db: DBGame) -> GameModel:
        return GameModel(id=game_db.id, score_ceiling=game_db.score_ceiling)


class SQLGamePlayerRepository:
    """
    The score ledger stored using SQL.

    The unique constraint on (player_id, game_id) is the final word on duplicates, and score changes
    are always sent to the database as `score = score + delta` so concurrent updates can not get lost.
    Scores never leave the signed 64-bit range.
    """

    def __init__(self, db_session: Session) -> None:
        self.db = db_session

    def add_player_to_game(
        self, game_id: GameId, player_id: PlayerId
    ) -> GamePlayerModel:
        """Insert the association with a score of 0. Raises ConflictError if the pair already exists."""
        game_player_db = DBGamePlayer(game_id=game_id, player_id=player_id, score=0)
        with store_errors(self.db, "attach a player"):
            try:
                self.db.add(game_player_db)
                self.db.commit()
            except IntegrityError as exc:
                self.db.rollback()
                if self._fetch(game_id, player_id) is not None:
                    raise ConflictError(
                        f"Player {player_id} is already part of game {game_id}."
                    ) from exc
                # Unique constraint was fine, so a foreign key must have failed.
                raise ReferentialError(
                    f"Game {game_id} or player {player_id} does not exist."
                ) from exc
            return self._to_model(game_player_db)

    def apply_score_delta(
        self, game_id: GameId, player_id: PlayerId, delta: int
    ) -> int | None:
        """
        Atomically add delta to the stored score.
        ----
        Return the new score, or None if no such association exists.
        Raises InvalidRequestError if the new score would not fit in 64 bits (score is left unchanged).
        """
        if not INT64_MIN <= delta <= INT64_MAX:
            raise InvalidRequestError("score delta out of range")

        # Bounds are computed here so the database never evaluates an overflowing sum
        if delta > 0:
            in_range = DBGamePlayer.score <= INT64_MAX - delta
        else:
            in_range = DBGamePlayer.score >= INT64_MIN - delta
        statement = (
            update(DBGamePlayer)
            .where(
                DBGamePlayer.game_id == game_id,
                DBGamePlayer.player_id == player_id,
                in_range,
            )
            .values(score=DBGamePlayer.score + delta, updated_at=utc_now())
            .execution_options(synchronize_session=False)
        )
        with store_errors(self.db, "apply a score delta"):
            result = self.db.execute(statement)
            if result.rowcount == 0:
                self.db.rollback()
                if self._fetch(game_id, player_id) is not None:
                    raise InvalidRequestError("score out of range")
                return None
            # Still inside the transaction that holds the write lock on the row.
            new_score = self.db.scalar(
                select(DBGamePlayer.score).where(
                    DBGamePlayer.game_id == game_id,
                    DBGamePlayer.player_id == player_id,
                )
            )
            self.db.commit()
        return new_score

    def list_game_players(self, game_id: GameId) -> list[GamePlayerModel]:
        query = (
            select(DBGamePlayer)
            .where(DBGamePlayer.game_id == game_id)
            .execution_options(populate_existing=True)
        )
        with store_errors(self.db, "list scores"):
            rows = self.db.scalars(query).all()
        return [self._to_model(row) for row in rows]

    def _fetch(self, game_id: GameId, player_id: PlayerId) -> DBGamePlayer | None:
        query = select(DBGamePlayer).where(
            DBGamePlayer.game_id == game_id, DBGamePlayer.player_id == player_id
        )
        return self.db.scalar(query)

    def _to_model(self, game_player_db: DBGamePlayer) -> GamePlayerModel:
        return GamePlayerModel(
            id=game_player_db.id,
            game_id=game_player_db.game_id,
            player_id=game_player_db.player_id,
            score=game_player_db.score,
        )
