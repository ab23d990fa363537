"""Database lifecycle: engine, session factory and schema creation."""

import logging
from typing import Any, Iterator

from sqlalchemy import Engine, create_engine, event
from sqlalchemy.orm import Session, sessionmaker

from src.db.schema import Base

logger = logging.getLogger(__name__)


def _enable_sqlite_foreign_keys(dbapi_connection: Any, _connection_record: Any) -> None:
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


class Database:
    """Owns the engine (connection pool) for the lifetime of the process.

    Open on startup, close on shutdown. Every request gets its own Session from `session()`.
    """

    def __init__(self, url: str, echo: bool = False, **engine_kwargs: Any) -> None:
        self.url = url
        if url.startswith("sqlite"):
            engine_kwargs.setdefault("connect_args", {"check_same_thread": False})
        self.engine: Engine = create_engine(url, echo=echo, **engine_kwargs)
        if self.engine.dialect.name == "sqlite":
            event.listen(self.engine, "connect", _enable_sqlite_foreign_keys)
        self._session_factory = sessionmaker(bind=self.engine)

    def create_tables(self) -> None:
        """Ensure all tables exist. Failure here is fatal for the server."""
        Base.metadata.create_all(bind=self.engine)
        logger.info("Database schema ready at %s", self.engine.url.render_as_string())

    def drop_tables(self) -> None:
        Base.metadata.drop_all(bind=self.engine)

    def session(self) -> Session:
        return self._session_factory()

    def get_db(self) -> Iterator[Session]:
        """Yield a session and make sure it gets closed again (usable as a FastAPI dependency)."""
        db = self.session()
        try:
            yield db
        finally:
            db.close()

    def close(self) -> None:
        self.engine.dispose()
        logger.info("Database connections closed.")
