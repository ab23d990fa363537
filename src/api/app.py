"""FastAPI application factory."""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Awaitable, Callable

from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware

from src.api.errors import register_error_handlers
from src.api.routes import router
from src.core.config import Settings
from src.db.database import Database

logger = logging.getLogger(__name__)


def create_app(
    settings: Settings | None = None, database: Database | None = None
) -> FastAPI:
    """
    Build the application around an explicitly constructed Database.
    ----
    Tables are created when the app starts up and the connection pool is disposed on shutdown.
    """
    settings = settings or Settings.from_env()
    database = database or Database(settings.database_url, echo=settings.sql_echo)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        database.create_tables()
        logger.info("Server running on port %s", settings.port)
        try:
            yield
        finally:
            database.close()

    app = FastAPI(title="Canastra score keeper", lifespan=lifespan)
    app.state.database = database
    app.state.settings = settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def log_request(
        request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        client = (
            f"{request.client.host}:{request.client.port}" if request.client else "-"
        )
        logger.info("%s %s %s", client, request.method, request.url)
        return await call_next(request)

    register_error_handlers(app)
    app.include_router(router)
    return app
