"""
FastAPI application factory and configuration.

This module creates the FastAPI application instance from an explicit
Settings object, wires the request pipeline, mounts the static chat
front-end and manages lifespan events.

Run with `python -m src.api.main` or
`uvicorn src.api.main:create_app --factory`.
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles
from psycopg_pool import ConnectionPool

from src.adapters.logsink import ConsoleLogSink, FileLogSink
from src.adapters.repository.postgres import PostgresUserRepository, run_migrations
from src.api.audit import AuditLog
from src.api.pipeline import RequestPipeline
from src.api.responses import ResponseBuilder
from src.api.routes import create_router
from src.config.settings import Settings, get_settings
from src.domain.ports import LogSink, UserRepository
from src.domain.registration import RegistrationService

logger = logging.getLogger(__name__)


def build_log_sink(settings: Settings) -> LogSink:
    """File sink when a log directory is configured, console otherwise."""
    if settings.log_dir is not None:
        return FileLogSink(settings.log_dir)
    return ConsoleLogSink()


def install_pipeline(
    app: FastAPI, settings: Settings, repository: UserRepository, log_sink: LogSink
) -> None:
    """Wire pipeline and response builder into app.state for dependency injection."""
    audit = AuditLog(sink=log_sink, server_addr=settings.server_addr)
    app.state.pipeline = RequestPipeline(
        service=RegistrationService(repository=repository),
        audit=audit,
        max_payload_bytes=settings.max_payload_bytes,
    )
    app.state.response_builder = ResponseBuilder(audit=audit)


def create_app(settings: Settings | None = None) -> FastAPI:
    """
    Create and configure the FastAPI application.

    API routes are registered before the static mount so they take
    precedence over files under "/".
    """
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
        """
        Manages application startup and shutdown:
        - Creates database connection pool and runs migrations
        - Wires the request pipeline
        - Closes connection pool on shutdown
        """
        logger.info("Starting application...")
        logger.info("Connecting to database...")

        pool = ConnectionPool(
            conninfo=settings.database_url,
            min_size=settings.pool_min_size,
            max_size=settings.pool_max_size,
            open=True,
        )

        logger.info("Running database migrations...")
        run_migrations(pool)

        install_pipeline(app, settings, PostgresUserRepository(pool), build_log_sink(settings))

        logger.info(
            "dustweb successfully started, listening on: %s:%s",
            settings.server_addr,
            settings.server_port,
        )

        yield

        logger.info("Shutting down application...")
        pool.close()
        logger.info("Database connection pool closed")

    app = FastAPI(
        title="dustweb",
        description="User registration API and chat front-end",
        version="0.1.0",
        lifespan=lifespan,
    )

    app.include_router(create_router(settings))
    app.mount("/", StaticFiles(directory=settings.chat_path, html=True), name="chat")

    return app


def run() -> None:
    """Resolve settings, configure logging and serve until interrupted."""
    settings = get_settings()
    logging.basicConfig(
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        level=getattr(logging, settings.log_level.upper()),
    )
    uvicorn.run(
        create_app(settings),
        host=settings.server_addr,
        port=settings.server_port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    run()
