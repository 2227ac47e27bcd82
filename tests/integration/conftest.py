"""
Shared fixtures for integration tests.

Requires PostgreSQL reachable at DUST_DATABASE_URL (defaults to the
local development database). Run with `pytest -m integration`.
"""

import os
from collections.abc import Generator

import pytest
from psycopg_pool import ConnectionPool

from src.adapters.repository.postgres import PostgresUserRepository, run_migrations
from src.config.settings import Settings


@pytest.fixture(scope="module")
def database_url() -> str:
    """Database URL without requiring the server settings to be present."""
    return os.environ.get("DUST_DATABASE_URL", Settings.model_fields["database_url"].default)


@pytest.fixture(scope="module")
def pool(database_url: str) -> Generator[ConnectionPool, None, None]:
    """Create connection pool with migrations applied."""
    pool = ConnectionPool(conninfo=database_url, min_size=1, max_size=10, open=True)
    run_migrations(pool)
    yield pool
    pool.close()


@pytest.fixture
def repository(pool: ConnectionPool) -> PostgresUserRepository:
    """Create repository instance for each test."""
    return PostgresUserRepository(pool)


@pytest.fixture(autouse=True)
def clean_database(pool: ConnectionPool) -> Generator[None, None, None]:
    """Clean users table before each test."""
    with pool.connection() as conn:
        conn.execute("DELETE FROM users")
        conn.commit()
    yield
