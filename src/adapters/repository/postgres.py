"""
PostgreSQL repository adapter - Implements UserRepository protocol.

This module provides the PostgreSQL implementation of the domain's
repository port using psycopg3 with raw SQL.

Duplicate emails are rejected by the UNIQUE constraint on users.email,
so concurrent registrations of the same address cannot both succeed.
Driver errors are translated into domain exceptions; their messages are
returned to clients, so they stay generic.
"""

import logging
from pathlib import Path

import psycopg
from psycopg_pool import ConnectionPool

from src.domain.exceptions import PersistenceError, UserAlreadyExists
from src.domain.ports import SanitizedCredential

logger = logging.getLogger(__name__)

USER_EXISTS_MESSAGE = "A user with this email address already exists."
CREATE_FAILED_MESSAGE = "Error occurred creating the user."
UNAVAILABLE_MESSAGE = "Unable to connect to the database."


class PostgresUserRepository:
    """
    Implements UserRepository protocol via psycopg3.

    Uses structural subtyping - no explicit inheritance from Protocol.
    All SQL uses parameterized queries for security.
    """

    def __init__(self, pool: ConnectionPool) -> None:
        """
        Initialize repository with connection pool.

        Args:
            pool: psycopg3 ConnectionPool for database connections
        """
        self._pool = pool

    def create_user(self, credential: SanitizedCredential) -> None:
        """
        Insert a new user row.

        Uses INSERT ... ON CONFLICT DO NOTHING: a rowcount of 0 means the
        email is already taken.

        Raises:
            UserAlreadyExists: If the email is already registered
            PersistenceError: On any database error
        """
        sql = """
            INSERT INTO users (email, password_hash, created_at)
            VALUES (%s, %s, NOW())
            ON CONFLICT (email) DO NOTHING
        """

        try:
            with self._pool.connection() as conn, conn.cursor() as cursor:
                cursor.execute(sql, (credential.email, credential.password_hash))
                conn.commit()
                inserted = cursor.rowcount == 1
        except psycopg.Error as e:
            logger.error("Failed to create user: %s", e)
            raise PersistenceError(CREATE_FAILED_MESSAGE) from e

        if not inserted:
            raise UserAlreadyExists(USER_EXISTS_MESSAGE)

    def health_check(self) -> None:
        """
        Validate database connectivity with a trivial query.

        Raises:
            PersistenceError: If the database cannot be reached
        """
        try:
            with self._pool.connection() as conn:
                conn.execute("SELECT 1")
        except (psycopg.Error, TimeoutError) as e:
            logger.error("Database health check failed: %s", e)
            raise PersistenceError(UNAVAILABLE_MESSAGE) from e


def run_migrations(pool: ConnectionPool) -> None:
    """
    Execute all SQL migration files from the migrations directory.

    Migrations are executed in sorted order (alphabetically by filename).
    Each migration should be idempotent (use IF NOT EXISTS, etc.).

    Args:
        pool: psycopg3 ConnectionPool instance
    """
    # Structure: src/adapters/repository/postgres.py -> migrations/
    migrations_dir = Path(__file__).parent.parent.parent.parent / "migrations"

    if not migrations_dir.exists():
        logger.warning("Migrations directory not found: %s", migrations_dir)
        return

    sql_files = sorted(migrations_dir.glob("*.sql"))

    if not sql_files:
        logger.info("No migration files found")
        return

    logger.info("Running %d migration(s)", len(sql_files))

    for sql_file in sql_files:
        logger.info("Executing migration: %s", sql_file.name)
        try:
            with pool.connection() as conn:
                conn.execute(sql_file.read_text())
            logger.info("Migration complete: %s", sql_file.name)
        except Exception as e:
            logger.error("Migration failed: %s - %s", sql_file.name, e)
            raise RuntimeError(f"Database migration failed: {sql_file.name}") from e
