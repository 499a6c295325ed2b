"""
PostgreSQL adapters - Implement TransactionManager and UserRepository ports.

This module provides the PostgreSQL implementations of the domain's
storage ports using psycopg3 with raw SQL.

Transaction Scope
-----------------
PostgresTransactionManager.begin() checks a connection out of the pool
and opens a psycopg transaction block on it. The block:

1. Commits when the scope exits normally.
2. Rolls back when the workflow called set_rollback_only() (a typed
   failure), by raising psycopg.Rollback, which the block swallows.
3. Rolls back and re-raises when any exception escapes (a fatal fault).

In every case the connection is returned to the pool.

Uniqueness Violations
---------------------
Duplicate usernames are detected by the database, never by a prior
SELECT. Under concurrent inserts of the same username, READ COMMITTED
makes the second INSERT wait for the first transaction; it then either
succeeds (first rolled back) or fails with SQLSTATE 23505 (first
committed). Only that SQLSTATE on the username constraint becomes
UserExists; every other error is re-raised.
"""

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

from psycopg import Connection, Rollback, errors
from psycopg_pool import ConnectionPool

from src.domain.errors import UserExists
from src.domain.ports import User
from src.domain.result import Err, Ok, Result

logger = logging.getLogger(__name__)

# Name given to the UNIQUE (username) constraint in migrations/001_create_users.sql
USERNAME_CONSTRAINT = "users_username_key"


class PostgresTransaction:
    """
    Implements Transaction protocol over a pooled psycopg connection.

    Uses structural subtyping - no explicit inheritance from Protocol.
    """

    def __init__(self, connection: Connection) -> None:
        self.connection = connection
        self.rollback_only = False

    def set_rollback_only(self) -> None:
        self.rollback_only = True


class PostgresTransactionManager:
    """Implements TransactionManager protocol via psycopg3 connection pool."""

    def __init__(self, pool: ConnectionPool) -> None:
        """
        Initialize transaction manager with connection pool.

        Args:
            pool: psycopg3 ConnectionPool for database connections
        """
        self._pool = pool

    @contextmanager
    def begin(self) -> Iterator[PostgresTransaction]:
        """Open a transaction scope on a connection checked out from the pool."""
        with self._pool.connection() as conn, conn.transaction():
            tx = PostgresTransaction(conn)
            yield tx
            if tx.rollback_only:
                raise Rollback()


class PostgresUserRepository:
    """
    Implements UserRepository protocol via psycopg3.

    Uses structural subtyping - no explicit inheritance from Protocol.
    All SQL uses parameterized queries for security.
    """

    def insert(self, tx: PostgresTransaction, username: str) -> Result[User, UserExists]:
        """
        Insert a user row inside the caller's transaction.

        The database UNIQUE constraint on username is the only duplicate
        check, which keeps concurrent registrations race-free.

        Args:
            tx: Active transaction from PostgresTransactionManager.begin()
            username: Validated username

        Returns:
            Ok(User) with the generated id, or Err(UserExists) when the
            username constraint rejects the row

        Raises:
            psycopg.Error: Any other database failure (fatal)
        """
        sql = "INSERT INTO users (username) VALUES (%s) RETURNING id"

        try:
            with tx.connection.cursor() as cursor:
                cursor.execute(sql, (username,))
                row = cursor.fetchone()
        except errors.UniqueViolation as e:
            if e.diag.constraint_name != USERNAME_CONSTRAINT:
                raise
            logger.info("Username already registered: %s", username)
            return Err(UserExists(username))

        if row is None:
            raise RuntimeError("INSERT ... RETURNING produced no row")
        return Ok(User(id=row[0], username=username))


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
        logger.warning(f"Migrations directory not found: {migrations_dir}")
        return

    sql_files = sorted(migrations_dir.glob("*.sql"))

    if not sql_files:
        logger.info("No migration files found")
        return

    logger.info(f"Running {len(sql_files)} migration(s)")

    for sql_file in sql_files:
        logger.info(f"Executing migration: {sql_file.name}")
        try:
            sql_content = sql_file.read_text()

            with pool.connection() as conn:
                conn.execute(sql_content)

            logger.info(f"Migration complete: {sql_file.name}")
        except Exception as e:
            logger.error(f"Migration failed: {sql_file.name} - {e}")
            raise RuntimeError(f"Database migration failed: {sql_file.name}") from e
