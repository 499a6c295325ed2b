"""Repository adapters - Database implementations."""

from .postgres import (
    PostgresTransaction,
    PostgresTransactionManager,
    PostgresUserRepository,
    run_migrations,
)

__all__ = [
    "PostgresTransaction",
    "PostgresTransactionManager",
    "PostgresUserRepository",
    "run_migrations",
]
