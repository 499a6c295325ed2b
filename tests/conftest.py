"""
Shared test fixtures and configuration.

This module provides pytest fixtures for:
- In-memory transaction/repository fakes for unit tests
- Payment client stubs (always succeeding, always declining)
- PostgreSQL connection pool for integration and adversarial tests
"""

import threading
from collections.abc import Callable, Generator, Iterator
from contextlib import contextmanager
from unittest.mock import Mock

import pytest
from psycopg_pool import ConnectionPool, PoolTimeout

from src.adapters.payment.client import PaymentDeclined
from src.adapters.repository.postgres import run_migrations
from src.config.settings import get_settings
from src.domain.errors import UserExists
from src.domain.ports import User
from src.domain.registration import RegistrationWorkflow
from src.domain.result import Err, Ok, Result


class InMemoryUserStore:
    """Committed users plus counters for observing workflow side effects."""

    def __init__(self) -> None:
        self.rows: dict[str, int] = {}
        self.insert_attempts = 0
        self.commits = 0
        self.rollbacks = 0
        self._next_id = 1
        self._lock = threading.Lock()

    def next_id(self) -> int:
        with self._lock:
            user_id = self._next_id
            self._next_id += 1
            return user_id


class InMemoryTransaction:
    def __init__(self) -> None:
        self.pending: dict[str, int] = {}
        self.rollback_only = False

    def set_rollback_only(self) -> None:
        self.rollback_only = True


class InMemoryTransactionManager:
    """Applies pending rows on clean exit; discards them otherwise."""

    def __init__(self, store: InMemoryUserStore) -> None:
        self._store = store

    @contextmanager
    def begin(self) -> Iterator[InMemoryTransaction]:
        tx = InMemoryTransaction()
        try:
            yield tx
        except BaseException:
            self._store.rollbacks += 1
            raise
        if tx.rollback_only:
            self._store.rollbacks += 1
            return
        self._store.rows.update(tx.pending)
        self._store.commits += 1


class InMemoryUserRepository:
    def __init__(self, store: InMemoryUserStore) -> None:
        self._store = store

    def insert(self, tx: InMemoryTransaction, username: str) -> Result[User, UserExists]:
        self._store.insert_attempts += 1
        if username in self._store.rows or username in tx.pending:
            return Err(UserExists(username))
        user_id = self._store.next_id()
        tx.pending[username] = user_id
        return Ok(User(id=user_id, username=username))


class AlwaysDecliningPaymentClient:
    """Provider stub that declines every charge with an expired card."""

    def __init__(self, code: str = "expired_card") -> None:
        self.code = code
        self.calls: list[tuple[str, int, str]] = []

    def charge(self, customer_ref: str, amount_cents: int, currency: str) -> str:
        self.calls.append((customer_ref, amount_cents, currency))
        raise PaymentDeclined(self.code)


class AlwaysSucceedingPaymentClient:
    def __init__(self) -> None:
        self.calls: list[tuple[str, int, str]] = []

    def charge(self, customer_ref: str, amount_cents: int, currency: str) -> str:
        self.calls.append((customer_ref, amount_cents, currency))
        return f"ch_test_{len(self.calls)}"


@pytest.fixture
def store() -> InMemoryUserStore:
    return InMemoryUserStore()


@pytest.fixture
def payment_gateway() -> Mock:
    """Payment gateway mock that accepts every charge."""
    gateway = Mock()
    gateway.charge.return_value = Ok(None)
    return gateway


@pytest.fixture
def transactions(store: InMemoryUserStore) -> InMemoryTransactionManager:
    return InMemoryTransactionManager(store)


@pytest.fixture
def repository(store: InMemoryUserStore) -> InMemoryUserRepository:
    return InMemoryUserRepository(store)


@pytest.fixture
def workflow(
    transactions: InMemoryTransactionManager,
    repository: InMemoryUserRepository,
    payment_gateway: Mock,
) -> RegistrationWorkflow:
    """Registration workflow backed by the in-memory store."""
    return RegistrationWorkflow(
        transactions=transactions,
        repository=repository,
        payment_gateway=payment_gateway,
    )


@pytest.fixture
def declining_payment_client() -> AlwaysDecliningPaymentClient:
    return AlwaysDecliningPaymentClient()


@pytest.fixture
def succeeding_payment_client() -> AlwaysSucceedingPaymentClient:
    return AlwaysSucceedingPaymentClient()


@pytest.fixture(scope="session")
def pool() -> Generator[ConnectionPool, None, None]:
    """
    Create connection pool for database-backed tests.

    Skips the requesting tests when PostgreSQL is not reachable at
    DATABASE_URL. Migrations are applied once per session.
    """
    settings = get_settings()
    pool = ConnectionPool(
        conninfo=settings.database_url,
        min_size=1,
        max_size=10,
        open=False,
    )
    try:
        pool.open(wait=True, timeout=5.0)
    except PoolTimeout:
        pool.close()
        pytest.skip(f"PostgreSQL not reachable at {settings.database_url}")

    run_migrations(pool)
    yield pool
    pool.close()


@pytest.fixture
def count_users(pool: ConnectionPool) -> Callable[[str], int]:
    """Count committed rows for a username."""

    def count(username: str) -> int:
        with pool.connection() as conn, conn.cursor() as cursor:
            cursor.execute("SELECT COUNT(*) FROM users WHERE username = %s", (username,))
            row = cursor.fetchone()
        return row[0]

    return count
