"""
Shared fixtures for adversarial tests.

Provides common test infrastructure for race condition tests.
"""

from collections.abc import Generator

import pytest
from psycopg_pool import ConnectionPool

from src.adapters.payment.gateway import ProviderPaymentGateway
from src.adapters.repository.postgres import PostgresTransactionManager, PostgresUserRepository
from src.domain.registration import RegistrationWorkflow


@pytest.fixture(autouse=True)
def clean_database(pool: ConnectionPool) -> Generator[None, None, None]:
    """Clean users table before each test."""
    with pool.connection() as conn:
        conn.execute("DELETE FROM users")
        conn.commit()
    yield


@pytest.fixture
def postgres_workflow(pool: ConnectionPool, succeeding_payment_client) -> RegistrationWorkflow:
    """Registration workflow on the real database with an always-succeeding provider."""
    return RegistrationWorkflow(
        transactions=PostgresTransactionManager(pool),
        repository=PostgresUserRepository(),
        payment_gateway=ProviderPaymentGateway(succeeding_payment_client, 999, "EUR"),
    )
