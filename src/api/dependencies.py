"""
FastAPI dependencies - Dependency injection factories.

This module provides Depends() factories for injecting
domain services and infrastructure adapters into routes.
"""

from fastapi import Request
from psycopg_pool import ConnectionPool

from src.adapters.payment.console import ConsolePaymentClient
from src.adapters.payment.gateway import ProviderPaymentGateway
from src.adapters.repository.postgres import PostgresTransactionManager, PostgresUserRepository
from src.config.settings import get_settings
from src.domain.registration import RegistrationWorkflow

# Module-level singletons - both adapters are stateless
_payment_client = ConsolePaymentClient()
_user_repository = PostgresUserRepository()


def get_pool(request: Request) -> ConnectionPool:
    """
    Get connection pool from app state.

    The pool is created during app lifespan startup and stored in app.state.
    """
    return request.app.state.pool


def get_transaction_manager(request: Request) -> PostgresTransactionManager:
    """Create transaction manager with connection pool from app state."""
    pool = get_pool(request)
    return PostgresTransactionManager(pool)


def get_payment_gateway() -> ProviderPaymentGateway:
    """Create payment gateway charging the configured premium price."""
    settings = get_settings()
    return ProviderPaymentGateway(
        client=_payment_client,
        amount_cents=settings.premium_price_cents,
        currency=settings.premium_currency,
    )


def get_registration_workflow(request: Request) -> RegistrationWorkflow:
    """
    Create registration workflow with injected dependencies.

    Wires together the transaction manager, repository and payment gateway.
    """
    return RegistrationWorkflow(
        transactions=get_transaction_manager(request),
        repository=_user_repository,
        payment_gateway=get_payment_gateway(),
    )
