"""
Port interfaces - Protocol definitions for infrastructure abstraction.

This module defines the interfaces (ports) that the domain requires
from infrastructure. Adapters implement these protocols.
"""

from contextlib import AbstractContextManager
from dataclasses import dataclass
from typing import Protocol

from .errors import PaymentError, UserExists
from .result import Result


@dataclass(frozen=True)
class User:
    """
    Registered user.

    Only ever built from a successful insert; ``id`` is assigned by the store.
    """

    id: int
    username: str


class Transaction(Protocol):
    """Handle on an open unit of work against the store."""

    def set_rollback_only(self) -> None:
        """
        Mark the unit of work so that it rolls back when its scope exits.

        Called by the workflow when a step fails with a typed error.
        The scope still exits normally; nothing is committed.
        """
        ...


class TransactionManager(Protocol):
    """Port interface for transaction scopes."""

    def begin(self) -> AbstractContextManager[Transaction]:
        """
        Open a transaction scope.

        The scope commits on clean exit, rolls back if marked
        rollback-only or if an exception escapes it, and always
        releases the underlying connection.
        """
        ...


class UserRepository(Protocol):
    """Port interface for user persistence."""

    def insert(self, tx: Transaction, username: str) -> Result[User, UserExists]:
        """
        Insert a user inside the caller's transaction.

        Args:
            tx: Active transaction scope from TransactionManager.begin()
            username: Validated username

        Returns:
            Ok(User) with the store-assigned id, or Err(UserExists)
            when the username uniqueness constraint is violated.
            Any other storage fault is raised, not returned.
        """
        ...


class PaymentGateway(Protocol):
    """Port interface for charging a user."""

    def charge(self, user: User) -> Result[None, PaymentError]:
        """
        Charge the premium price to the user.

        Returns:
            Ok(None) on a captured charge, or Err(PaymentError) when the
            provider declines it for a known reason. Any other provider
            fault is raised, not returned.
        """
        ...
