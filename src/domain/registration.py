"""
Premium registration workflow - Validate, persist, charge in one transaction.

Workflow State Machine
======================

    Start -> Validating -> Inserting -> Charging -> Committed
                 |             |           |
                 v             v           v
            RolledBack(UsernameMissing)
                         RolledBack(UserExists)
                                     RolledBack(ExpiredCard | InsufficientFunds)

Rules:
- First error wins. Later steps never run after a typed failure.
- Validation happens before a connection is checked out, so a missing
  username has no storage side effects at all.
- Insert and charge share one transaction. A declined charge rolls back
  the inserted row; there is no other compensation.
- Fatal faults (anything raised) escape the transaction scope, which
  rolls back before re-raising.
"""

import logging
from dataclasses import dataclass

from .errors import RegistrationError
from .ports import PaymentGateway, Transaction, TransactionManager, User, UserRepository
from .result import Err, Result
from .validation import validate_username

logger = logging.getLogger(__name__)


@dataclass
class RegistrationWorkflow:
    """
    Domain service for premium user registration.

    Orchestrates username validation, user insertion and payment
    inside a single transaction scope.
    """

    transactions: TransactionManager
    repository: UserRepository
    payment_gateway: PaymentGateway

    def register(self, raw_username: str | None) -> Result[User, RegistrationError]:
        """
        Register a premium user.

        Args:
            raw_username: Username as received from the request, or None

        Returns:
            Ok(User) once the transaction committed, or Err with the first
            typed failure after the transaction rolled back.
        """
        username = validate_username(raw_username)
        if isinstance(username, Err):
            logger.info("Registration rejected: username missing")
            return username

        with self.transactions.begin() as tx:
            result = self._insert_and_charge(tx, username.value)
            if isinstance(result, Err):
                tx.set_rollback_only()

        if isinstance(result, Err):
            logger.info(
                "Registration rolled back for %s: %s",
                username.value,
                type(result.error).__name__,
            )
        else:
            logger.info("Registration committed for %s (id=%s)", username.value, result.value.id)
        return result

    def _insert_and_charge(
        self, tx: Transaction, username: str
    ) -> Result[User, RegistrationError]:
        inserted = self.repository.insert(tx, username)
        if isinstance(inserted, Err):
            return inserted

        charged = self.payment_gateway.charge(inserted.value)
        if isinstance(charged, Err):
            return charged
        return inserted
