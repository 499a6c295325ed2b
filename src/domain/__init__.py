"""
Domain layer - Pure business logic with zero framework imports.

This package contains the premium registration workflow and its closed
set of typed errors. It defines its own port interfaces for storage,
transactions and payment, keeping infrastructure behind adapters.
"""

from .errors import (
    ExpiredCard,
    InsufficientFunds,
    PaymentError,
    RegistrationError,
    UserError,
    UserExists,
    UsernameMissing,
)
from .ports import PaymentGateway, Transaction, TransactionManager, User, UserRepository
from .registration import RegistrationWorkflow
from .result import Err, Ok, Result
from .validation import validate_username

__all__ = [
    "Err",
    "ExpiredCard",
    "InsufficientFunds",
    "Ok",
    "PaymentError",
    "PaymentGateway",
    "RegistrationError",
    "RegistrationWorkflow",
    "Result",
    "Transaction",
    "TransactionManager",
    "User",
    "UserError",
    "UserExists",
    "UserRepository",
    "UsernameMissing",
    "validate_username",
]
