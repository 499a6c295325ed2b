"""
Domain errors - Closed set of typed registration failures.

Each variant is a plain value, not an exception. Variants travel through
the workflow inside ``Err`` and are consumed once by the HTTP layer.
Adding a variant here makes every exhaustive ``match`` that consumes
``RegistrationError`` fail type checking until it is handled.
"""

from dataclasses import dataclass
from typing import TypeAlias


@dataclass(frozen=True)
class UsernameMissing:
    """No username was supplied, or it was blank."""


@dataclass(frozen=True)
class UserExists:
    """A user with this username is already registered."""

    username: str


@dataclass(frozen=True)
class ExpiredCard:
    """The payment provider declined the charge: card expired."""


@dataclass(frozen=True)
class InsufficientFunds:
    """The payment provider declined the charge: credit limit reached."""


UserError: TypeAlias = UsernameMissing | UserExists
PaymentError: TypeAlias = ExpiredCard | InsufficientFunds
RegistrationError: TypeAlias = UserError | PaymentError
