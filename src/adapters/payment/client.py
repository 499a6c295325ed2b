"""
Payment provider client interface.

The provider SDK is modeled as a client that either returns a charge id
or raises. Declines carry a provider decline code; every other failure
(timeouts, malformed responses) surfaces as some other exception.
"""

from typing import Protocol


class PaymentProviderError(Exception):
    """Base class for faults raised by the payment provider SDK."""


class PaymentDeclined(PaymentProviderError):
    """The provider refused the charge."""

    def __init__(self, code: str, message: str = "") -> None:
        super().__init__(message or f"Charge declined: {code}")
        self.code = code


class PaymentClient(Protocol):
    """Provider SDK surface used by the payment gateway."""

    def charge(self, customer_ref: str, amount_cents: int, currency: str) -> str:
        """
        Capture a charge.

        Args:
            customer_ref: Provider-side customer reference
            amount_cents: Amount in minor currency units
            currency: ISO 4217 currency code

        Returns:
            Provider charge id

        Raises:
            PaymentDeclined: The provider declined the charge
        """
        ...
