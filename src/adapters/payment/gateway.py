"""
Payment gateway adapter - Implements PaymentGateway protocol.

Translates provider declines into typed PaymentError values. Only
decline codes listed in DECLINE_CODES are domain errors; an unknown
code, or any other provider fault, propagates as a fatal exception.
"""

import logging

from src.domain.errors import ExpiredCard, InsufficientFunds, PaymentError
from src.domain.ports import User
from src.domain.result import Err, Ok, Result

from .client import PaymentClient, PaymentDeclined

logger = logging.getLogger(__name__)

DECLINE_CODES: dict[str, PaymentError] = {
    "expired_card": ExpiredCard(),
    "insufficient_funds": InsufficientFunds(),
}


class ProviderPaymentGateway:
    """
    Implements PaymentGateway protocol on top of a provider client.

    Uses structural subtyping - no explicit inheritance from Protocol.
    """

    def __init__(self, client: PaymentClient, amount_cents: int, currency: str) -> None:
        """
        Initialize gateway.

        Args:
            client: Provider SDK client
            amount_cents: Premium price in minor currency units
            currency: ISO 4217 currency code
        """
        self._client = client
        self._amount_cents = amount_cents
        self._currency = currency

    def charge(self, user: User) -> Result[None, PaymentError]:
        """
        Charge the premium price to the user.

        Returns:
            Ok(None) on success, Err(PaymentError) for a known decline

        Raises:
            PaymentDeclined: Decline code with no domain mapping (fatal)
            Exception: Any other provider fault (fatal)
        """
        customer_ref = f"user-{user.id}"
        try:
            charge_id = self._client.charge(customer_ref, self._amount_cents, self._currency)
        except PaymentDeclined as e:
            error = DECLINE_CODES.get(e.code)
            if error is None:
                raise
            logger.info("Charge declined for %s: %s", customer_ref, e.code)
            return Err(error)

        logger.info("Charge %s captured for %s", charge_id, customer_ref)
        return Ok(None)
