"""
Console payment client - Implements PaymentClient protocol.

This module provides a console-based implementation of the provider
SDK surface, logging charges to stdout for demo purposes.
"""

import logging
import secrets

logger = logging.getLogger(__name__)


class ConsolePaymentClient:
    """
    Implements PaymentClient protocol via console logging.

    Uses structural subtyping - no explicit inheritance from Protocol.
    For demo/development purposes - every charge succeeds.
    """

    def charge(self, customer_ref: str, amount_cents: int, currency: str) -> str:
        """
        Log the charge to console (simulates a captured payment).

        In production, this would be replaced with the provider SDK client.

        Args:
            customer_ref: Provider-side customer reference
            amount_cents: Amount in minor currency units
            currency: ISO 4217 currency code

        Returns:
            Generated charge id
        """
        charge_id = f"ch_{secrets.token_hex(8)}"
        logger.info(
            "[PAYMENT] Customer: %s Amount: %d %s Charge: %s",
            customer_ref,
            amount_cents,
            currency,
            charge_id,
        )
        return charge_id
