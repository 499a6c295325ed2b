"""Payment adapters - Provider client and gateway implementations."""

from .client import PaymentClient, PaymentDeclined, PaymentProviderError
from .console import ConsolePaymentClient
from .gateway import DECLINE_CODES, ProviderPaymentGateway

__all__ = [
    "DECLINE_CODES",
    "ConsolePaymentClient",
    "PaymentClient",
    "PaymentDeclined",
    "PaymentProviderError",
    "ProviderPaymentGateway",
]
