"""
Factory for payment strategies.

The CLI maps a menu number to a `PaymentChoice` and asks the factory for a
strategy. A fresh strategy is built for each checkout; nothing is cached.
"""

import logging
from enum import IntEnum

from pizzeria.config import DEFAULT_CURRENCY
from pizzeria.services.payment import (
    CardPayment,
    CashPayment,
    ExternalPaymentAdapter,
    ExternalPaymentAPI,
    PaymentMethod,
)

logger = logging.getLogger(__name__)

INVALID_PAYMENT_MESSAGE = "Invalid payment method. Using cash by default."


class PaymentChoice(IntEnum):
    """Numbers shown in the payment menu."""

    CASH = 1
    CARD = 2
    EXTERNAL = 3


class PaymentFactory:
    """Builds the payment strategy for a checkout."""

    def __init__(self, currency: str = DEFAULT_CURRENCY) -> None:
        self.currency = currency

    def create(self, choice: PaymentChoice) -> PaymentMethod:
        if choice is PaymentChoice.CARD:
            return CardPayment(self.currency)
        if choice is PaymentChoice.EXTERNAL:
            return ExternalPaymentAdapter(ExternalPaymentAPI(self.currency))
        return CashPayment(self.currency)

    def from_selection(self, raw: str | None) -> tuple[PaymentMethod, bool]:
        """Parse raw menu input into a strategy.

        Returns the strategy and whether the input was valid. Anything that is
        not a known choice falls back to cash.
        """
        try:
            choice = PaymentChoice(int((raw or "").strip()))
        except ValueError:
            logger.warning("Unrecognised payment selection %r, defaulting to cash", raw)
            return CashPayment(self.currency), False
        return self.create(choice), True
