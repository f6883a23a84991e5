"""
Payment strategies (Strategy + Adapter patterns).

`Order.checkout()` only knows the `PaymentMethod` protocol and calls
`pay(amount)`. Cash and card settle locally. The external API has its own,
incompatible method (`do_transaction`), so `ExternalPaymentAdapter` wraps it
and forwards `pay()` to it; the order never depends on the external shape.

Every variant always succeeds in this simulator.
"""

import logging
from decimal import Decimal
from typing import Protocol

from pizzeria.config import DEFAULT_CURRENCY, format_amount

logger = logging.getLogger(__name__)


class PaymentMethod(Protocol):
    """Interface for settling an order total.

    Any class with a `pay(amount) -> str` method satisfies this protocol.
    The return value is the confirmation message that was emitted.
    """

    def pay(self, amount: Decimal) -> str: ...


class CashPayment:
    """Settles the total in cash at the counter."""

    def __init__(self, currency: str = DEFAULT_CURRENCY) -> None:
        self.currency = currency

    def pay(self, amount: Decimal) -> str:
        message = f"Paying {format_amount(amount, self.currency)} in cash."
        print(message)
        logger.info("Cash payment of %s", amount)
        return message


class CardPayment:
    """Settles the total with a card."""

    def __init__(self, currency: str = DEFAULT_CURRENCY) -> None:
        self.currency = currency

    def pay(self, amount: Decimal) -> str:
        message = f"Paying {format_amount(amount, self.currency)} by card."
        print(message)
        logger.info("Card payment of %s", amount)
        return message


class ExternalPaymentAPI:
    """Simulated third-party payment provider.

    Its interface does not match `PaymentMethod`; use `ExternalPaymentAdapter`.
    """

    def __init__(self, currency: str = DEFAULT_CURRENCY) -> None:
        self.currency = currency

    def do_transaction(self, amount: Decimal) -> str:
        message = f"Payment processed through external API: {format_amount(amount, self.currency)}"
        print(message)
        logger.info("External API transaction of %s", amount)
        return message


class ExternalPaymentAdapter:
    """Exposes an `ExternalPaymentAPI` as a `PaymentMethod`.

    The adapter references the API (it does not own its configuration) and
    translates the call shape only.
    """

    def __init__(self, api: ExternalPaymentAPI) -> None:
        self.api = api

    def pay(self, amount: Decimal) -> str:
        return self.api.do_transaction(amount)
