"""
Order aggregate — the shopping cart.

The order owns its pizzas and references its observers. It has no status
field: it is a plain mutable cart that can be checked out any number of
times.

Checkout runs in a fixed order:
    1. Compute the total from the current items (never cached)
    2. Notify every observer, in registration order, with that total
    3. Hand the same total to the payment strategy
"""

import logging
from decimal import Decimal

from pizzeria.config import DEFAULT_CURRENCY, format_amount
from pizzeria.domain.models import PizzaItem
from pizzeria.services.notify import OrderObserver
from pizzeria.services.payment import PaymentMethod

logger = logging.getLogger(__name__)


class Order:
    """Holds the pizzas and observers for one shopping session."""

    def __init__(self, currency: str = DEFAULT_CURRENCY) -> None:
        self.currency = currency
        self._items: list[PizzaItem] = []
        self._observers: list[OrderObserver] = []

    def __len__(self) -> int:
        return len(self._items)

    @property
    def items(self) -> tuple[PizzaItem, ...]:
        return tuple(self._items)

    @property
    def observers(self) -> tuple[OrderObserver, ...]:
        return tuple(self._observers)

    def add_item(self, item: PizzaItem) -> None:
        self._items.append(item)
        logger.info("Added %s (%s) to order", item.name, item.price)

    def add_observer(self, observer: OrderObserver) -> None:
        self._observers.append(observer)

    def notify_observers(self, total: Decimal) -> None:
        for observer in self._observers:
            observer.update(total)

    def total(self) -> Decimal:
        return sum((item.price for item in self._items), Decimal("0"))

    def listing(self) -> str:
        """Human-readable enumeration of the current items."""
        lines = ["Pizzas in the order:"]
        for item in self._items:
            lines.append(f"- {item.name} ({format_amount(item.price, self.currency)})")
        return "\n".join(lines)

    def list_order(self) -> None:
        print(self.listing())

    def checkout(self, payment: PaymentMethod) -> Decimal:
        """Notify observers of the total, then pay it. Returns the total."""
        total = self.total()
        logger.info("Checking out %d item(s) for %s", len(self._items), total)
        self.notify_observers(total)
        print(f"Total to pay: {format_amount(total, self.currency)}")
        payment.pay(total)
        return total

    def clear(self) -> None:
        """Drop all items. Registered observers are kept."""
        self._items.clear()
        logger.info("Order cleared")
