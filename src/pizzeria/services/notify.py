"""
Order observers (Observer pattern).

Observers are registered on an `Order` and called with the order total on
every checkout, before payment. Real deployments would send email or write
to an audit store; here both variants print a line.
"""

import logging
from decimal import Decimal
from typing import Protocol

from pizzeria.config import DEFAULT_CURRENCY, format_amount

logger = logging.getLogger(__name__)
audit_logger = logging.getLogger("pizzeria.audit")


class OrderObserver(Protocol):
    """Listener informed of the order total at checkout."""

    def update(self, total: Decimal) -> None: ...


class EmailNotifier:
    """Simulates emailing an order confirmation."""

    def __init__(self, currency: str = DEFAULT_CURRENCY) -> None:
        self.currency = currency

    def update(self, total: Decimal) -> None:
        print(f"[Email] Sending order confirmation for {format_amount(total, self.currency)}...")
        logger.info("Confirmation email queued for total %s", total)


class AuditLogger:
    """Records every checkout total in the audit log."""

    def __init__(self, currency: str = DEFAULT_CURRENCY) -> None:
        self.currency = currency

    def update(self, total: Decimal) -> None:
        print(f"[Log] Order recorded for {format_amount(total, self.currency)}.")
        audit_logger.info("Order recorded: total=%s", total)
