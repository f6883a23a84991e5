"""
Interactive console client — takes one pizza order and checks it out.

Flow:
    1. Top-level menu: add menu pizzas or build a custom one, until "finish"
    2. Print the itemized order and the pizza count
    3. Payment menu: pick a strategy (anything unknown falls back to cash)
    4. Checkout (observers first, then payment), clear the order, exit

Invalid menu input never aborts the session: the message is printed and the
same menu is shown again. End of input counts as the menu's exit choice.

Usage:
    pizzeria
    python -m pizzeria.cli --currency '$' --log-level INFO
"""

import argparse
import logging
from collections.abc import Callable, Collection
from decimal import Decimal

from pydantic import ValidationError

from pizzeria.config import LOG_FORMAT, Settings, format_amount
from pizzeria.domain.builder import PizzaBuilder
from pizzeria.domain.models import (
    INGREDIENT_PRICES,
    MENU_NAMES,
    MENU_PRICES,
    Ingredient,
    PizzaItem,
    PizzaKind,
    menu_pizza,
)
from pizzeria.order import Order
from pizzeria.services.factory import INVALID_PAYMENT_MESSAGE, PaymentFactory
from pizzeria.services.notify import AuditLogger, EmailNotifier
from pizzeria.services.payment import PaymentMethod

logger = logging.getLogger(__name__)

Reader = Callable[[str], str]
Writer = Callable[[str], None]

INVALID_OPTION_MESSAGE = "Invalid option."

# Top-level menu
ADD_PEPPERONI = 1
ADD_HAWAIIAN = 2
BUILD_CUSTOM = 3
FINISH = 4

# Custom pizza sub-menu
DONE = 0
INGREDIENT_OPTIONS: dict[int, Ingredient] = {
    1: Ingredient.CHEESE,
    2: Ingredient.PEPPERONI,
    3: Ingredient.PINEAPPLE,
}
INGREDIENT_LABELS: dict[Ingredient, str] = {
    Ingredient.CHEESE: "Cheese",
    Ingredient.PEPPERONI: "Pepperoni",
    Ingredient.PINEAPPLE: "Pineapple",
}


class InvalidSelectionError(ValueError):
    """Raised when menu input is not one of the offered numbers."""


def parse_choice(raw: str, valid: Collection[int]) -> int:
    try:
        choice = int(raw.strip())
    except ValueError:
        raise InvalidSelectionError(f"not a number: {raw!r}") from None
    if choice not in valid:
        raise InvalidSelectionError(f"option {choice} is not on the menu")
    return choice


class OrderSession:
    """Drives the menus for a single order.

    The order is passed in by the caller; the session never creates or
    replaces it. `read` and `write` default to the console.
    """

    def __init__(
        self,
        order: Order,
        settings: Settings | None = None,
        read: Reader | None = None,
        write: Writer = print,
    ) -> None:
        self.order = order
        self.settings = settings or Settings()
        self.read = read or input
        self.write = write
        self.payments = PaymentFactory(self.settings.currency)

    def _money(self, amount: Decimal) -> str:
        # Top-level menu prices are printed with a space: "Bs 40"
        return f"{self.settings.currency} {amount}"

    def _ask(self, prompt: str, valid: Collection[int], on_eof: int) -> int:
        """Read one menu choice. Raises InvalidSelectionError on bad input."""
        try:
            raw = self.read(prompt)
        except EOFError:
            return on_eof
        return parse_choice(raw, valid)

    # ── Menus ────────────────────────────────────────────────────

    def show_main_menu(self) -> None:
        self.write("\n=== Pizza Menu ===")
        self.write(f"{ADD_PEPPERONI}. {MENU_NAMES[PizzaKind.PEPPERONI]} ({self._money(MENU_PRICES[PizzaKind.PEPPERONI])})")
        self.write(f"{ADD_HAWAIIAN}. {MENU_NAMES[PizzaKind.HAWAIIAN]} ({self._money(MENU_PRICES[PizzaKind.HAWAIIAN])})")
        self.write(f"{BUILD_CUSTOM}. Custom Pizza")
        self.write(f"{FINISH}. Finish order")

    def take_order(self) -> None:
        """Loop over the top-level menu until the customer finishes."""
        valid = (ADD_PEPPERONI, ADD_HAWAIIAN, BUILD_CUSTOM, FINISH)
        while True:
            self.show_main_menu()
            try:
                option = self._ask("Select an option: ", valid, on_eof=FINISH)
            except InvalidSelectionError as exc:
                logger.debug("Rejected top-level selection: %s", exc)
                self.write(INVALID_OPTION_MESSAGE)
                continue

            if option == ADD_PEPPERONI:
                self.order.add_item(menu_pizza(PizzaKind.PEPPERONI))
            elif option == ADD_HAWAIIAN:
                self.order.add_item(menu_pizza(PizzaKind.HAWAIIAN))
            elif option == BUILD_CUSTOM:
                self.order.add_item(self.build_custom_pizza())
            else:
                self.write("Finishing order...")
                return

    def build_custom_pizza(self) -> PizzaItem:
        """Run the ingredient sub-menu and return the finished pizza."""
        builder = PizzaBuilder()
        self.write("Choose the ingredients for your custom pizza:")
        for number, ingredient in INGREDIENT_OPTIONS.items():
            self.write(f"{number}. {INGREDIENT_LABELS[ingredient]} (+{format_amount(INGREDIENT_PRICES[ingredient], self.settings.currency)})")
        self.write(f"{DONE}. Done")

        valid = (DONE, *INGREDIENT_OPTIONS)
        while True:
            try:
                option = self._ask("Ingredient: ", valid, on_eof=DONE)
            except InvalidSelectionError as exc:
                logger.debug("Rejected ingredient selection: %s", exc)
                self.write(INVALID_OPTION_MESSAGE)
                continue
            if option == DONE:
                return builder.build()
            builder.add(INGREDIENT_OPTIONS[option])

    def choose_payment(self) -> PaymentMethod:
        self.write("\nSelect a payment method:")
        self.write("1. Cash")
        self.write("2. Card")
        self.write("3. External API (Adapter)")
        try:
            raw = self.read("Payment: ")
        except EOFError:
            raw = None
        payment, valid = self.payments.from_selection(raw)
        if not valid:
            self.write(INVALID_PAYMENT_MESSAGE)
        return payment

    def run(self) -> Decimal:
        """Take the order, check it out once and return the amount paid."""
        self.take_order()
        self.write(self.order.listing())
        self.write(f"Number of pizzas: {len(self.order)}")
        payment = self.choose_payment()
        return self.order.checkout(payment)


def run_session(settings: Settings, read: Reader | None = None, write: Writer = print) -> Decimal:
    """Set up an order with the standard observers and run one session."""
    order = Order(settings.currency)
    order.add_observer(EmailNotifier(settings.currency))
    order.add_observer(AuditLogger(settings.currency))

    total = OrderSession(order, settings, read=read, write=write).run()
    order.clear()
    return total


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Order pizzas from the console")
    parser.add_argument("--currency", default=Settings().currency, help="Currency label printed before amounts")
    parser.add_argument(
        "--log-level",
        default=Settings().log_level,
        type=str.upper,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Logging level",
    )
    args = parser.parse_args(argv)
    try:
        settings = Settings(currency=args.currency, log_level=args.log_level)
    except ValidationError as exc:
        parser.error(f"invalid settings: {exc.errors()[0]['msg']}")

    logging.basicConfig(level=settings.log_level, format=LOG_FORMAT)
    logger.info("Starting pizzeria session (currency=%s)", settings.currency)
    run_session(settings)


if __name__ == "__main__":
    main()
