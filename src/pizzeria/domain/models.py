"""
Domain models for the pizzeria ordering simulator.

`PizzaItem` is a frozen Pydantic v2 model: once a pizza lands in an order its
name and price can no longer change. Negative prices are rejected at
construction time by the `ge=0` constraint.

The set of pizza variants is closed, so it is modelled as a tag (`PizzaKind`)
on a single item type rather than as a class hierarchy. Enums inherit from
(str, Enum) so they print and serialize as plain strings.
"""

from decimal import Decimal
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class PizzaKind(str, Enum):
    """Which variant an item is: one of the two menu pizzas or a custom build."""

    PEPPERONI = "PEPPERONI"
    HAWAIIAN = "HAWAIIAN"
    CUSTOM = "CUSTOM"


class Ingredient(str, Enum):
    """Add-ons available to the custom pizza builder."""

    CHEESE = "CHEESE"        # +10
    PEPPERONI = "PEPPERONI"  # +12
    PINEAPPLE = "PINEAPPLE"  # +8

    @property
    def price(self) -> Decimal:
        return INGREDIENT_PRICES[self]


INGREDIENT_PRICES: dict[Ingredient, Decimal] = {
    Ingredient.CHEESE: Decimal("10"),
    Ingredient.PEPPERONI: Decimal("12"),
    Ingredient.PINEAPPLE: Decimal("8"),
}

# ── Fixed menu ───────────────────────────────────────────────────────

MENU_NAMES: dict[PizzaKind, str] = {
    PizzaKind.PEPPERONI: "Pepperoni Pizza",
    PizzaKind.HAWAIIAN: "Hawaiian Pizza",
}

MENU_PRICES: dict[PizzaKind, Decimal] = {
    PizzaKind.PEPPERONI: Decimal("40"),
    PizzaKind.HAWAIIAN: Decimal("50"),
}

CUSTOM_PIZZA_NAME = "Custom Pizza"


class PizzaItem(BaseModel):
    """A priced pizza held by an order."""

    model_config = ConfigDict(frozen=True)

    kind: PizzaKind
    name: str = Field(..., min_length=1)
    price: Decimal = Field(..., ge=0)
    ingredients: tuple[Ingredient, ...] = ()  # Only populated for CUSTOM


def menu_pizza(kind: PizzaKind) -> PizzaItem:
    """Build one of the fixed menu pizzas.

    Raises ValueError for PizzaKind.CUSTOM, which only the builder produces.
    """
    if kind not in MENU_PRICES:
        raise ValueError(f"{kind.value} is not a menu pizza")
    return PizzaItem(kind=kind, name=MENU_NAMES[kind], price=MENU_PRICES[kind])


def pepperoni_pizza() -> PizzaItem:
    return menu_pizza(PizzaKind.PEPPERONI)


def hawaiian_pizza() -> PizzaItem:
    return menu_pizza(PizzaKind.HAWAIIAN)
