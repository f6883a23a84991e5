"""
Custom pizza builder (Builder pattern).

The builder is a mutable accumulator: every add-on bumps the running price by
the ingredient's fixed amount. `build()` snapshots the current state into a
frozen `PizzaItem`, so the builder can keep going or be thrown away.
"""

from decimal import Decimal

from pizzeria.domain.models import CUSTOM_PIZZA_NAME, Ingredient, PizzaItem, PizzaKind


class PizzaBuilder:
    """Assembles a custom pizza one ingredient at a time.

    Adding the same ingredient twice counts it twice; there is no limit on
    the number of add-ons.
    """

    def __init__(self) -> None:
        self.name = CUSTOM_PIZZA_NAME
        self._price = Decimal("0")
        self._ingredients: list[Ingredient] = []

    @property
    def price(self) -> Decimal:
        return self._price

    @property
    def ingredients(self) -> tuple[Ingredient, ...]:
        return tuple(self._ingredients)

    def add(self, ingredient: Ingredient) -> "PizzaBuilder":
        self._price += ingredient.price
        self._ingredients.append(ingredient)
        return self

    def add_cheese(self) -> "PizzaBuilder":
        return self.add(Ingredient.CHEESE)

    def add_pepperoni(self) -> "PizzaBuilder":
        return self.add(Ingredient.PEPPERONI)

    def add_pineapple(self) -> "PizzaBuilder":
        return self.add(Ingredient.PINEAPPLE)

    def build(self) -> PizzaItem:
        return PizzaItem(
            kind=PizzaKind.CUSTOM,
            name=self.name,
            price=self._price,
            ingredients=self.ingredients,
        )
