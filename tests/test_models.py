"""Tests for pizza items and the fixed menu."""

from decimal import Decimal

import pytest
from pydantic import ValidationError

from pizzeria.domain.models import (
    Ingredient,
    PizzaItem,
    PizzaKind,
    hawaiian_pizza,
    menu_pizza,
    pepperoni_pizza,
)


class TestMenuPizzas:
    def test_pepperoni_price(self):
        pizza = pepperoni_pizza()
        assert pizza.kind is PizzaKind.PEPPERONI
        assert pizza.name == "Pepperoni Pizza"
        assert pizza.price == Decimal("40")

    def test_hawaiian_price(self):
        pizza = hawaiian_pizza()
        assert pizza.kind is PizzaKind.HAWAIIAN
        assert pizza.price == Decimal("50")

    def test_custom_is_not_a_menu_pizza(self):
        with pytest.raises(ValueError):
            menu_pizza(PizzaKind.CUSTOM)


class TestPizzaItem:
    def test_is_immutable(self):
        pizza = pepperoni_pizza()
        with pytest.raises(ValidationError):
            pizza.price = Decimal("1")

    def test_rejects_negative_price(self):
        with pytest.raises(ValidationError):
            PizzaItem(kind=PizzaKind.CUSTOM, name="Custom Pizza", price=Decimal("-1"))

    def test_zero_price_allowed(self):
        pizza = PizzaItem(kind=PizzaKind.CUSTOM, name="Custom Pizza", price=Decimal("0"))
        assert pizza.price == 0


def test_ingredient_prices():
    assert Ingredient.CHEESE.price == Decimal("10")
    assert Ingredient.PEPPERONI.price == Decimal("12")
    assert Ingredient.PINEAPPLE.price == Decimal("8")
