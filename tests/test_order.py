"""Tests for the Order aggregate."""

from decimal import Decimal

from pizzeria.domain.builder import PizzaBuilder
from pizzeria.domain.models import hawaiian_pizza, pepperoni_pizza
from pizzeria.order import Order
from pizzeria.services.notify import AuditLogger, EmailNotifier
from pizzeria.services.payment import CashPayment


class RecordingObserver:
    def __init__(self, name, events):
        self.name = name
        self.events = events

    def update(self, total):
        self.events.append((self.name, total))


class RecordingPayment:
    def __init__(self, events):
        self.events = events

    def pay(self, amount):
        self.events.append(("pay", amount))
        return "paid"


class TestTotal:
    def test_empty_order(self):
        assert Order().total() == Decimal("0")

    def test_sum_of_menu_pizzas(self):
        order = Order()
        for pizza in (pepperoni_pizza(), hawaiian_pizza(), pepperoni_pizza()):
            order.add_item(pizza)
        assert order.total() == Decimal("130")
        assert len(order) == 3

    def test_duplicates_kept(self):
        order = Order()
        order.add_item(hawaiian_pizza())
        order.add_item(hawaiian_pizza())
        assert [item.name for item in order.items] == ["Hawaiian Pizza", "Hawaiian Pizza"]


class TestCheckout:
    def test_observers_in_order_before_payment(self):
        events = []
        order = Order()
        order.add_item(pepperoni_pizza())
        order.add_observer(RecordingObserver("first", events))
        order.add_observer(RecordingObserver("second", events))

        total = order.checkout(RecordingPayment(events))

        assert total == Decimal("40")
        assert events == [("first", Decimal("40")), ("second", Decimal("40")), ("pay", Decimal("40"))]

    def test_each_checkout_notifies_once(self):
        events = []
        order = Order()
        order.add_observer(RecordingObserver("only", events))
        order.checkout(RecordingPayment(events))
        order.checkout(RecordingPayment(events))
        assert events == [("only", 0), ("pay", 0), ("only", 0), ("pay", 0)]

    def test_scenario_108_with_cash(self, capsys):
        order = Order()
        order.add_observer(EmailNotifier())
        order.add_observer(AuditLogger())
        order.add_item(pepperoni_pizza())
        order.add_item(hawaiian_pizza())
        order.add_item(PizzaBuilder().add_cheese().add_pineapple().build())

        assert order.checkout(CashPayment()) == Decimal("108")
        assert capsys.readouterr().out.splitlines() == [
            "[Email] Sending order confirmation for Bs108...",
            "[Log] Order recorded for Bs108.",
            "Total to pay: Bs108",
            "Paying Bs108 in cash.",
        ]


class TestClear:
    def test_clear_keeps_observers(self):
        order = Order()
        observer = RecordingObserver("x", [])
        order.add_observer(observer)
        order.add_item(pepperoni_pizza())

        order.clear()

        assert order.items == ()
        assert order.total() == Decimal("0")
        assert order.observers == (observer,)


def test_listing():
    order = Order()
    order.add_item(pepperoni_pizza())
    order.add_item(PizzaBuilder().add_cheese().build())
    assert order.listing() == "Pizzas in the order:\n- Pepperoni Pizza (Bs40)\n- Custom Pizza (Bs10)"
    assert len(order) == 2


def test_list_order_prints_listing(capsys):
    order = Order()
    order.add_item(hawaiian_pizza())
    order.list_order()
    assert capsys.readouterr().out == "Pizzas in the order:\n- Hawaiian Pizza (Bs50)\n"
