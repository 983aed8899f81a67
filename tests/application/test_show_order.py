"""Tests for the order and inventory query use cases."""

import pytest

from stockorder.application.show_inventory import ShowInventoryHandler, resolve_row
from stockorder.application.show_order import ListOrdersHandler, ShowOrderHandler
from stockorder.domain.exceptions import (
    EntityNotFoundError,
    InvalidInputError,
    InvariantViolation,
)
from stockorder.domain.model.item import Item
from stockorder.domain.model.order import OrderLine
from stockorder.domain.model.store import Store
from stockorder.domain.model.value_objects import Money, Weight


def _store_with_order() -> Store:
    store = Store()
    store.stock_new("Housing", Money(83500), Weight(12613), 8)
    store.stock_new("Washer", Money(8), Weight(2), 203)
    store.push_order(store.commit_order([OrderLine(1, 1), OrderLine(2, 25)]))
    return store


class TestShowInventory:

    def test_rows_in_ascending_id_order(self):
        store = Store()
        for item_id, name in ((30, "c"), (10, "a"), (20, "b")):
            store.stock(Item(id=item_id, name=name, cost=Money(199), weight=Weight(5)), 1)
        lines = ShowInventoryHandler(store).handle()
        assert [(l.row, l.item_id, l.name) for l in lines] == [(0, 10, "a"), (1, 20, "b"), (2, 30, "c")]
        assert lines[0].unit_cost == "1.99"

    def test_resolve_row(self):
        store = _store_with_order()
        lines = ShowInventoryHandler(store).handle()
        assert resolve_row("1", lines) == 2
        with pytest.raises(InvalidInputError, match="out of range"):
            resolve_row("2", lines)
        with pytest.raises(InvalidInputError, match="Enter a row number"):
            resolve_row("two", lines)
        with pytest.raises(InvalidInputError, match="Enter a row number"):
            resolve_row("+1", lines)

    def test_listed_id_missing_from_inventory_is_fatal(self, monkeypatch):
        store = _store_with_order()
        monkeypatch.setattr(store, "inventory_get", lambda item_id: None)
        with pytest.raises(InvariantViolation, match="not in inventory"):
            ShowInventoryHandler(store).handle()


class TestShowOrder:

    def test_receipt(self):
        receipt = ShowOrderHandler(_store_with_order()).handle(1)
        assert [(l.quantity, l.name, l.line_total) for l in receipt.lines] == [
            (1, "Housing", "835.00"),
            (25, "Washer", "2.00"),
        ]
        assert receipt.total == "837.00"
        assert receipt.ship_weight == "28lb"

    def test_unknown_order(self):
        with pytest.raises(EntityNotFoundError, match="Order #9 not found"):
            ShowOrderHandler(_store_with_order()).handle(9)


class TestListOrders:

    def test_summaries(self):
        (summary,) = ListOrdersHandler(_store_with_order()).handle()
        assert summary.id == 1
        assert summary.line_count == 2
        assert summary.units == 26
        assert summary.total == "837.00"

    def test_empty_history(self):
        assert ListOrdersHandler(Store()).handle() == []
