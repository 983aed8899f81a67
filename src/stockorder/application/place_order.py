"""Application service: Place Order use case.

Builds an order interactively, commits it, prints the receipt and only
then records it in the store's history.
"""

from __future__ import annotations

from stockorder.application.build_order import BuildOrderHandler
from stockorder.application.console import Console
from stockorder.application.show_order import receipt_for
from stockorder.domain.model.order import Order
from stockorder.domain.model.store import Store


class PlaceOrderHandler:

    def __init__(self, store: Store, console: Console) -> None:
        self._store = store
        self._console = console

    def handle(self) -> Order | None:
        lines = BuildOrderHandler(self._store, self._console).handle()
        if lines is None:
            self._console.echo("Order cancelled, stock restored.")
            return None

        order = self._store.commit_order(lines)
        self._console.show_receipt(receipt_for(self._store, order))
        self._store.push_order(order)
        return order
