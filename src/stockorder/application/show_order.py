"""Application service: Show Order use cases (queries)."""

from __future__ import annotations

from stockorder.application.dto import OrderSummaryDTO, ReceiptDTO, ReceiptLineDTO
from stockorder.domain.exceptions import EntityNotFoundError, InvariantViolation
from stockorder.domain.model.order import Order
from stockorder.domain.model.store import Store


def receipt_for(store: Store, order: Order) -> ReceiptDTO:
    lines: list[ReceiptLineDTO] = []
    for line in order.lines:
        found = store.inventory_get(line.item_id)
        if found is None:
            raise InvariantViolation(f"Item {line.item_id} is missing from inventory")
        item, _avail = found
        lines.append(
            ReceiptLineDTO(
                quantity=line.quantity,
                name=item.name,
                line_total=str(item.cost * line.quantity),
            )
        )
    return ReceiptDTO(
        order_id=order.id,
        lines=lines,
        total=str(order.cost),
        ship_weight=str(order.ship_weight),
    )


class ShowOrderHandler:

    def __init__(self, store: Store) -> None:
        self._store = store

    def handle(self, order_id: int) -> ReceiptDTO:
        order = self._store.get_order(order_id)
        if order is None:
            raise EntityNotFoundError(f"Order #{order_id} not found")
        return receipt_for(self._store, order)


class ListOrdersHandler:

    def __init__(self, store: Store) -> None:
        self._store = store

    def handle(self) -> list[OrderSummaryDTO]:
        return [
            OrderSummaryDTO(
                id=order.id,
                line_count=len(order.lines),
                units=order.total_units,
                total=str(order.cost),
                ship_weight=str(order.ship_weight),
            )
            for order in self._store.orders()
        ]
