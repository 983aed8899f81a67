"""Store aggregate — owns the inventory, the order history and both id counters.

Every mutation of stock levels or order history goes through the
methods on this class.  The id counters are per-store state, so two
stores never share an id sequence.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence

from stockorder.domain.exceptions import (
    InvariantViolation,
    TotalOverflowError,
    UnknownItemError,
)
from stockorder.domain.model.inventory import InventoryEntry
from stockorder.domain.model.item import Item
from stockorder.domain.model.order import Order, OrderLine
from stockorder.domain.model.value_objects import STORAGE_MAX, Money, Weight

logger = logging.getLogger(__name__)


class Store:

    def __init__(self) -> None:
        self._inventory: dict[int, InventoryEntry] = {}
        self._orders: list[Order] = []
        self._next_item_id = 1
        self._next_order_id = 1

    # --- Inventory ------------------------------------------------------------

    def stock(self, item: Item, quantity: int) -> None:
        """Insert or replace the inventory entry for ``item.id``.

        The caller is responsible for id uniqueness; use ``stock_new``
        for operator-created items.
        """
        self._inventory[item.id] = InventoryEntry(item=item, quantity=quantity)
        logger.debug("Stocked item %s (%s) with quantity %s", item.id, item.name, quantity)

    def stock_new(self, name: str, cost: Money, weight: Weight, quantity: int) -> int:
        """Create an item with the next sequential id and stock it."""
        item_id = self._next_item_id
        self.stock(Item(id=item_id, name=name, cost=cost, weight=weight), quantity)
        self._next_item_id += 1
        logger.info("Created item %s: %s", item_id, name)
        return item_id

    def inventory_len(self) -> int:
        return len(self._inventory)

    def inventory_ids_sorted(self) -> list[int]:
        return sorted(self._inventory)

    def inventory_get(self, item_id: int) -> tuple[Item, int] | None:
        entry = self._inventory.get(item_id)
        if entry is None:
            return None
        return entry.item, entry.quantity

    def adjust_stock(self, item_id: int, delta: int) -> int:
        """Apply a signed quantity change and return the new on-hand quantity.

        Raises UnknownItemError for a missing id and InsufficientStockError
        when the result would be negative.  Neither failure changes state.
        """
        entry = self._inventory.get(item_id)
        if entry is None:
            raise UnknownItemError(item_id)
        new_quantity = entry.adjust(delta)
        logger.debug("Adjusted item %s by %+d, now %s", item_id, delta, new_quantity)
        return new_quantity

    # --- Orders ---------------------------------------------------------------

    def commit_order(self, lines: Iterable[OrderLine]) -> Order:
        """Build an Order from already-reserved lines.

        Reads unit cost and weight from the inventory and sums them per
        line.  Stock is not touched and the order is not recorded; call
        ``push_order`` for that.
        """
        lines = tuple(lines)
        total_cents = 0
        total_grams = 0

        for line in lines:
            entry = self._inventory.get(line.item_id)
            if entry is None:
                raise InvariantViolation(
                    f"Order line refers to item {line.item_id} which is not in inventory"
                )
            total_cents += entry.item.cost.cents * line.quantity
            total_grams += entry.item.weight.grams * line.quantity

        if total_cents > STORAGE_MAX:
            raise TotalOverflowError(f"Order cost {total_cents} cents is too large")
        if total_grams > STORAGE_MAX:
            raise TotalOverflowError(f"Order weight {total_grams} g is too large")

        order = Order(
            id=self._next_order_id,
            cost=Money(total_cents),
            ship_weight=Weight(total_grams),
            lines=lines,
        )
        self._next_order_id += 1
        logger.info(
            "Committed order #%s: %s line(s), cost %s, weight %s g",
            order.id, len(lines), order.cost, order.ship_weight.grams,
        )
        return order

    def push_order(self, order: Order) -> None:
        self._orders.append(order)

    def orders(self) -> Sequence[Order]:
        return tuple(self._orders)

    def get_order(self, order_id: int) -> Order | None:
        for order in self._orders:
            if order.id == order_id:
                return order
        return None
