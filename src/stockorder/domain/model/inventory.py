"""InventoryEntry — pairs an Item with its on-hand quantity.

The store owns one entry per item id and routes every quantity change
through ``adjust()``.
"""

from __future__ import annotations

from dataclasses import dataclass

from stockorder.domain.exceptions import InsufficientStockError, ValidationError
from stockorder.domain.model.item import Item
from stockorder.domain.model.value_objects import STORAGE_MAX


@dataclass
class InventoryEntry:
    """Inventory record for a single item.

    Invariant: ``quantity`` is never negative.
    """

    item: Item
    quantity: int

    def adjust(self, delta: int) -> int:
        """Apply a signed change to the on-hand quantity.

        Positive ``delta`` restocks, negative reserves.  Raises
        InsufficientStockError (leaving the quantity unchanged) if the
        result would be negative.
        """
        new_quantity = self.quantity + delta
        if new_quantity < 0:
            raise InsufficientStockError(
                item_id=self.item.id,
                available=self.quantity,
                requested=-delta,
            )
        if new_quantity > STORAGE_MAX:
            raise ValidationError(
                f"Stock for {self.item.name} would exceed maximum {STORAGE_MAX}"
            )
        self.quantity = new_quantity
        return new_quantity
