"""Application service: Create Stock Item use case."""

from __future__ import annotations

from stockorder.domain.exceptions import ValidationError
from stockorder.domain.model.store import Store
from stockorder.domain.model.value_objects import STORAGE_MAX, Money, Weight


class CreateStockHandler:

    def __init__(self, store: Store) -> None:
        self._store = store

    def handle(self, name: str, cost_cents: int, weight_grams: int, quantity: int) -> int:
        """Add a new item to the inventory and return its id."""
        if not name or not name.strip():
            raise ValidationError("Item name is required")
        if quantity < 0:
            raise ValidationError("Quantity cannot be negative")
        if quantity > STORAGE_MAX:
            raise ValidationError(f"Quantity {quantity} exceeds maximum {STORAGE_MAX}")

        return self._store.stock_new(
            name=name.strip(),
            cost=Money(cost_cents),
            weight=Weight(weight_grams),
            quantity=quantity,
        )
