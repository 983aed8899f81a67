"""Application service: Restock use case."""

from __future__ import annotations

from stockorder.domain.model.store import Store
from stockorder.domain.model.value_objects import Quantity


class RestockHandler:

    def __init__(self, store: Store) -> None:
        self._store = store

    def handle(self, item_id: int, quantity: int) -> int:
        """Add ``quantity`` units to an existing item; returns the new level."""
        return self._store.adjust_stock(item_id, Quantity(quantity).value)
