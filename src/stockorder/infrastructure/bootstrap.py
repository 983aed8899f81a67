"""Composition root — builds the Store the CLI works against.

This is the only place in the codebase that knows about the default
catalog.  Nothing is persisted: every process starts from here.
"""

from __future__ import annotations

from stockorder.domain.model.store import Store
from stockorder.domain.model.value_objects import Money, Weight

# (name, unit cost in cents, unit weight in grams, quantity on hand)
DEFAULT_CATALOG: list[tuple[str, int, int, int]] = [
    ('36" cyl packing kit', 2299, 81, 12),
    ('36" cylinder housing', 83500, 12613, 8),
    ('Flat washer (5/16", stainless)', 8, 2, 203),
    ('Bearing - conical, 0.875"ID', 3895, 925, 2),
]


def build_store(seed: bool = True) -> Store:
    store = Store()
    if seed:
        for name, cents, grams, qty in DEFAULT_CATALOG:
            store.stock_new(name, Money(cents), Weight(grams), qty)
    return store
