"""Item — a stocked article in the catalog.

Items are immutable once created; the store assigns their ids.
"""

from __future__ import annotations

from dataclasses import dataclass

from stockorder.domain.model.value_objects import Money, Weight


@dataclass(frozen=True)
class Item:
    id: int
    name: str
    cost: Money  # per unit
    weight: Weight  # per unit
