"""Order — the immutable record of a committed order.

Orders are only produced by ``Store.commit_order()``, which computes
their totals from the inventory at commit time.
"""

from __future__ import annotations

from dataclasses import dataclass

from stockorder.domain.exceptions import ValidationError
from stockorder.domain.model.value_objects import Money, Weight


@dataclass(frozen=True)
class OrderLine:
    """One distinct item's total reserved quantity within an order."""

    item_id: int
    quantity: int

    def __post_init__(self) -> None:
        if self.quantity <= 0:
            raise ValidationError("Order line quantity must be positive")


@dataclass(frozen=True)
class Order:
    id: int
    cost: Money
    ship_weight: Weight
    lines: tuple[OrderLine, ...]

    @property
    def total_units(self) -> int:
        return sum(line.quantity for line in self.lines)


def lines_from_reservations(reserved: dict[int, int]) -> list[OrderLine]:
    """Collapse a reservation map into OrderLines ordered by item id."""
    return [
        OrderLine(item_id=item_id, quantity=qty)
        for item_id, qty in sorted(reserved.items())
    ]
