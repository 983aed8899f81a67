"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class InventoryLineDTO:
    """Output: one row of the inventory table."""

    row: int  # position in ascending-id order, typed by the operator
    item_id: int
    name: str
    unit_cost: str  # formatted, e.g. "22.99"
    available: int


@dataclass(frozen=True)
class ReceiptLineDTO:
    quantity: int
    name: str
    line_total: str


@dataclass(frozen=True)
class ReceiptDTO:
    """Output: a committed order as printed on a receipt."""

    order_id: int
    lines: list[ReceiptLineDTO]
    total: str
    ship_weight: str


@dataclass(frozen=True)
class OrderSummaryDTO:
    """Output: one row of the order history."""

    id: int
    line_count: int
    units: int
    total: str
    ship_weight: str
