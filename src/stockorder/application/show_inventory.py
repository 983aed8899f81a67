"""Application service: Show Inventory use case (query)."""

from __future__ import annotations

from stockorder.application.dto import InventoryLineDTO
from stockorder.domain.exceptions import InvalidInputError, InvariantViolation
from stockorder.domain.model.store import Store


class ShowInventoryHandler:

    def __init__(self, store: Store) -> None:
        self._store = store

    def handle(self) -> list[InventoryLineDTO]:
        lines: list[InventoryLineDTO] = []
        for row, item_id in enumerate(self._store.inventory_ids_sorted()):
            found = self._store.inventory_get(item_id)
            if found is None:
                raise InvariantViolation(f"Item {item_id} listed but not in inventory")
            item, qty = found
            lines.append(
                InventoryLineDTO(
                    row=row,
                    item_id=item_id,
                    name=item.name,
                    unit_cost=str(item.cost),
                    available=qty,
                )
            )
        return lines


def resolve_row(cmd: str, lines: list[InventoryLineDTO], hint: str = "Enter a row number.") -> int:
    """Map a typed row number onto the item id shown in that row."""
    if not (cmd.isascii() and cmd.isdigit()):
        raise InvalidInputError(hint)
    row = int(cmd)
    if row >= len(lines):
        raise InvalidInputError("Row out of range.")
    return lines[row].item_id
