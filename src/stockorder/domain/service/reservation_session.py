"""Domain service: Reservation Session.

Tracks the quantities reserved against the store while an order is
being assembled.  Each reservation is applied to the inventory
immediately, so availability figures shown mid-session are accurate;
cancelling therefore has to give every reserved unit back.
"""

from __future__ import annotations

import logging
from enum import Enum

from stockorder.domain.exceptions import DomainException, ValidationError
from stockorder.domain.model.order import OrderLine, lines_from_reservations
from stockorder.domain.model.store import Store
from stockorder.domain.model.value_objects import Quantity

logger = logging.getLogger(__name__)


class SessionState(Enum):
    SELECTING = "SELECTING"
    FINALIZED = "FINALIZED"
    CANCELLED = "CANCELLED"


class ReservationSession:

    def __init__(self, store: Store) -> None:
        self._store = store
        self._reserved: dict[int, int] = {}
        self.state = SessionState.SELECTING

    @property
    def reserved(self) -> dict[int, int]:
        """Item id -> quantity reserved so far in this session."""
        return dict(self._reserved)

    def reserve(self, item_id: int, quantity: int) -> int:
        """Take ``quantity`` units of an item out of stock for this order.

        Raises UnknownItemError / InsufficientStockError from the store;
        in that case nothing is reserved.  Returns the new on-hand quantity.
        """
        self._ensure_open()
        qty = Quantity(quantity).value
        remaining = self._store.adjust_stock(item_id, -qty)
        self._reserved[item_id] = self._reserved.get(item_id, 0) + qty
        return remaining

    def finish(self) -> list[OrderLine]:
        """Close the session and return its lines ordered by item id."""
        self._ensure_open()
        if not self._reserved:
            raise ValidationError("Unable to complete order, no items have been added.")
        self.state = SessionState.FINALIZED
        return lines_from_reservations(self._reserved)

    def cancel(self) -> None:
        """Close the session, restoring every reservation to stock.

        A restore that fails (e.g. the item is gone) is logged and
        skipped so the rest of the rollback still happens.
        """
        self._ensure_open()
        for item_id, qty in self._reserved.items():
            try:
                self._store.adjust_stock(item_id, qty)
            except DomainException as exc:
                logger.warning("Could not restore %s of item %s: %s", qty, item_id, exc)
        logger.info("Cancelled reservation session (%s item(s) restored)", len(self._reserved))
        self._reserved.clear()
        self.state = SessionState.CANCELLED

    def _ensure_open(self) -> None:
        if self.state != SessionState.SELECTING:
            raise ValidationError(
                f"Reservation session is closed (state is {self.state.value})"
            )
