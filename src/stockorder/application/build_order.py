"""Application service: Build Order use case.

Runs the interactive selection loop.  Each line of input is one of:

- a row number from the inventory table, followed by a quantity prompt
- ``finish`` / ``f`` to close the order
- ``quit`` / ``q`` to abandon it, returning reserved stock

Per-selection errors are reported and the loop continues; nothing is
partially applied when an error is shown.
"""

from __future__ import annotations

import logging

from stockorder.application.console import Console
from stockorder.application.show_inventory import ShowInventoryHandler, resolve_row
from stockorder.domain.exceptions import DomainException, InvalidInputError
from stockorder.domain.model.order import OrderLine
from stockorder.domain.model.store import Store
from stockorder.domain.service.reservation_session import ReservationSession

logger = logging.getLogger(__name__)

FINISH_COMMANDS = ("f", "finish")
QUIT_COMMANDS = ("q", "quit")

SELECT_PROMPT = "  > Select row # ('f' to finish, 'q' to quit): "
QUANTITY_PROMPT = "  > Qty: "


class BuildOrderHandler:

    def __init__(self, store: Store, console: Console) -> None:
        self._store = store
        self._console = console

    def handle(self) -> list[OrderLine] | None:
        """Return the finalized lines, or None if the operator quit."""
        session = ReservationSession(self._store)
        inventory = ShowInventoryHandler(self._store)

        while True:
            rows = inventory.handle()
            self._console.show_inventory(rows)

            cmd = self._console.read_line(SELECT_PROMPT)
            if cmd.lower() in FINISH_COMMANDS:
                try:
                    return session.finish()
                except DomainException as exc:
                    self._console.error(str(exc))
                    continue
            if cmd.lower() in QUIT_COMMANDS:
                session.cancel()
                return None

            try:
                item_id = resolve_row(cmd, rows, hint="Enter a row number, 'f', or 'q'.")
            except InvalidInputError as exc:
                self._console.error(str(exc))
                continue

            qty = self._console.read_int(QUANTITY_PROMPT)
            try:
                session.reserve(item_id, qty)
            except DomainException as exc:
                self._console.error(str(exc))
                continue
            logger.debug("Reserved %s of item %s", qty, item_id)
