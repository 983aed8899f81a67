"""Abstract console used by the interactive use cases.

Defined here so the order-building protocol never depends on a
concrete terminal.  The click implementation lives in the
infrastructure layer; tests use a scripted fake.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from stockorder.application.dto import InventoryLineDTO, ReceiptDTO


class Console(ABC):

    @abstractmethod
    def read_line(self, prompt: str) -> str:
        """Return one line of operator input, stripped of whitespace."""

    @abstractmethod
    def read_int(self, prompt: str, minimum: int = 1, maximum: int | None = None) -> int:
        """Return an integer in ``[minimum, maximum]``, re-prompting until one is entered."""

    @abstractmethod
    def show_inventory(self, lines: list[InventoryLineDTO]) -> None:
        """Render the inventory table."""

    @abstractmethod
    def show_receipt(self, receipt: ReceiptDTO) -> None:
        """Render a receipt for a committed order."""

    @abstractmethod
    def echo(self, message: str) -> None:
        """Print an informational message."""

    @abstractmethod
    def error(self, message: str) -> None:
        """Print a one-line diagnostic."""
