"""Terminal implementation of the Console port, built on click."""

from __future__ import annotations

import click

from stockorder.application.console import Console
from stockorder.application.dto import (
    InventoryLineDTO,
    OrderSummaryDTO,
    ReceiptDTO,
)

BORDER = "-" * 72


class ClickConsole(Console):
    """Reads from stdin and writes to stdout/stderr via click.

    End of input surfaces as ``click.Abort``, which click turns into a
    non-zero exit.
    """

    def read_line(self, prompt: str) -> str:
        value = click.prompt(prompt, default="", show_default=False, prompt_suffix="")
        return value.strip()

    def read_int(self, prompt: str, minimum: int = 1, maximum: int | None = None) -> int:
        return click.prompt(
            prompt, type=click.IntRange(min=minimum, max=maximum), prompt_suffix=""
        )

    def show_inventory(self, lines: list[InventoryLineDTO]) -> None:
        click.echo(BORDER)
        click.echo(f" {'ID#':6} | {'Description':40} |  {'Unit Cost':9} | {'Avail':5}")
        click.echo(BORDER)
        for line in lines:
            click.echo(
                f" {line.item_id:06} | {line.name:40} | ${line.unit_cost:>9} | {line.available:5}"
            )

    def show_receipt(self, receipt: ReceiptDTO) -> None:
        click.echo(f"Order #{receipt.order_id}")
        for line in receipt.lines:
            click.echo(f"  x{line.quantity}  {line.name}  ${line.line_total}")
        click.echo(f"total=${receipt.total} ship={receipt.ship_weight}")

    def show_history(self, orders: list[OrderSummaryDTO]) -> None:
        if not orders:
            click.echo("No orders placed yet.")
            return
        click.echo(f"  {'Order':<7} {'Lines':>5} {'Units':>7} {'Total':>12} {'Ship':>7}")
        click.echo(f"  {'-'*42}")
        for o in orders:
            click.echo(
                f"  #{o.id:<6} {o.line_count:>5} {o.units:>7} {'$' + o.total:>12} {o.ship_weight:>7}"
            )

    def echo(self, message: str) -> None:
        click.echo(message)

    def error(self, message: str) -> None:
        click.echo(message, err=True)
