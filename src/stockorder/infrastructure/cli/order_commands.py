"""CLI commands for taking orders."""

from __future__ import annotations

import click

from stockorder.application.place_order import PlaceOrderHandler
from stockorder.domain.exceptions import DomainException
from stockorder.domain.model.store import Store
from stockorder.infrastructure.cli.console import ClickConsole


@click.command("order")
@click.pass_obj
def order_place(store: Store) -> None:
    """Build one order interactively and print its receipt."""
    if store.inventory_len() == 0:
        raise click.ClickException("Inventory is empty, nothing to order.")

    handler = PlaceOrderHandler(store, ClickConsole())

    try:
        handler.handle()
    except DomainException as exc:
        raise click.ClickException(str(exc))
