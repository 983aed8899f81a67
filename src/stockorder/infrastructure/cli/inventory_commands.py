"""CLI commands for inventory inspection."""

from __future__ import annotations

import click

from stockorder.application.show_inventory import ShowInventoryHandler
from stockorder.domain.model.store import Store
from stockorder.infrastructure.cli.console import ClickConsole


@click.command("inventory")
@click.pass_obj
def inventory_show(store: Store) -> None:
    """Show current inventory levels."""
    lines = ShowInventoryHandler(store).handle()

    if not lines:
        click.echo("No inventory records found.")
        return

    ClickConsole().show_inventory(lines)
