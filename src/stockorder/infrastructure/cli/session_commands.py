"""Interactive operator session: the main menu and its small flows."""

from __future__ import annotations

import click

from stockorder.application.create_stock import CreateStockHandler
from stockorder.application.place_order import PlaceOrderHandler
from stockorder.application.restock import RestockHandler
from stockorder.application.show_inventory import ShowInventoryHandler, resolve_row
from stockorder.application.show_order import ListOrdersHandler, ShowOrderHandler
from stockorder.domain.exceptions import DomainException
from stockorder.domain.model.store import Store
from stockorder.domain.model.value_objects import STORAGE_MAX
from stockorder.infrastructure.cli.console import ClickConsole

MENU = "[o]rder  [n]ew item  [r]estock  [i]nventory  [h]istory  [s]how order  e[x]it"


def _create_item(store: Store, console: ClickConsole) -> None:
    console.echo("Creating new stock item...")
    name = console.read_line("  Item name: ")
    cents = console.read_int("  Item price (cents): ", minimum=0, maximum=STORAGE_MAX)
    grams = console.read_int("  Item weight (g): ", minimum=0, maximum=STORAGE_MAX)
    qty = console.read_int("  Quantity: ", minimum=0, maximum=STORAGE_MAX)

    item_id = CreateStockHandler(store).handle(name, cents, grams, qty)
    console.echo(f"Item #{item_id:06} '{name.strip()}' added.")


def _restock(store: Store, console: ClickConsole) -> None:
    lines = ShowInventoryHandler(store).handle()
    console.show_inventory(lines)
    item_id = resolve_row(console.read_line("  > Restock row #: "), lines)
    qty = console.read_int("  > Qty to add: ")

    new_qty = RestockHandler(store).handle(item_id, qty)
    console.echo(f"Item #{item_id:06} now has {new_qty} available.")


@click.command("session")
@click.pass_obj
def session(store: Store) -> None:
    """Run the interactive menu until 'x' is entered."""
    console = ClickConsole()

    while True:
        console.echo(MENU)
        choice = console.read_line("> ").lower()

        try:
            if choice in ("x", "exit"):
                return
            elif choice == "o":
                if store.inventory_len() == 0:
                    console.error("Inventory is empty, nothing to order.")
                    continue
                PlaceOrderHandler(store, console).handle()
            elif choice == "n":
                _create_item(store, console)
            elif choice == "r":
                _restock(store, console)
            elif choice == "i":
                console.show_inventory(ShowInventoryHandler(store).handle())
            elif choice == "h":
                console.show_history(ListOrdersHandler(store).handle())
            elif choice == "s":
                order_id = console.read_int("  Order #: ")
                console.show_receipt(ShowOrderHandler(store).handle(order_id))
            else:
                console.error(f"Unknown choice '{choice}'.")
        except DomainException as exc:
            console.error(str(exc))
