import click

from stockorder.infrastructure.bootstrap import build_store
from stockorder.infrastructure.cli.inventory_commands import inventory_show
from stockorder.infrastructure.cli.order_commands import order_place
from stockorder.infrastructure.cli.session_commands import session
from stockorder.infrastructure.logging_config import LEVELS, configure_logging


@click.group()
@click.option(
    "--log-level",
    type=click.Choice(LEVELS, case_sensitive=False),
    default="WARNING",
    show_default=True,
    envvar="STOCKORDER_LOG_LEVEL",
    help="Logging level for diagnostics on stderr.",
)
@click.option("--empty", is_flag=True, default=False, help="Start without the default catalog.")
@click.pass_context
def cli(ctx: click.Context, log_level: str, empty: bool) -> None:
    """stockorder — inventory and order taking"""
    configure_logging(log_level)
    ctx.obj = build_store(seed=not empty)


# Register subcommands
cli.add_command(inventory_show)
cli.add_command(order_place)
cli.add_command(session)
