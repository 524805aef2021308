import click
import uvicorn

from mockcommerce.infrastructure.cli.order_commands import (
    order_create,
    order_delete,
    order_list,
    order_show,
    order_status,
)
from mockcommerce.infrastructure.cli.product_commands import product_add, product_list
from mockcommerce.infrastructure.config import Settings
from mockcommerce.infrastructure.logging_config import setup_logging


@click.group()
@click.option("-v", "--verbose", is_flag=True, default=False, help="Log business events.")
def cli(verbose: bool) -> None:
    """Mock Commerce order service"""
    setup_logging("INFO" if verbose else "WARNING")


@cli.group()
def order() -> None:
    """Manage orders."""


@cli.group()
def product() -> None:
    """Manage products."""


@cli.command("serve")
@click.option("--host", default=None, help="Bind address (default: API_HOST).")
@click.option("--port", default=None, type=int, help="Bind port (default: API_PORT).")
def serve(host: str | None, port: int | None) -> None:
    """Run the HTTP API."""
    from mockcommerce.infrastructure.api.app import create_app

    settings = Settings.from_env()
    uvicorn.run(
        create_app(settings),
        host=host or settings.api_host,
        port=port or settings.api_port,
    )


# Register subcommands
order.add_command(order_create)
order.add_command(order_delete)
order.add_command(order_list)
order.add_command(order_show)
order.add_command(order_status)
product.add_command(product_add)
product.add_command(product_list)
