"""CLI commands for the Product collaborator."""

from __future__ import annotations

from uuid import UUID

import click

from mockcommerce.application.add_product import AddProductHandler
from mockcommerce.domain.exceptions import DomainException
from mockcommerce.infrastructure.bootstrap import product_repository


@click.command("add")
@click.option("--name", required=True, help="Product name.")
@click.option("--seller", "seller_id", required=True, type=click.UUID, help="Seller ID.")
def product_add(name: str, seller_id: UUID) -> None:
    """Register a product so it can be ordered."""
    handler = AddProductHandler(product_repo=product_repository())

    try:
        product = handler.handle(name=name, seller_id=seller_id)
    except DomainException as exc:
        raise click.ClickException(f"{exc} [{exc.code}]")

    click.echo(f"Product {product.id} '{product.name}' added")


@click.command("list")
def product_list() -> None:
    """List all products."""
    repo = product_repository()
    products = repo.list_all()

    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<36}  {'Name':<20} {'Seller':<36}")
    click.echo("-" * 94)
    for p in products:
        click.echo(f"{str(p.id):<36}  {p.name:<20} {str(p.seller_id):<36}")
