"""CLI commands for the Order entity."""

from __future__ import annotations

from uuid import UUID

import click

from mockcommerce.application.create_order import CreateOrderHandler
from mockcommerce.application.delete_order import DeleteOrderHandler
from mockcommerce.application.dto import CreateOrderDTO, OrderDTO, UpdateOrderDTO
from mockcommerce.application.list_orders import ListOrdersHandler
from mockcommerce.application.show_order import ShowOrderHandler
from mockcommerce.application.update_order_status import UpdateOrderStatusHandler
from mockcommerce.domain.exceptions import DomainException
from mockcommerce.infrastructure.bootstrap import order_repository, product_repository


def _display_order(dto: OrderDTO) -> None:
    """Shared formatting for displaying an order."""
    click.echo(f"Order {dto.id}  (status={dto.status})")
    click.echo(f"Product:  {dto.product_name or '<unknown>'} ({dto.product_id})")
    click.echo(f"Customer: {dto.customer_id}")
    click.echo(f"Ordered:  {dto.order_date.strftime('%Y-%m-%d %H:%M UTC')}")


@click.command("create")
@click.option("--product", "product_id", required=True, type=click.UUID, help="Product ID.")
@click.option("--customer", "customer_id", required=True, type=click.UUID, help="Customer ID.")
def order_create(product_id: UUID, customer_id: UUID) -> None:
    """Create a new order for a product."""
    handler = CreateOrderHandler(
        order_repo=order_repository(),
        product_repo=product_repository(),
    )

    try:
        dto = handler.handle(CreateOrderDTO(product_id=product_id, customer_id=customer_id))
    except DomainException as exc:
        raise click.ClickException(f"{exc} [{exc.code}]")

    click.echo(f"Order {dto.id} created  (status={dto.status})")


@click.command("show")
@click.option("--id", "order_id", required=True, type=click.UUID, help="Order ID to display.")
def order_show(order_id: UUID) -> None:
    """Show details of an existing order."""
    handler = ShowOrderHandler(order_repo=order_repository())

    try:
        dto = handler.handle(order_id)
    except DomainException as exc:
        raise click.ClickException(f"{exc} [{exc.code}]")

    _display_order(dto)


@click.command("list")
@click.option("--customer", "customer_id", type=click.UUID, default=None, help="Only this customer's orders.")
@click.option("--seller", "seller_id", type=click.UUID, default=None, help="Only orders for this seller's products.")
def order_list(customer_id: UUID | None, seller_id: UUID | None) -> None:
    """List orders, optionally scoped to a customer or seller."""
    if customer_id is not None and seller_id is not None:
        raise click.UsageError("Use either --customer or --seller, not both.")

    handler = ListOrdersHandler(order_repo=order_repository())

    try:
        if customer_id is not None:
            orders = handler.by_customer(customer_id)
        elif seller_id is not None:
            orders = handler.by_seller(seller_id)
        else:
            orders = handler.all()
    except DomainException as exc:
        raise click.ClickException(f"{exc} [{exc.code}]")

    if not orders:
        click.echo("No orders found.")
        return

    click.echo(f"{'ID':<36}  {'Product':<20} {'Status':<12} {'Ordered':<20}")
    click.echo("-" * 92)
    for o in orders:
        click.echo(
            f"{str(o.id):<36}  {(o.product_name or '<unknown>'):<20} "
            f"{o.status:<12} {o.order_date.strftime('%Y-%m-%d %H:%M'):<20}"
        )


@click.command("delete")
@click.option("--id", "order_id", required=True, type=click.UUID, help="Order ID to delete.")
def order_delete(order_id: UUID) -> None:
    """Permanently delete an order."""
    handler = DeleteOrderHandler(order_repo=order_repository())

    try:
        handler.handle(order_id)
    except DomainException as exc:
        raise click.ClickException(f"{exc} [{exc.code}]")

    click.echo(f"Order {order_id} deleted.")


@click.command("status")
@click.option("--id", "order_id", required=True, type=click.UUID, help="Order ID to update.")
@click.option("--set", "new_status", required=True, help="New status, e.g. 'Shipped'.")
def order_status(order_id: UUID, new_status: str) -> None:
    """Overwrite an order's status."""
    handler = UpdateOrderStatusHandler(order_repo=order_repository())

    try:
        dto = handler.handle(UpdateOrderDTO(id=order_id, status=new_status))
    except DomainException as exc:
        raise click.ClickException(f"{exc} [{exc.code}]")

    click.echo(f"Order {dto.id} status set to '{dto.status}'.")
