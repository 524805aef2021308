"""Entity -> DTO mapping shared by the order use cases."""

from __future__ import annotations

from mockcommerce.application.dto import OrderDTO
from mockcommerce.domain.model.order import Order


def to_order_dto(order: Order) -> OrderDTO:
    return OrderDTO(
        id=order.id,
        product_id=order.product_id,
        product_name=order.product_name,
        customer_id=order.customer_id,
        status=order.status,
        order_date=order.order_date,
        seller_id=order.seller_id,
    )


def to_order_dtos(orders: list[Order]) -> list[OrderDTO]:
    return [to_order_dto(order) for order in orders]
