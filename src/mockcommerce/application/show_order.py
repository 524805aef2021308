"""Application service: Show Order use case (query)."""

from __future__ import annotations

from uuid import UUID

from mockcommerce.application.dto import OrderDTO
from mockcommerce.application.mapping import to_order_dto
from mockcommerce.domain.exceptions import EntityNotFoundError
from mockcommerce.domain.repository.order_repository import OrderRepository


class ShowOrderHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(self, order_id: UUID) -> OrderDTO:
        order = self._order_repo.get_with_product_details(order_id)
        if order is None:
            raise EntityNotFoundError("Order not found.", "ORDER_NOT_FOUND")
        return to_order_dto(order)
