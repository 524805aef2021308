"""Application service: Update Order Status use case.

Any non-blank status is accepted; the value is stored trimmed.
"""

from __future__ import annotations

import logging

from mockcommerce.application.dto import OrderDTO, UpdateOrderDTO
from mockcommerce.application.mapping import to_order_dto
from mockcommerce.domain.exceptions import EntityNotFoundError, ValidationError
from mockcommerce.domain.model.identifiers import is_nil
from mockcommerce.domain.repository.order_repository import OrderRepository

logger = logging.getLogger(__name__)


class UpdateOrderStatusHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(self, dto: UpdateOrderDTO | None) -> OrderDTO:
        if dto is None:
            raise ValidationError("Update order data is required.", "INVALID_UPDATE_DATA")
        if is_nil(dto.id):
            raise ValidationError("Invalid order ID.", "INVALID_ORDER_ID")
        if dto.status is None or not dto.status.strip():
            raise ValidationError("Order status is required.", "INVALID_ORDER_STATUS")

        order = self._order_repo.get_with_product_details(dto.id)
        if order is None:
            raise EntityNotFoundError("Order not found.", "ORDER_NOT_FOUND")

        previous = order.status
        order.update_status(dto.status)
        self._order_repo.update(order)

        logger.info("Order %s status %r -> %r", order.id, previous, order.status)
        return to_order_dto(order)
