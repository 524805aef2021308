"""Application service: Delete Order use case.

Hard delete: no audit trail is kept.
"""

from __future__ import annotations

import logging
from uuid import UUID

from mockcommerce.domain.exceptions import EntityNotFoundError
from mockcommerce.domain.repository.order_repository import OrderRepository

logger = logging.getLogger(__name__)


class DeleteOrderHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(self, order_id: UUID) -> None:
        order = self._order_repo.get_by_id(order_id)
        if order is None:
            raise EntityNotFoundError("Order not found.", "ORDER_NOT_FOUND")

        self._order_repo.delete(order)
        logger.info("Deleted order %s", order_id)
