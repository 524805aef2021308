"""Application service: Create Order use case.

Orchestrates the product lookup and the order creation.  Nothing is
persisted unless the referenced product exists.
"""

from __future__ import annotations

import logging

from mockcommerce.application.dto import CreateOrderDTO, OrderDTO
from mockcommerce.application.mapping import to_order_dto
from mockcommerce.domain.exceptions import EntityNotFoundError
from mockcommerce.domain.model.order import Order
from mockcommerce.domain.repository.order_repository import OrderRepository
from mockcommerce.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class CreateOrderHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        product_repo: ProductRepository,
    ) -> None:
        self._order_repo = order_repo
        self._product_repo = product_repo

    def handle(self, dto: CreateOrderDTO) -> OrderDTO:
        """Create a new pending order.

        Steps:
        1. Resolve the product (fail with PRODUCT_NOT_FOUND if absent).
        2. Let ``Order.create`` assign a fresh id and UTC timestamp.
        3. Persist and return a DTO.
        """
        product = self._product_repo.get_by_id(dto.product_id)
        if product is None:
            raise EntityNotFoundError("Product not found.", "PRODUCT_NOT_FOUND")

        order = Order.create(product=product, customer_id=dto.customer_id)
        self._order_repo.create(order)

        logger.info(
            "Created order %s for customer %s (product %s)",
            order.id, order.customer_id, order.product_id,
        )
        return to_order_dto(order)
