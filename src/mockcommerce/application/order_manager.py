"""Business-layer facade for the order workflow.

The API layer depends on this single object; each method delegates to the
matching use-case handler.  Repositories are passed in explicitly so the
composition root decides which storage backs the manager.
"""

from __future__ import annotations

from uuid import UUID

from mockcommerce.application.create_order import CreateOrderHandler
from mockcommerce.application.delete_order import DeleteOrderHandler
from mockcommerce.application.dto import CreateOrderDTO, OrderDTO, UpdateOrderDTO
from mockcommerce.application.list_orders import ListOrdersHandler
from mockcommerce.application.show_order import ShowOrderHandler
from mockcommerce.application.update_order_status import UpdateOrderStatusHandler
from mockcommerce.domain.repository.order_repository import OrderRepository
from mockcommerce.domain.repository.product_repository import ProductRepository


class OrderManager:

    def __init__(
        self,
        order_repo: OrderRepository,
        product_repo: ProductRepository,
    ) -> None:
        self._create = CreateOrderHandler(order_repo, product_repo)
        self._show = ShowOrderHandler(order_repo)
        self._list = ListOrdersHandler(order_repo)
        self._delete = DeleteOrderHandler(order_repo)
        self._update_status = UpdateOrderStatusHandler(order_repo)

    def create_order(self, dto: CreateOrderDTO) -> OrderDTO:
        return self._create.handle(dto)

    def get_order_by_id(self, order_id: UUID) -> OrderDTO:
        return self._show.handle(order_id)

    def get_all_orders(self) -> list[OrderDTO]:
        return self._list.all()

    def delete_order(self, order_id: UUID) -> None:
        self._delete.handle(order_id)

    def get_orders_by_customer_id(self, customer_id: UUID) -> list[OrderDTO]:
        return self._list.by_customer(customer_id)

    def get_orders_by_seller_id(self, seller_id: UUID) -> list[OrderDTO]:
        return self._list.by_seller(seller_id)

    def update_order_status(self, dto: UpdateOrderDTO | None) -> OrderDTO:
        return self._update_status.handle(dto)
