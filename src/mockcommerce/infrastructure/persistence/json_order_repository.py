"""JSON-file-backed implementation of OrderRepository.

Product details are joined in from the product repository at read time;
only the product id is stored with the order.
"""

from __future__ import annotations

import threading
from datetime import datetime
from pathlib import Path
from uuid import UUID

from mockcommerce.domain.exceptions import EntityNotFoundError, ValidationError
from mockcommerce.domain.model.order import Order
from mockcommerce.domain.repository.order_repository import OrderRepository
from mockcommerce.domain.repository.product_repository import ProductRepository
from mockcommerce.infrastructure.persistence.json_file import (
    ensure_json_file,
    read_json,
    write_json_atomic,
)


class JsonOrderRepository(OrderRepository):

    def __init__(self, file_path: Path, product_repo: ProductRepository) -> None:
        self._file_path = file_path
        self._product_repo = product_repo
        self._lock = threading.RLock()
        self._ensure_file()

    # --- OrderRepository interface --------------------------------------------

    def create(self, order: Order) -> None:
        with self._lock:
            orders = self._load_raw()
            if any(raw["id"] == str(order.id) for raw in orders):
                raise ValidationError(
                    f"Order {order.id} already exists.", "DUPLICATE_ORDER_ID"
                )
            orders.append(self._to_raw(order))
            self._persist_raw(orders)

    def get_by_id(self, order_id: UUID) -> Order | None:
        for raw in self._load_raw():
            if raw["id"] == str(order_id):
                return self._to_domain(raw)
        return None

    def get_with_product_details(self, order_id: UUID) -> Order | None:
        order = self.get_by_id(order_id)
        if order is not None:
            order.product = self._product_repo.get_by_id(order.product_id)
        return order

    def list_with_product_details(self) -> list[Order]:
        return self._with_products(
            self._to_domain(raw) for raw in self._load_raw()
        )

    def get_by_customer_id(self, customer_id: UUID) -> list[Order]:
        return self._with_products(
            self._to_domain(raw)
            for raw in self._load_raw()
            if raw["customer_id"] == str(customer_id)
        )

    def get_by_seller_id(self, seller_id: UUID) -> list[Order]:
        orders = self.list_with_product_details()
        return [o for o in orders if o.seller_id == seller_id]

    def update(self, order: Order) -> None:
        with self._lock:
            orders = self._load_raw()
            for i, raw in enumerate(orders):
                if raw["id"] == str(order.id):
                    orders[i] = self._to_raw(order)
                    break
            else:
                raise EntityNotFoundError("Order not found.", "ORDER_NOT_FOUND")
            self._persist_raw(orders)

    def delete(self, order: Order) -> None:
        with self._lock:
            orders = [raw for raw in self._load_raw() if raw["id"] != str(order.id)]
            self._persist_raw(orders)

    # --- Joins ----------------------------------------------------------------

    def _with_products(self, orders) -> list[Order]:
        products = {p.id: p for p in self._product_repo.list_all()}
        result = []
        for order in orders:
            order.product = products.get(order.product_id)
            result.append(order)
        return result

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(order: Order) -> dict:
        return {
            "id": str(order.id),
            "product_id": str(order.product_id),
            "customer_id": str(order.customer_id),
            "status": order.status,
            "order_date": order.order_date.isoformat(),
        }

    @staticmethod
    def _to_domain(raw: dict) -> Order:
        return Order(
            id=UUID(raw["id"]),
            product_id=UUID(raw["product_id"]),
            customer_id=UUID(raw["customer_id"]),
            status=raw["status"],
            order_date=datetime.fromisoformat(raw["order_date"]),
        )

    # --- File helpers ---------------------------------------------------------

    def _load_raw(self) -> list[dict]:
        with self._lock:
            return read_json(self._file_path)

    def _persist_raw(self, orders: list[dict]) -> None:
        with self._lock:
            write_json_atomic(self._file_path, orders)

    def _ensure_file(self) -> None:
        with self._lock:
            ensure_json_file(self._file_path)
