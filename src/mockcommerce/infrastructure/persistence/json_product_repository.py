"""JSON-file-backed implementation of ProductRepository."""

from __future__ import annotations

import threading
from pathlib import Path
from uuid import UUID

from mockcommerce.domain.model.product import Product
from mockcommerce.domain.repository.product_repository import ProductRepository
from mockcommerce.infrastructure.persistence.json_file import (
    ensure_json_file,
    read_json,
    write_json_atomic,
)


class JsonProductRepository(ProductRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._lock = threading.RLock()
        self._ensure_file()

    # --- ProductRepository interface ------------------------------------------

    def get_by_id(self, product_id: UUID) -> Product | None:
        return self._load().get(product_id)

    def list_all(self) -> list[Product]:
        return list(self._load().values())

    def save(self, product: Product) -> None:
        with self._lock:
            products = self._load()
            products[product.id] = product
            self._persist(products)

    # --- Serialization helpers ------------------------------------------------

    def _load(self) -> dict[UUID, Product]:
        with self._lock:
            raw = read_json(self._file_path)
        products = (
            Product(
                id=UUID(item["id"]),
                name=item["name"],
                seller_id=UUID(item["seller_id"]),
            )
            for item in raw
        )
        return {p.id: p for p in products}

    def _persist(self, products: dict[UUID, Product]) -> None:
        raw = [
            {
                "id": str(p.id),
                "name": p.name,
                "seller_id": str(p.seller_id),
            }
            for p in products.values()
        ]
        with self._lock:
            write_json_atomic(self._file_path, raw)

    def _ensure_file(self) -> None:
        with self._lock:
            ensure_json_file(self._file_path)
