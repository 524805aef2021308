"""Application service: Add Product use case."""

from __future__ import annotations

from uuid import UUID

from mockcommerce.domain.model.product import Product
from mockcommerce.domain.repository.product_repository import ProductRepository


class AddProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, name: str, seller_id: UUID) -> Product:
        """Register a product so orders can reference it."""
        product = Product.create(name=name, seller_id=seller_id)
        self._product_repo.save(product)
        return product
