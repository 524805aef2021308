"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from pathlib import Path

from mockcommerce.application.order_manager import OrderManager
from mockcommerce.infrastructure.config import Settings
from mockcommerce.infrastructure.persistence.json_order_repository import (
    JsonOrderRepository,
)
from mockcommerce.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)


def _data_dir(settings: Settings | None) -> Path:
    return (settings or Settings.from_env()).data_dir


def product_repository(settings: Settings | None = None) -> JsonProductRepository:
    return JsonProductRepository(_data_dir(settings) / "products.json")


def order_repository(settings: Settings | None = None) -> JsonOrderRepository:
    return JsonOrderRepository(
        _data_dir(settings) / "orders.json",
        product_repo=product_repository(settings),
    )


def order_manager(settings: Settings | None = None) -> OrderManager:
    products = product_repository(settings)
    orders = JsonOrderRepository(
        _data_dir(settings) / "orders.json", product_repo=products
    )
    return OrderManager(order_repo=orders, product_repo=products)
