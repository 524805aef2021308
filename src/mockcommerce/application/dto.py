"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the API/CLI and application layers without
exposing persisted entities to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID


@dataclass(frozen=True)
class CreateOrderDTO:
    """Input: a purchase request for a single product."""

    product_id: UUID
    customer_id: UUID


@dataclass(frozen=True)
class UpdateOrderDTO:
    """Input: the new status for an existing order."""

    id: UUID
    status: str | None


@dataclass(frozen=True)
class OrderDTO:
    """Output: flattened read projection of an order.

    ``product_name`` and ``seller_id`` are None when the referenced product
    has since disappeared from the catalog.
    """

    id: UUID
    product_id: UUID
    product_name: str | None
    customer_id: UUID
    status: str
    order_date: datetime
    seller_id: UUID | None = None
