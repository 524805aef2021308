"""Abstract repository for the Order entity.

Defined in the domain layer so the business layer never depends on
infrastructure.  Queries suffixed ``with_product_details`` (and the
customer/seller lookups) return orders whose ``product`` reference is
populated.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from uuid import UUID

from mockcommerce.domain.model.order import Order


class OrderRepository(ABC):

    @abstractmethod
    def create(self, order: Order) -> None:
        """Persist a new order.

        Raises ValidationError (DUPLICATE_ORDER_ID) if the id is taken.
        """

    @abstractmethod
    def get_by_id(self, order_id: UUID) -> Order | None:
        """Return an order by its ID, or None if not found."""

    @abstractmethod
    def get_with_product_details(self, order_id: UUID) -> Order | None:
        """Like ``get_by_id`` but with the product reference loaded."""

    @abstractmethod
    def list_with_product_details(self) -> list[Order]:
        """Return every order with its product reference loaded."""

    @abstractmethod
    def get_by_customer_id(self, customer_id: UUID) -> list[Order]:
        """Return the orders placed by a customer."""

    @abstractmethod
    def get_by_seller_id(self, seller_id: UUID) -> list[Order]:
        """Return the orders for products sold by a seller."""

    @abstractmethod
    def update(self, order: Order) -> None:
        """Persist changes to an existing order.

        Raises EntityNotFoundError (ORDER_NOT_FOUND) if the order was
        removed in the meantime.
        """

    @abstractmethod
    def delete(self, order: Order) -> None:
        """Remove an order permanently."""
