"""Application service: order listing queries.

Customer and seller scopes reject the nil id up front so a caller that
failed to resolve an identity never gets an unfiltered read.
"""

from __future__ import annotations

from uuid import UUID

from mockcommerce.application.dto import OrderDTO
from mockcommerce.application.mapping import to_order_dtos
from mockcommerce.domain.exceptions import ValidationError
from mockcommerce.domain.model.identifiers import is_nil
from mockcommerce.domain.repository.order_repository import OrderRepository


class ListOrdersHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def all(self) -> list[OrderDTO]:
        return to_order_dtos(self._order_repo.list_with_product_details())

    def by_customer(self, customer_id: UUID) -> list[OrderDTO]:
        if is_nil(customer_id):
            raise ValidationError("Invalid customer ID.", "INVALID_CUSTOMER_ID")
        return to_order_dtos(self._order_repo.get_by_customer_id(customer_id))

    def by_seller(self, seller_id: UUID) -> list[OrderDTO]:
        if is_nil(seller_id):
            raise ValidationError("Invalid seller ID.", "INVALID_SELLER_ID")
        return to_order_dtos(self._order_repo.get_by_seller_id(seller_id))
