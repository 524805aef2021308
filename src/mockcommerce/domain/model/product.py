"""Product entity.

Products are owned by the catalog, not by this service.  Orders only
reference them by id; the name and seller are read when projecting an
order and when filtering orders by seller.
"""

from __future__ import annotations

from dataclasses import dataclass
from uuid import UUID

from mockcommerce.domain.exceptions import ValidationError
from mockcommerce.domain.model.identifiers import is_nil, new_id


@dataclass
class Product:

    id: UUID
    name: str
    seller_id: UUID

    @staticmethod
    def create(name: str, seller_id: UUID) -> Product:
        if not name or not name.strip():
            raise ValidationError("Product name is required", "INVALID_PRODUCT_NAME")
        if is_nil(seller_id):
            raise ValidationError("Invalid seller ID.", "INVALID_SELLER_ID")
        return Product(id=new_id(), name=name.strip(), seller_id=seller_id)
