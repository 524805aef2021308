"""
Order Schemas
=============

Pydantic models for order API requests and responses.  Field names are
camelCase on the wire; snake_case is accepted on input as well.
"""
from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from mockcommerce.application.dto import OrderDTO


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class CreateOrderRequest(_CamelModel):
    """Body of ``POST /api/v1/order``."""
    product_id: UUID = Field(..., description="Product being purchased")
    customer_id: UUID = Field(..., description="Customer placing the order")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "productId": "3f1c9a56-8a0e-4a4e-9f55-2f0d5b7f6c11",
                "customerId": "b7e6f1a2-9c3d-4e5f-8a7b-6c5d4e3f2a1b",
            }
        }
    )


class UpdateOrderStatusRequest(_CamelModel):
    """Body of ``PUT /api/v1/order/{id}/status``; ``id`` must match the path."""
    id: UUID
    status: str = Field(..., description="New free-text status, e.g. 'Shipped'")


class OrderResponse(_CamelModel):
    id: UUID
    product_id: UUID
    product_name: Optional[str] = None
    customer_id: UUID
    status: str
    order_date: datetime

    @classmethod
    def from_dto(cls, dto: OrderDTO) -> "OrderResponse":
        return cls(
            id=dto.id,
            product_id=dto.product_id,
            product_name=dto.product_name,
            customer_id=dto.customer_id,
            status=dto.status,
            order_date=dto.order_date,
        )

    def to_wire(self) -> dict:
        return self.model_dump(mode="json", by_alias=True)
