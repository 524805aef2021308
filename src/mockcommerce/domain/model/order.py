"""Order entity: a single-product purchase by a customer.

The status is free text.  No transition rules are enforced: any non-blank
value replaces the current one.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from uuid import UUID

from mockcommerce.domain.exceptions import ValidationError
from mockcommerce.domain.model.identifiers import is_nil, new_id
from mockcommerce.domain.model.product import Product

DEFAULT_STATUS = "Pending"


@dataclass
class Order:
    """Persistent purchase record.

    Use the ``Order.create()`` factory for new orders.  The ``__init__``
    stays plain so repositories can reconstitute stored orders without
    re-validating.  ``product`` is only populated when the repository was
    asked to load product details.
    """

    id: UUID
    product_id: UUID
    customer_id: UUID
    status: str = DEFAULT_STATUS
    order_date: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    product: Product | None = field(default=None, compare=False, repr=False)

    # --- Factory (used for NEW orders only) -----------------------------------

    @staticmethod
    def create(product: Product, customer_id: UUID) -> Order:
        """Create a pending order for an existing product."""
        if is_nil(customer_id):
            raise ValidationError("Invalid customer ID.", "INVALID_CUSTOMER_ID")

        return Order(
            id=new_id(),
            product_id=product.id,
            customer_id=customer_id,
            status=DEFAULT_STATUS,
            order_date=datetime.now(timezone.utc),
            product=product,
        )

    # --- Mutations ------------------------------------------------------------

    def update_status(self, status: str | None) -> None:
        """Overwrite the status with the trimmed value of *status*."""
        if status is None or not status.strip():
            raise ValidationError("Order status is required.", "INVALID_ORDER_STATUS")
        self.status = status.strip()

    # --- Computed properties --------------------------------------------------

    @property
    def product_name(self) -> str | None:
        return self.product.name if self.product is not None else None

    @property
    def seller_id(self) -> UUID | None:
        return self.product.seller_id if self.product is not None else None
