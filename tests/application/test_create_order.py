"""Integration tests for the CreateOrder use case.

Uses in-memory fake repositories — no file I/O.
"""

from datetime import datetime, timezone
from uuid import uuid4

import pytest

from mockcommerce.application.create_order import CreateOrderHandler
from mockcommerce.application.dto import CreateOrderDTO
from mockcommerce.domain.exceptions import EntityNotFoundError, ValidationError
from mockcommerce.domain.model.identifiers import NIL_ID
from mockcommerce.domain.model.product import Product
from tests.fakes import FakeOrderRepository, FakeProductRepository

SELLER = uuid4()
WIDGET = Product(id=uuid4(), name="Widget", seller_id=SELLER)


def _setup() -> tuple[CreateOrderHandler, FakeOrderRepository]:
    product_repo = FakeProductRepository([WIDGET])
    order_repo = FakeOrderRepository(product_repo)
    return CreateOrderHandler(order_repo, product_repo), order_repo


class TestCreateOrderHappyPath:

    def test_returns_projected_dto(self):
        handler, _ = _setup()
        customer = uuid4()
        before = datetime.now(timezone.utc)

        dto = handler.handle(CreateOrderDTO(product_id=WIDGET.id, customer_id=customer))

        assert dto.product_id == WIDGET.id
        assert dto.product_name == "Widget"
        assert dto.customer_id == customer
        assert dto.seller_id == SELLER
        assert dto.status == "Pending"
        assert dto.order_date >= before

    def test_persists_order(self):
        handler, order_repo = _setup()
        dto = handler.handle(CreateOrderDTO(product_id=WIDGET.id, customer_id=uuid4()))

        saved = order_repo.get_by_id(dto.id)
        assert saved is not None
        assert saved.status == "Pending"

    def test_ids_are_unique(self):
        handler, _ = _setup()
        customer = uuid4()
        first = handler.handle(CreateOrderDTO(product_id=WIDGET.id, customer_id=customer))
        second = handler.handle(CreateOrderDTO(product_id=WIDGET.id, customer_id=customer))
        assert first.id != second.id
        assert NIL_ID not in (first.id, second.id)


class TestCreateOrderValidation:

    def test_unknown_product_rejected_without_persisting(self):
        handler, order_repo = _setup()

        with pytest.raises(EntityNotFoundError) as exc_info:
            handler.handle(CreateOrderDTO(product_id=uuid4(), customer_id=uuid4()))

        assert exc_info.value.code == "PRODUCT_NOT_FOUND"
        assert "create" not in order_repo.calls
        assert order_repo.list_with_product_details() == []

    def test_nil_product_is_not_found(self):
        handler, order_repo = _setup()
        with pytest.raises(EntityNotFoundError) as exc_info:
            handler.handle(CreateOrderDTO(product_id=NIL_ID, customer_id=uuid4()))
        assert exc_info.value.code == "PRODUCT_NOT_FOUND"
        assert order_repo.calls == []

    def test_nil_customer_rejected(self):
        handler, order_repo = _setup()
        with pytest.raises(ValidationError) as exc_info:
            handler.handle(CreateOrderDTO(product_id=WIDGET.id, customer_id=NIL_ID))
        assert exc_info.value.code == "INVALID_CUSTOMER_ID"
        assert "create" not in order_repo.calls
