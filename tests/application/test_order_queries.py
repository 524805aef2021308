"""Integration tests for the ShowOrder and ListOrders use cases."""

from uuid import uuid4

import pytest

from mockcommerce.application.list_orders import ListOrdersHandler
from mockcommerce.application.show_order import ShowOrderHandler
from mockcommerce.domain.exceptions import EntityNotFoundError, ValidationError
from mockcommerce.domain.model.identifiers import NIL_ID
from mockcommerce.domain.model.order import Order
from mockcommerce.domain.model.product import Product
from tests.fakes import FakeOrderRepository, FakeProductRepository

SELLER_A = uuid4()
SELLER_B = uuid4()
WIDGET = Product(id=uuid4(), name="Widget", seller_id=SELLER_A)
GADGET = Product(id=uuid4(), name="Gadget", seller_id=SELLER_B)
ALICE = uuid4()
BOB = uuid4()


def _setup():
    product_repo = FakeProductRepository([WIDGET, GADGET])
    order_repo = FakeOrderRepository(product_repo)
    orders = [
        Order.create(WIDGET, ALICE),
        Order.create(GADGET, ALICE),
        Order.create(WIDGET, BOB),
    ]
    for o in orders:
        order_repo.create(o)
    order_repo.calls.clear()
    return order_repo, product_repo, orders


class TestShowOrder:

    def test_returns_order_with_product_name(self):
        order_repo, _, orders = _setup()
        dto = ShowOrderHandler(order_repo).handle(orders[1].id)
        assert dto.id == orders[1].id
        assert dto.product_name == "Gadget"
        assert dto.customer_id == ALICE

    def test_missing_order(self):
        order_repo, _, _ = _setup()
        with pytest.raises(EntityNotFoundError) as exc_info:
            ShowOrderHandler(order_repo).handle(uuid4())
        assert exc_info.value.code == "ORDER_NOT_FOUND"

    def test_product_gone_from_catalog(self):
        order_repo, product_repo, orders = _setup()
        product_repo.remove(GADGET.id)
        dto = ShowOrderHandler(order_repo).handle(orders[1].id)
        assert dto.product_id == GADGET.id
        assert dto.product_name is None
        assert dto.seller_id is None


class TestListOrders:

    def test_all(self):
        order_repo, _, orders = _setup()
        dtos = ListOrdersHandler(order_repo).all()
        assert {d.id for d in dtos} == {o.id for o in orders}
        assert all(d.product_name in ("Widget", "Gadget") for d in dtos)

    def test_all_empty(self):
        assert ListOrdersHandler(FakeOrderRepository()).all() == []

    def test_by_customer(self):
        order_repo, _, _ = _setup()
        dtos = ListOrdersHandler(order_repo).by_customer(ALICE)
        assert len(dtos) == 2
        assert all(d.customer_id == ALICE for d in dtos)

    def test_by_unknown_customer_is_empty(self):
        order_repo, _, _ = _setup()
        assert ListOrdersHandler(order_repo).by_customer(uuid4()) == []

    def test_by_seller(self):
        order_repo, _, _ = _setup()
        dtos = ListOrdersHandler(order_repo).by_seller(SELLER_A)
        assert len(dtos) == 2
        assert {d.product_name for d in dtos} == {"Widget"}

    def test_nil_customer_rejected_before_storage(self):
        order_repo, _, _ = _setup()
        with pytest.raises(ValidationError) as exc_info:
            ListOrdersHandler(order_repo).by_customer(NIL_ID)
        assert exc_info.value.code == "INVALID_CUSTOMER_ID"
        assert order_repo.calls == []

    def test_nil_seller_rejected_before_storage(self):
        order_repo, _, _ = _setup()
        with pytest.raises(ValidationError) as exc_info:
            ListOrdersHandler(order_repo).by_seller(NIL_ID)
        assert exc_info.value.code == "INVALID_SELLER_ID"
        assert order_repo.calls == []
