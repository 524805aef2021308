"""Unit tests for the Product collaborator and domain exceptions."""

from uuid import uuid4

import pytest

from mockcommerce.domain.exceptions import (
    DomainException,
    EntityNotFoundError,
    ValidationError,
)
from mockcommerce.domain.model.identifiers import NIL_ID, is_nil
from mockcommerce.domain.model.product import Product


class TestProduct:

    def test_create_strips_name(self):
        seller = uuid4()
        product = Product.create("  Widget ", seller)
        assert product.name == "Widget"
        assert product.seller_id == seller

    def test_blank_name_rejected(self):
        with pytest.raises(ValidationError, match="name is required"):
            Product.create("  ", uuid4())

    def test_nil_seller_rejected(self):
        with pytest.raises(ValidationError) as exc_info:
            Product.create("Widget", NIL_ID)
        assert exc_info.value.code == "INVALID_SELLER_ID"


class TestIdentifiers:

    def test_nil(self):
        assert is_nil(NIL_ID)
        assert is_nil(None)
        assert not is_nil(uuid4())


class TestExceptions:

    def test_code_and_message(self):
        exc = EntityNotFoundError("Order not found.", "ORDER_NOT_FOUND")
        assert exc.code == "ORDER_NOT_FOUND"
        assert exc.message == "Order not found."
        assert str(exc) == "Order not found."
        assert isinstance(exc, DomainException)

    def test_default_codes(self):
        assert ValidationError("bad").code == "VALIDATION_ERROR"
        assert EntityNotFoundError("gone").code == "NOT_FOUND"
