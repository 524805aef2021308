from uuid import UUID, uuid4

import pytest
from fastapi.testclient import TestClient

from mockcommerce.domain.model.product import Product
from mockcommerce.infrastructure import bootstrap
from mockcommerce.infrastructure.api.app import create_app
from mockcommerce.infrastructure.config import Settings
from tests.tokens import AUDIENCE, ISSUER, SECRET


@pytest.fixture()
def settings(tmp_path) -> Settings:
    return Settings(
        data_dir=tmp_path / "data",
        jwt_secret_key=SECRET,
        jwt_issuer=ISSUER,
        jwt_audience=AUDIENCE,
        log_level="WARNING",
    )


@pytest.fixture()
def seller_id() -> UUID:
    return uuid4()


@pytest.fixture()
def product(settings, seller_id) -> Product:
    widget = Product(id=uuid4(), name="Widget", seller_id=seller_id)
    bootstrap.product_repository(settings).save(widget)
    return widget


@pytest.fixture()
def app(settings, product):
    return create_app(settings)


@pytest.fixture()
def client(app):
    return TestClient(app)
