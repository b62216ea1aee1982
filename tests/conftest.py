# tests/conftest.py
import pytest
from fastapi.testclient import TestClient

from product_api.database import ProductStore
from product_api.main import create_app



@pytest.fixture
def store():
    return ProductStore.seeded()


@pytest.fixture
def app(store):
    return create_app(store=store)


@pytest.fixture
def client(app):
    return TestClient(app)
