# tests/test_client.py
import asyncio

import httpx
import pytest
from fastapi.testclient import TestClient

from sdk.product_client import ProductAPIClientError, ProductClient, build_parser, run_command


@pytest.fixture
def sdk(app):
    return ProductClient(base_url="http://testserver", token="x", session=TestClient(app))


def test_welcome_and_list(sdk):
    assert sdk.welcome().startswith("Welcome to the Product API!")
    assert len(sdk.list_products()) == 3


def test_crud_roundtrip(sdk):
    created = sdk.create_product("Mouse", "Wireless mouse", 25, "Electronics")["product"]
    assert created["category"] == "electronics"

    updated = sdk.update_product(created["id"], in_stock=False)["product"]
    assert updated["inStock"] is False
    assert updated["name"] == "Mouse"

    deleted = sdk.delete_product(created["id"])
    assert deleted["message"] == "Product deleted successfully"

    with pytest.raises(ProductAPIClientError) as exc:
        sdk.get_product(created["id"])
    assert exc.value.status_code == 404
    assert exc.value.body["error"] == "Product not found"


def test_missing_token_surfaces_401(app):
    anon = ProductClient(base_url="http://testserver", session=TestClient(app))
    with pytest.raises(ProductAPIClientError) as exc:
        anon.delete_product("1")
    assert exc.value.status_code == 401
    assert anon.get_product("1")["name"] == "Laptop"


def test_async_helpers(app):
    sdk = ProductClient(base_url="http://testserver", token="x", transport=httpx.ASGITransport(app=app))

    async def run():
        created = await sdk.create_product_async("Lamp", "Desk lamp", 30, "Home")
        listed = await sdk.list_products_async()
        fetched = await sdk.get_product_async(created["product"]["id"])
        return created, listed, fetched

    created, listed, fetched = asyncio.run(run())
    assert created["product"]["category"] == "home"
    assert len(listed) == 4
    assert fetched == created["product"]


def test_async_create_with_in_stock(app):
    sdk = ProductClient(base_url="http://testserver", token="x", transport=httpx.ASGITransport(app=app))
    created = asyncio.run(sdk.create_product_async("Kettle", "Electric kettle", 40, "Kitchen", in_stock=False))
    assert created["product"]["inStock"] is False


def test_command_line_update(sdk):
    args = build_parser().parse_args(["update-product", "--product-id", "3", "--price", "45", "--in-stock", "yes"])
    product = run_command(sdk, args)["product"]
    assert product["price"] == 45
    assert product["inStock"] is True
    assert product["name"] == "Coffee Maker"


def test_command_line_create_and_delete(sdk):
    args = build_parser().parse_args([
        "create-product", "--name", "Mug", "--description", "Ceramic mug",
        "--price", "8", "--category", "Kitchen", "--in-stock", "no",
    ])
    product = run_command(sdk, args)["product"]
    assert product["inStock"] is False

    deleted = run_command(sdk, build_parser().parse_args(["delete-product", "--product-id", product["id"]]))
    assert deleted["product"]["id"] == product["id"]
