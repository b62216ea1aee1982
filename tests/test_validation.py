# tests/test_validation.py
import pytest
from pydantic import ValidationError as PydanticValidationError

from product_api.core import (
    INVALID_PRICE, MISSING_FIELDS, make_product, merge_product,
    validate_create, validate_update
)
from product_api.models import Product

VALID = {"name": " Mouse ", "description": " Wireless mouse ", "price": 25, "category": " Electronics "}


def test_create_normalizes_fields():
    result = validate_create(VALID)
    assert result.ok
    assert result.fields == {
        "name": "Mouse",
        "description": "Wireless mouse",
        "price": 25,
        "category": "electronics",
        "inStock": True,
    }


def test_create_keeps_explicit_in_stock():
    result = validate_create({**VALID, "inStock": False})
    assert result.fields["inStock"] is False


def test_create_missing_fields():
    for key in ("name", "description", "price", "category"):
        payload = {k: v for k, v in VALID.items() if k != key}
        result = validate_create(payload)
        assert not result.ok
        assert result.error == MISSING_FIELDS

    assert validate_create({**VALID, "name": ""}).error == MISSING_FIELDS
    assert validate_create({**VALID, "name": "   "}).error == MISSING_FIELDS


def test_create_rejects_bad_price():
    for price in (-1, "10", None, True):
        assert validate_create({**VALID, "price": price}).error == INVALID_PRICE
    assert validate_create({**VALID, "price": 0}).ok
    assert validate_create({**VALID, "price": 9.99}).ok


def test_create_rejects_non_string_text():
    result = validate_create({**VALID, "name": 42})
    assert not result.ok
    assert "name" in result.error


def test_update_only_returns_supplied_fields():
    result = validate_update({"category": "  Office ", "inStock": False})
    assert result.ok
    assert result.fields == {"category": "office", "inStock": False}


def test_update_empty_text_keeps_stored_value():
    assert validate_update({"name": ""}).fields == {}


def test_update_rejects_bad_price():
    assert validate_update({"price": -5}).error == INVALID_PRICE
    assert validate_update({"price": "cheap"}).error == INVALID_PRICE
    assert validate_update({"price": None}).error == INVALID_PRICE


def test_make_product_generates_unique_ids():
    fields = validate_create(VALID).fields
    ids = {make_product(fields).id for _ in range(50)}
    assert len(ids) == 50


def test_merge_never_changes_id():
    existing = Product(id="1", name="Laptop", description="d", price=1, category="electronics")
    merged = merge_product(existing, {"id": "other", "price": 2})
    assert merged.id == "1"
    assert merged.price == 2
    assert merged.name == "Laptop"


def test_create_from_json_body():
    result = validate_create(b'{"name": "Lamp", "description": "Desk lamp", "price": 9.5, "category": "HOME"}')
    assert result.ok
    assert result.fields["category"] == "home"
    assert result.fields["price"] == 9.5


def test_json_body_errors():
    assert validate_create(b"{oops").error == "Request body must be valid JSON"
    assert validate_create(b"[1, 2]").error == "Request body must be a JSON object"
    assert validate_create(b"").error == MISSING_FIELDS
    assert validate_update(b"").fields == {}


def test_update_rejects_non_string_text():
    assert validate_update({"category": 5}).error == "Field 'category' must be a string"


def test_product_model_enforces_field_rules():
    for bad in (
        {"name": ""},
        {"description": "   "},
        {"price": -7},
        {"price": "12"},
        {"category": 3},
    ):
        fields = {"id": "z", "name": "Desk", "description": "Oak desk", "price": 10, "category": "office", **bad}
        with pytest.raises(PydanticValidationError):
            Product.model_validate(fields)


def test_product_model_normalizes_text():
    product = Product(id="z", name=" Desk ", description=" Oak desk ", price=10, category="  UPPER ")
    assert product.name == "Desk"
    assert product.description == "Oak desk"
    assert product.category == "upper"
