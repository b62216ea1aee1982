from typing import Any, Dict, List, Union

from fastapi import status
from fastapi.responses import JSONResponse

from .core import Payload, make_product, merge_product, validate_create, validate_update
from .database import ProductStore
from .errors import ValidationError, not_found_response

# This file contains the logic behind each product endpoint. Routes in
# main.py only resolve dependencies and delegate here.


def _envelope(message: str, product) -> Dict[str, Any]:
    return {"message": message, "product": product.to_dict()}


async def list_products_logic(store: ProductStore) -> List[Dict[str, Any]]:
    return [p.to_dict() for p in store.list()]


async def get_product_logic(store: ProductStore, product_id: str) -> Union[Dict[str, Any], JSONResponse]:
    p = store.get_by_id(product_id)
    if p is None:
        return not_found_response(product_id)
    return p.to_dict()


async def create_product_logic(store: ProductStore, payload: Payload) -> JSONResponse:
    result = validate_create(payload)
    if not result.ok:
        raise ValidationError(result.error)

    product = make_product(result.fields)
    async with store.lock:
        store.append(product)
    return JSONResponse(
        status_code=status.HTTP_201_CREATED,
        content=_envelope("Product created successfully", product),
    )


async def update_product_logic(store: ProductStore, product_id: str, payload: Payload):
    async with store.lock:
        index = store.find_index(product_id)
        if index == -1:
            return not_found_response(product_id)

        result = validate_update(payload)
        if not result.ok:
            raise ValidationError(result.error)

        updated = merge_product(store.list()[index], result.fields)
        store.replace_at(index, updated)
    return _envelope("Product updated successfully", updated)


async def delete_product_logic(store: ProductStore, product_id: str):
    async with store.lock:
        index = store.find_index(product_id)
        if index == -1:
            return not_found_response(product_id)
        deleted = store.remove_at(index)
    return _envelope("Product deleted successfully", deleted)
