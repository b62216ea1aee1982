import uuid
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Type, Union

from pydantic import BaseModel, ValidationError as PydanticValidationError

from .models import TEXT_FIELDS, Product, ProductCreate, ProductUpdate

# Request validation and normalization for product payloads. Parsing and
# field checks live on the pydantic models; this module maps their errors
# onto the API's messages.

MISSING_FIELDS = "Missing required fields: name, description, price, and category are required"
INVALID_PRICE = "Price must be a positive number"
INVALID_JSON = "Request body must be valid JSON"
NOT_AN_OBJECT = "Request body must be a JSON object"

Payload = Union[bytes, str, Dict[str, Any]]


@dataclass
class ValidationResult:
    fields: Dict[str, Any] = field(default_factory=dict)
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def _parse(model: Type[BaseModel], payload: Payload) -> BaseModel:
    if isinstance(payload, (bytes, str)):
        # an empty body validates like an empty object
        return model.model_validate_json(payload or "{}")
    return model.model_validate(payload)


def _is_blank(err: Dict[str, Any]) -> bool:
    if err["loc"][0] == "price":
        return err["type"] == "missing"
    return err["type"] in ("missing", "value_error") or not err.get("input")


def _error_message(exc: PydanticValidationError, required: bool) -> str:
    errors = exc.errors()
    for err in errors:
        if not err["loc"]:
            return INVALID_JSON if err["type"] == "json_invalid" else NOT_AN_OBJECT
    if required and any(err["loc"][0] in TEXT_FIELDS + ("price",) and _is_blank(err) for err in errors):
        return MISSING_FIELDS
    if any(err["loc"][0] == "price" for err in errors):
        return INVALID_PRICE
    for err in errors:
        if err["loc"][0] in TEXT_FIELDS:
            return f"Field '{err['loc'][0]}' must be a string"
    return errors[0]["msg"]


def validate_create(payload: Payload) -> ValidationResult:
    try:
        product = _parse(ProductCreate, payload)
    except PydanticValidationError as exc:
        return ValidationResult(error=_error_message(exc, required=True))
    return ValidationResult(fields=product.model_dump(by_alias=True))


def validate_update(payload: Payload) -> ValidationResult:
    try:
        update = _parse(ProductUpdate, payload)
    except PydanticValidationError as exc:
        return ValidationResult(error=_error_message(exc, required=False))
    return ValidationResult(fields=update.changes())


def make_product(fields: Dict[str, Any]) -> Product:
    return Product.model_validate({**fields, "id": str(uuid.uuid4())})


def merge_product(existing: Product, changes: Dict[str, Any]) -> Product:
    merged = existing.to_dict()
    merged.update({k: v for k, v in changes.items() if k != "id"})
    return Product.model_validate(merged)
