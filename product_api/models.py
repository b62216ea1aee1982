# product_api/models.py
from pydantic import BaseModel, ConfigDict, Field, StrictFloat, StrictInt, StrictStr, ValidationInfo, field_validator
from typing import Annotated, Any, Dict, Optional, Union

# Price: a non-negative int or finite float. Strict types keep booleans and
# numeric strings out; ints stay ints.
Price = Union[
    Annotated[StrictInt, Field(ge=0)],
    Annotated[StrictFloat, Field(ge=0, allow_inf_nan=False)],
]

TEXT_FIELDS = ("name", "description", "category")


def _clean_text(v: str, info: ValidationInfo) -> str:
    v = v.strip()
    if not v:
        raise ValueError(f"{info.field_name} cannot be empty or whitespace only")
    return v.lower() if info.field_name == "category" else v


def _as_bool(v: Any) -> bool:
    return bool(v)


class ProductBase(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    name: StrictStr
    description: StrictStr
    price: Price
    category: StrictStr
    in_stock: bool = Field(True, alias="inStock")

    @field_validator(*TEXT_FIELDS)
    @classmethod
    def validate_text(cls, v, info: ValidationInfo):
        return _clean_text(v, info)

    @field_validator("in_stock", mode="before")
    @classmethod
    def coerce_in_stock(cls, v):
        return _as_bool(v)


class ProductCreate(ProductBase):
    pass


class ProductUpdate(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    name: Optional[StrictStr] = None
    description: Optional[StrictStr] = None
    price: Optional[Price] = None
    category: Optional[StrictStr] = None
    in_stock: Optional[bool] = Field(None, alias="inStock")

    @field_validator(*TEXT_FIELDS, mode="before")
    @classmethod
    def blank_keeps_stored(cls, v):
        # empty, null or whitespace-only leaves the stored value alone
        if not v or (isinstance(v, str) and not v.strip()):
            return None
        return v

    @field_validator(*TEXT_FIELDS)
    @classmethod
    def validate_text(cls, v, info: ValidationInfo):
        return None if v is None else _clean_text(v, info)

    @field_validator("price", mode="before")
    @classmethod
    def price_not_null(cls, v):
        if v is None:
            raise ValueError("price cannot be null")
        return v

    @field_validator("in_stock", mode="before")
    @classmethod
    def coerce_in_stock(cls, v):
        return _as_bool(v)

    def changes(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True)


class Product(ProductBase):
    id: StrictStr

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True)


class ProductResponse(BaseModel):
    message: str
    product: Dict[str, Any]


class ErrorResponse(BaseModel):
    error: str
    message: Optional[str] = None
