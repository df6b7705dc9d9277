"""Request and response bodies for the HTTP API.

Request models run in strict mode so a string never silently becomes
a number. Counts accept integral floats such as `5.0`; a fractional
count is handed on unchanged and rejected by the value objects.
Domain rules (name length, stock sign, quantity bounds) are left to
the value objects; these models only check shape and type.
"""

from __future__ import annotations

from typing import Annotated

from pydantic import AfterValidator, BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel

from storefront.application.dto import (
    CartItemDTO,
    CartLineDTO,
    CartSummaryDTO,
    ProductDTO,
    ProductUpdate,
)


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


def _integral(value: int | float) -> int | float:
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value


Count = Annotated[int | float, AfterValidator(_integral)]


# ---------------------------------------------------------------------------
# Requests
# ---------------------------------------------------------------------------


class CreateProductRequest(CamelModel):
    model_config = ConfigDict(strict=True)

    name: str = Field(min_length=1)
    description: str = ""
    price: float
    stock: Count


class UpdateProductRequest(CamelModel):
    model_config = ConfigDict(strict=True)

    name: str | None = Field(default=None, min_length=1)
    description: str | None = None
    price: float | None = None
    stock: Count | None = None

    @model_validator(mode="after")
    def _require_one_field(self) -> UpdateProductRequest:
        if all(v is None for v in (self.name, self.description, self.price, self.stock)):
            raise ValueError("At least one field must be provided for update")
        return self

    def to_update(self) -> ProductUpdate:
        return ProductUpdate(
            name=self.name,
            description=self.description,
            price=self.price,
            stock=self.stock,
        )


class CartItemRequest(CamelModel):
    model_config = ConfigDict(strict=True)

    product_id: str = Field(min_length=1)
    quantity: Count = Field(ge=1)


# ---------------------------------------------------------------------------
# Responses
# ---------------------------------------------------------------------------


class ProductResponse(CamelModel):
    id: str
    name: str
    description: str
    price: float
    stock: int

    @classmethod
    def from_dto(cls, dto: ProductDTO) -> ProductResponse:
        return cls(
            id=dto.id,
            name=dto.name,
            description=dto.description,
            price=float(dto.price),
            stock=dto.stock,
        )


class CartItemResponse(CamelModel):
    product_id: str
    quantity: int

    @classmethod
    def from_dto(cls, dto: CartItemDTO) -> CartItemResponse:
        return cls(product_id=dto.product_id, quantity=dto.quantity)


class CartLineResponse(CamelModel):
    product_id: str
    product_name: str
    unit_price: float
    quantity: int
    subtotal: float

    @classmethod
    def from_dto(cls, dto: CartLineDTO) -> CartLineResponse:
        return cls(
            product_id=dto.product_id,
            product_name=dto.product_name,
            unit_price=float(dto.unit_price),
            quantity=dto.quantity,
            subtotal=float(dto.subtotal),
        )


class CartSummaryResponse(CamelModel):
    items: list[CartLineResponse]
    total_quantity: int
    total: float

    @classmethod
    def from_dto(cls, dto: CartSummaryDTO) -> CartSummaryResponse:
        return cls(
            items=[CartLineResponse.from_dto(line) for line in dto.items],
            total_quantity=dto.total_quantity,
            total=float(dto.total),
        )
