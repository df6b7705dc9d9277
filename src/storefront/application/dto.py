"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the HTTP/CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class ProductDTO:
    """Output: a catalog product."""

    id: str
    name: str
    description: str
    price: Decimal
    stock: int


@dataclass(frozen=True)
class ProductUpdate:
    """Input: the fields a caller wants to change. None means "keep"."""

    name: str | None = None
    description: str | None = None
    price: Decimal | float | int | str | None = None
    stock: int | None = None


@dataclass(frozen=True)
class CartItemDTO:
    """Output: a single cart line."""

    product_id: str
    quantity: int


@dataclass(frozen=True)
class CartLineDTO:
    """Output: a cart line joined with its product, priced."""

    product_id: str
    product_name: str
    unit_price: Decimal
    quantity: int
    subtotal: Decimal


@dataclass(frozen=True)
class CartSummaryDTO:
    """Output: the priced cart."""

    items: list[CartLineDTO]
    total_quantity: int
    total: Decimal
