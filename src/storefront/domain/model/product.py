"""Product aggregate.

Products live independently of the cart. They have their own lifecycle:
created, replaced wholesale on update, removed from the catalog.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from storefront.domain.model.value_objects import (
    Money,
    ProductDescription,
    ProductId,
    ProductName,
    Stock,
)


@dataclass(frozen=True)
class Product:
    """A product in the catalog.

    This is an aggregate root. It is never patched in place: an update
    builds a new instance through ``reconstitute()``, which re-validates
    every field, and the repository replaces the stored one.
    """

    id: ProductId
    name: ProductName
    description: ProductDescription
    price: Money
    stock: Stock

    # --- Factories ------------------------------------------------------------

    @staticmethod
    def create(
        name: str,
        description: str | None,
        price: str | float | int | Decimal,
        stock_quantity: int,
    ) -> Product:
        """Create a brand-new product with a freshly generated id."""
        return Product(
            id=ProductId.of(),
            name=ProductName.of(name),
            description=ProductDescription.of(description),
            price=Money.of(price),
            stock=Stock(stock_quantity),
        )

    @staticmethod
    def reconstitute(
        id: str,
        name: str,
        description: str | None,
        price: str | float | int | Decimal,
        stock_quantity: int,
    ) -> Product:
        """Rebuild a product that already has an id (updates, storage reads)."""
        return Product(
            id=ProductId(id),
            name=ProductName.of(name),
            description=ProductDescription.of(description),
            price=Money.of(price),
            stock=Stock(stock_quantity),
        )

    # --- Queries --------------------------------------------------------------

    def has_stock_for(self, quantity: int) -> bool:
        return self.stock.quantity >= quantity
