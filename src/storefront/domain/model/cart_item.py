"""CartItem entity — one line of the shopping cart.

The product id is the natural key: a cart holds at most one line per
product, so no separate item identity is stored.
"""

from __future__ import annotations

from dataclasses import dataclass

from storefront.domain.model.value_objects import ProductId, Quantity


@dataclass(frozen=True)
class CartItem:

    product_id: ProductId
    quantity: Quantity

    @staticmethod
    def create(product_id: str, quantity: int) -> CartItem:
        """Build a line item, validating the id and the 1..999 bounds."""
        return CartItem(
            product_id=ProductId(product_id),
            quantity=Quantity(quantity),
        )
