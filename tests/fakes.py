"""Recording repositories for testing.

These wrap the in-memory repositories and remember which writes the
services asked for, so tests can assert that no mutation happened.
"""

from __future__ import annotations

from storefront.domain.model.cart_item import CartItem
from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import ProductId
from storefront.infrastructure.persistence.in_memory_cart_repository import (
    InMemoryCartRepository,
)
from storefront.infrastructure.persistence.in_memory_product_repository import (
    InMemoryProductRepository,
)


class RecordingProductRepository(InMemoryProductRepository):

    def __init__(self, products: list[Product] | None = None) -> None:
        super().__init__(products)
        self.saved: list[Product] = []
        self.deleted: list[ProductId] = []

    def save(self, product: Product) -> None:
        self.saved.append(product)
        super().save(product)

    def delete(self, product_id: ProductId) -> None:
        self.deleted.append(product_id)
        super().delete(product_id)


class RecordingCartRepository(InMemoryCartRepository):

    def __init__(self, items: list[CartItem] | None = None) -> None:
        super().__init__(items)
        self.saved: list[CartItem] = []
        self.deleted: list[ProductId] = []

    def save(self, item: CartItem) -> None:
        self.saved.append(item)
        super().save(item)

    def delete_by_product_id(self, product_id: ProductId) -> None:
        self.deleted.append(product_id)
        super().delete_by_product_id(product_id)


class CollidingProductRepository(RecordingProductRepository):
    """Pretends every id is already taken."""

    def get_by_id(self, product_id: ProductId) -> Product | None:
        return Product.reconstitute(product_id.value, "Existing", "", 1, 1)
