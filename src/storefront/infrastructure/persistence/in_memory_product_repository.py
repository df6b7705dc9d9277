"""Dict-backed implementation of ProductRepository.

Lives for the lifetime of the process; iteration follows insertion order.
"""

from __future__ import annotations

from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import ProductId
from storefront.domain.repository.product_repository import ProductRepository


class InMemoryProductRepository(ProductRepository):

    def __init__(self, products: list[Product] | None = None) -> None:
        self._store: dict[str, Product] = {}
        for product in products or []:
            self._store[product.id.value] = product

    def get_by_id(self, product_id: ProductId) -> Product | None:
        return self._store.get(product_id.value)

    def list_all(self) -> list[Product]:
        return list(self._store.values())

    def save(self, product: Product) -> None:
        self._store[product.id.value] = product

    def delete(self, product_id: ProductId) -> None:
        self._store.pop(product_id.value, None)
