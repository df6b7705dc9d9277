"""Dict-backed implementation of CartRepository."""

from __future__ import annotations

from storefront.domain.model.cart_item import CartItem
from storefront.domain.model.value_objects import ProductId
from storefront.domain.repository.cart_repository import CartRepository


class InMemoryCartRepository(CartRepository):

    def __init__(self, items: list[CartItem] | None = None) -> None:
        self._store: dict[str, CartItem] = {}
        for item in items or []:
            self._store[item.product_id.value] = item

    def get_by_product_id(self, product_id: ProductId) -> CartItem | None:
        return self._store.get(product_id.value)

    def list_all(self) -> list[CartItem]:
        return list(self._store.values())

    def save(self, item: CartItem) -> None:
        self._store[item.product_id.value] = item

    def delete_by_product_id(self, product_id: ProductId) -> None:
        self._store.pop(product_id.value, None)
