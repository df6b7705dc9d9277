"""Abstract repository for cart line items, keyed by product id."""

from __future__ import annotations

from abc import ABC, abstractmethod

from storefront.domain.model.cart_item import CartItem
from storefront.domain.model.value_objects import ProductId


class CartRepository(ABC):

    @abstractmethod
    def get_by_product_id(self, product_id: ProductId) -> CartItem | None:
        """Return the cart line for a product, or None."""

    @abstractmethod
    def list_all(self) -> list[CartItem]:
        """Return every cart line, in insertion order."""

    @abstractmethod
    def save(self, item: CartItem) -> None:
        """Persist a new line or replace the existing line for its product."""

    @abstractmethod
    def delete_by_product_id(self, product_id: ProductId) -> None:
        """Remove the cart line for a product. Absent ids are ignored."""
