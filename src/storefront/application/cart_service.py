"""Application service for the shopping cart.

A cart line moves through three states keyed by product id:
absent -> present (add), present -> present (update), present -> absent
(remove). Adding requires the line to be absent; updating and removing
require it to be present.
"""

from __future__ import annotations

import logging

from storefront.application.dto import CartItemDTO, CartLineDTO, CartSummaryDTO
from storefront.domain.exceptions import BusinessRuleViolation, EntityNotFoundError
from storefront.domain.model.cart_item import CartItem
from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import Money, ProductId
from storefront.domain.repository.cart_repository import CartRepository
from storefront.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class CartService:

    def __init__(
        self,
        cart_repo: CartRepository,
        product_repo: ProductRepository,
    ) -> None:
        self._cart_repo = cart_repo
        self._product_repo = product_repo

    # --- Commands -------------------------------------------------------------

    def add_item_to_cart(self, product_id: str, quantity: int) -> CartItemDTO:
        """Put a product in the cart.

        Not idempotent: a second add for the same product fails even when
        the quantity differs. Callers change quantities via
        ``update_item_quantity``.
        """
        product = self._require_product(product_id)
        self._check_stock(product, quantity)

        if self._cart_repo.get_by_product_id(product.id) is not None:
            raise BusinessRuleViolation(
                "Item already exists in cart, try updating quantity"
            )

        item = CartItem.create(product_id, quantity)
        self._cart_repo.save(item)
        logger.info("Added %s x %s to cart", item.quantity, item.product_id)
        return self._to_dto(item)

    def update_item_quantity(self, product_id: str, quantity: int) -> CartItemDTO:
        """Replace the stored quantity of an existing cart line."""
        if self._cart_repo.get_by_product_id(ProductId(product_id)) is None:
            raise EntityNotFoundError("Item not found in cart")

        product = self._require_product(product_id)
        self._check_stock(product, quantity)

        item = CartItem.create(product_id, quantity)
        self._cart_repo.save(item)
        logger.info("Set cart quantity of %s to %s", item.product_id, item.quantity)
        return self._to_dto(item)

    def remove_item_from_cart(self, product_id: str) -> None:
        key = ProductId(product_id)
        if self._cart_repo.get_by_product_id(key) is None:
            raise EntityNotFoundError("Item not found in cart")
        self._cart_repo.delete_by_product_id(key)
        logger.info("Removed %s from cart", key)

    # --- Queries --------------------------------------------------------------

    def get_all_cart_items(self) -> list[CartItemDTO]:
        return [self._to_dto(item) for item in self._cart_repo.list_all()]

    def get_cart_summary(self) -> CartSummaryDTO:
        """Price every cart line against the current catalog."""
        lines: list[CartLineDTO] = []
        total = Money.zero()
        total_quantity = 0

        for item in self._cart_repo.list_all():
            product = self._product_repo.get_by_id(item.product_id)
            if product is None:
                logger.warning(
                    "Cart references missing product %s; skipping", item.product_id
                )
                continue

            subtotal = product.price * item.quantity.value
            lines.append(
                CartLineDTO(
                    product_id=product.id.value,
                    product_name=product.name.value,
                    unit_price=product.price.amount,
                    quantity=item.quantity.value,
                    subtotal=subtotal.amount,
                )
            )
            total = total + subtotal
            total_quantity += item.quantity.value

        return CartSummaryDTO(items=lines, total_quantity=total_quantity, total=total.amount)

    # --- Internal helpers -----------------------------------------------------

    def _require_product(self, product_id: str) -> Product:
        product = self._product_repo.get_by_id(ProductId(product_id))
        if product is None:
            raise EntityNotFoundError("Product not found")
        return product

    @staticmethod
    def _check_stock(product: Product, quantity: int) -> None:
        if not product.has_stock_for(quantity):
            logger.info(
                "Rejected %s units of %s: only %s in stock",
                quantity,
                product.id,
                product.stock,
            )
            raise BusinessRuleViolation("Not enough stock")

    @staticmethod
    def _to_dto(item: CartItem) -> CartItemDTO:
        return CartItemDTO(
            product_id=item.product_id.value,
            quantity=item.quantity.value,
        )
