"""Application service for the product catalog."""

from __future__ import annotations

import logging
from decimal import Decimal

from storefront.application.dto import ProductDTO, ProductUpdate
from storefront.domain.exceptions import EntityAlreadyExistsError, EntityNotFoundError
from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import ProductId
from storefront.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class ProductService:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    # --- Commands -------------------------------------------------------------

    def create_product(
        self,
        name: str,
        description: str | None,
        price: Decimal | float | int | str,
        stock: int,
    ) -> ProductDTO:
        """Add a new product to the catalog under a generated id."""
        product = Product.create(name, description, price, stock)

        if self._product_repo.get_by_id(product.id) is not None:
            raise EntityAlreadyExistsError("Product with id already exists")

        self._product_repo.save(product)
        logger.info("Created product %s (%s)", product.id, product.name)
        return self._to_dto(product)

    def update_product(self, product_id: str, changes: ProductUpdate) -> ProductDTO:
        """Replace a product, falling back to stored values for omitted fields.

        The merged product is rebuilt through ``Product.reconstitute`` so
        every field is validated again, not only the ones that changed.
        """
        existing = self._require(product_id)

        updated = Product.reconstitute(
            id=existing.id.value,
            name=changes.name if changes.name is not None else existing.name.value,
            description=(
                changes.description
                if changes.description is not None
                else existing.description.value
            ),
            price=changes.price if changes.price is not None else existing.price.amount,
            stock_quantity=(
                changes.stock if changes.stock is not None else existing.stock.quantity
            ),
        )

        self._product_repo.save(updated)
        logger.info("Updated product %s", updated.id)
        return self._to_dto(updated)

    def delete_product(self, product_id: str) -> None:
        product = self._require(product_id)
        self._product_repo.delete(product.id)
        logger.info("Deleted product %s", product.id)

    # --- Queries --------------------------------------------------------------

    def get_product(self, product_id: str) -> ProductDTO:
        return self._to_dto(self._require(product_id))

    def get_all_products(self) -> list[ProductDTO]:
        return [self._to_dto(p) for p in self._product_repo.list_all()]

    # --- Internal helpers -----------------------------------------------------

    def _require(self, product_id: str) -> Product:
        product = self._product_repo.get_by_id(ProductId(product_id))
        if product is None:
            raise EntityNotFoundError("Product not found")
        return product

    @staticmethod
    def _to_dto(product: Product) -> ProductDTO:
        return ProductDTO(
            id=product.id.value,
            name=product.name.value,
            description=product.description.value,
            price=product.price.amount,
            stock=product.stock.quantity,
        )
