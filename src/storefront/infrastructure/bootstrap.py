"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions. The container is built
once at process start and handed to the HTTP app or the CLI.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from storefront.application.cart_service import CartService
from storefront.application.product_service import ProductService
from storefront.domain.repository.cart_repository import CartRepository
from storefront.domain.repository.product_repository import ProductRepository
from storefront.infrastructure.config import Settings
from storefront.infrastructure.persistence.in_memory_cart_repository import (
    InMemoryCartRepository,
)
from storefront.infrastructure.persistence.in_memory_product_repository import (
    InMemoryProductRepository,
)
from storefront.infrastructure.persistence.json_cart_repository import (
    JsonCartRepository,
)
from storefront.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Container:
    settings: Settings
    product_repo: ProductRepository
    cart_repo: CartRepository
    product_service: ProductService
    cart_service: CartService


def build_container(settings: Settings | None = None) -> Container:
    settings = settings or Settings()

    if settings.storage_backend == "json":
        product_repo: ProductRepository = JsonProductRepository(
            settings.data_dir / "products.json"
        )
        cart_repo: CartRepository = JsonCartRepository(settings.data_dir / "cart.json")
    else:
        product_repo = InMemoryProductRepository()
        cart_repo = InMemoryCartRepository()

    logger.info("Using %s storage", settings.storage_backend)

    return Container(
        settings=settings,
        product_repo=product_repo,
        cart_repo=cart_repo,
        product_service=ProductService(product_repo),
        cart_service=CartService(cart_repo, product_repo),
    )
