"""Builds the FastAPI application around an explicit service container."""

from __future__ import annotations

import logging

from fastapi import FastAPI

from storefront.infrastructure.api.cart_router import router as cart_router
from storefront.infrastructure.api.error_handlers import register_error_handlers
from storefront.infrastructure.api.health_router import router as health_router
from storefront.infrastructure.api.product_router import router as product_router
from storefront.infrastructure.bootstrap import Container, build_container
from storefront.infrastructure.logging_config import configure_logging

logger = logging.getLogger(__name__)


def create_app(container: Container | None = None) -> FastAPI:
    container = container or build_container()
    settings = container.settings
    configure_logging(settings.log_level)

    app = FastAPI(title=settings.app_name)
    app.state.container = container

    register_error_handlers(app)

    app.include_router(health_router)
    app.include_router(product_router, prefix=settings.api_prefix)
    app.include_router(cart_router, prefix=settings.api_prefix)

    logger.info(
        "%s ready (storage=%s, prefix=%r)",
        settings.app_name,
        settings.storage_backend,
        settings.api_prefix,
    )
    return app
