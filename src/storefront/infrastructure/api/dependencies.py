"""FastAPI dependencies that hand the services to the route functions."""

from __future__ import annotations

from fastapi import Depends, Request

from storefront.application.cart_service import CartService
from storefront.application.product_service import ProductService
from storefront.infrastructure.bootstrap import Container


def get_container(request: Request) -> Container:
    return request.app.state.container


def get_product_service(container: Container = Depends(get_container)) -> ProductService:
    return container.product_service


def get_cart_service(container: Container = Depends(get_container)) -> CartService:
    return container.cart_service
