"""Shopping cart endpoints.

Like the catalog routes these are coroutines over synchronous services:
the stock check and the save in one request never interleave with
another request, and JSON-file I/O blocks the event loop while it runs.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Response, status
from fastapi.responses import JSONResponse

from storefront.application.cart_service import CartService
from storefront.infrastructure.api.dependencies import get_cart_service
from storefront.infrastructure.api.responses import (
    created_response,
    no_content_response,
    success_response,
)
from storefront.infrastructure.api.schemas import (
    CartItemRequest,
    CartItemResponse,
    CartSummaryResponse,
)

router = APIRouter(prefix="/cart", tags=["cart"])


@router.post("", status_code=status.HTTP_201_CREATED)
async def add_item(
    payload: CartItemRequest,
    service: CartService = Depends(get_cart_service),
) -> JSONResponse:
    dto = service.add_item_to_cart(payload.product_id, payload.quantity)
    return created_response(CartItemResponse.from_dto(dto))


@router.patch("")
async def update_item_quantity(
    payload: CartItemRequest,
    service: CartService = Depends(get_cart_service),
) -> JSONResponse:
    dto = service.update_item_quantity(payload.product_id, payload.quantity)
    return success_response(CartItemResponse.from_dto(dto))


@router.get("/all")
async def list_items(service: CartService = Depends(get_cart_service)) -> JSONResponse:
    return success_response([CartItemResponse.from_dto(i) for i in service.get_all_cart_items()])


@router.get("/summary")
async def summary(service: CartService = Depends(get_cart_service)) -> JSONResponse:
    return success_response(CartSummaryResponse.from_dto(service.get_cart_summary()))


@router.delete("/{product_id}", status_code=status.HTTP_204_NO_CONTENT)
async def remove_item(
    product_id: str,
    service: CartService = Depends(get_cart_service),
) -> Response:
    service.remove_item_from_cart(product_id)
    return no_content_response()
