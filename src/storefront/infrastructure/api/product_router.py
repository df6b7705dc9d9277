"""Catalog endpoints.

Handlers are coroutines that call the synchronous services directly, so
requests run one at a time on the event loop. With the JSON backend each
call does blocking file I/O on that loop. This keeps every
read-check-write in the services free of interleaving.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Response, status
from fastapi.responses import JSONResponse

from storefront.application.product_service import ProductService
from storefront.infrastructure.api.dependencies import get_product_service
from storefront.infrastructure.api.responses import (
    created_response,
    no_content_response,
    success_response,
)
from storefront.infrastructure.api.schemas import (
    CreateProductRequest,
    ProductResponse,
    UpdateProductRequest,
)

router = APIRouter(prefix="/product", tags=["product"])


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_product(
    payload: CreateProductRequest,
    service: ProductService = Depends(get_product_service),
) -> JSONResponse:
    dto = service.create_product(
        name=payload.name,
        description=payload.description,
        price=payload.price,
        stock=payload.stock,
    )
    return created_response(ProductResponse.from_dto(dto))


# Registered before "/{product_id}" so "all" is not taken for an id.
@router.get("/all")
async def list_products(
    service: ProductService = Depends(get_product_service),
) -> JSONResponse:
    return success_response([ProductResponse.from_dto(p) for p in service.get_all_products()])


@router.get("/{product_id}")
async def get_product(
    product_id: str,
    service: ProductService = Depends(get_product_service),
) -> JSONResponse:
    return success_response(ProductResponse.from_dto(service.get_product(product_id)))


@router.put("/{product_id}")
async def update_product(
    product_id: str,
    payload: UpdateProductRequest,
    service: ProductService = Depends(get_product_service),
) -> JSONResponse:
    dto = service.update_product(product_id, payload.to_update())
    return success_response(ProductResponse.from_dto(dto))


@router.delete("/{product_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_product(
    product_id: str,
    service: ProductService = Depends(get_product_service),
) -> Response:
    service.delete_product(product_id)
    return no_content_response()
