from importlib.metadata import PackageNotFoundError, version

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from storefront.infrastructure.api.dependencies import get_container
from storefront.infrastructure.api.responses import success_response
from storefront.infrastructure.bootstrap import Container

router = APIRouter()


@router.get("/health")
async def health_check(container: Container = Depends(get_container)) -> JSONResponse:
    try:
        app_version = version("storefront")
    except PackageNotFoundError:
        app_version = "0.0.0"

    return success_response(
        {
            "status": "ok",
            "service": container.settings.app_name,
            "version": app_version,
            "storage": container.settings.storage_backend,
        }
    )
