from importlib.metadata import PackageNotFoundError, version

from fastapi import APIRouter, Depends, Response, status
from fastapi.responses import JSONResponse
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest

from printify_storefront.core.exceptions import StorefrontError, UpstreamApiError
from printify_storefront.infrastructure.configuration.main_settings import Settings
from printify_storefront.infrastructure.drivers.printify.printify_gateway import PrintifyGateway
from printify_storefront.infrastructure.entrypoints.api.dependencies import get_gateway, get_settings
from printify_storefront.infrastructure.entrypoints.api.error_handlers import status_for

router = APIRouter()


@router.get("/health")
def health_check():
    try:
        app_version = version("printify-storefront")
    except PackageNotFoundError:
        app_version = "0.0.0"

    return {
        "status": "ok",
        "service": "printify-storefront",
        "version": app_version,
    }


@router.get("/metrics")
def metrics() -> Response:
    return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)


@router.get("/api/printify/config-check")
def printify_config_check(settings: Settings = Depends(get_settings)) -> JSONResponse:
    """Reports whether the Printify secrets are present without revealing them."""
    printify = settings.printify
    config = {
        "hasApiKey": printify.has_api_key,
        "hasShopId": printify.has_shop_id,
        "baseUrl": printify.base_url,
    }
    if not (printify.has_api_key and printify.has_shop_id):
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"success": False, "message": "Missing required environment variables", "config": config},
        )
    return JSONResponse(
        content={"success": True, "message": "Printify configuration is valid", "config": config},
    )


@router.get("/api/test/printify")
async def printify_connectivity_check(gateway: PrintifyGateway = Depends(get_gateway)) -> JSONResponse:
    """Fetches the product list once and reports whether Printify answered."""
    try:
        response = await gateway.list_products()
    except StorefrontError as exc:
        http_status = status_for(exc)
        return JSONResponse(
            status_code=http_status,
            content={
                "success": False,
                "status": exc.status_code if isinstance(exc, UpstreamApiError) else http_status,
                "error": exc.message,
                "code": exc.code,
                "details": exc.payload if isinstance(exc, UpstreamApiError) else {},
            },
        )
    return JSONResponse(
        content={
            "success": True,
            "status": response.status_code,
            "data": response.payload,
            "message": "Successfully connected to Printify API",
        },
    )
