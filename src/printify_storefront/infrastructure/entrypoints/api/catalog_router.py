from typing import Any

from fastapi import APIRouter, Depends

from printify_storefront.infrastructure.drivers.printify.printify_gateway import PrintifyGateway
from printify_storefront.infrastructure.entrypoints.api.dependencies import get_gateway

router = APIRouter(prefix="/api", tags=["catalog"])


@router.get("/products")
async def list_products(gateway: PrintifyGateway = Depends(get_gateway)) -> Any:
    response = await gateway.list_products()
    return response.payload


@router.get("/products/{product_id}")
async def get_product(product_id: str, gateway: PrintifyGateway = Depends(get_gateway)) -> Any:
    response = await gateway.get_product(product_id)
    return response.payload


@router.get("/collections")
async def list_collections(gateway: PrintifyGateway = Depends(get_gateway)) -> Any:
    response = await gateway.list_collections()
    return response.payload
