from typing import Any

from fastapi import APIRouter, Depends, status

from printify_storefront.core.application.ports.cart_store_port import CartStorePort
from printify_storefront.infrastructure.entrypoints.api.dependencies import get_cart_store
from printify_storefront.infrastructure.entrypoints.api.dtos.cart_dtos import (
    AddCartItemDTO,
    UpdateCartDTO,
)

router = APIRouter(prefix="/api/cart", tags=["cart"])


@router.get("", status_code=status.HTTP_201_CREATED)
@router.post("", status_code=status.HTTP_201_CREATED)
async def create_cart(store: CartStorePort = Depends(get_cart_store)) -> dict[str, Any]:
    cart = await store.create()
    return cart.to_dict()


@router.get("/{cart_id}")
async def get_cart(cart_id: str, store: CartStorePort = Depends(get_cart_store)) -> dict[str, Any]:
    cart = await store.load(cart_id)
    return cart.to_dict()


@router.post("/{cart_id}")
async def add_cart_item(
    cart_id: str,
    payload: AddCartItemDTO,
    store: CartStorePort = Depends(get_cart_store),
) -> dict[str, Any]:
    cart = await store.add_item(cart_id, payload.variant_id, payload.quantity)
    return cart.to_dict()


@router.put("/{cart_id}")
async def update_cart_items(
    cart_id: str,
    payload: UpdateCartDTO,
    store: CartStorePort = Depends(get_cart_store),
) -> dict[str, Any]:
    lines = [line.model_dump(by_alias=True, exclude_none=True) for line in payload.lines]
    cart = await store.replace_items(cart_id, lines)
    return cart.to_dict()


@router.delete("/{cart_id}")
async def delete_cart(cart_id: str, store: CartStorePort = Depends(get_cart_store)) -> dict[str, Any]:
    return await store.delete(cart_id)
