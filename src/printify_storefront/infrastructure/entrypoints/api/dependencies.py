from fastapi import Request

from printify_storefront.core.application.ports.cart_store_port import CartStorePort
from printify_storefront.infrastructure.configuration.main_settings import Settings
from printify_storefront.infrastructure.drivers.printify.printify_gateway import PrintifyGateway
from printify_storefront.infrastructure.resolution.container import StorefrontContainer


def get_container(request: Request) -> StorefrontContainer:
    return request.app.state.container


def get_settings(request: Request) -> Settings:
    return get_container(request).settings


def get_gateway(request: Request) -> PrintifyGateway:
    return get_container(request).gateway


def get_cart_store(request: Request) -> CartStorePort:
    return get_container(request).cart_store
