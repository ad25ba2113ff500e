from printify_storefront.core.domain.gateway.value_objects import success_statuses
from printify_storefront.core.domain.gateway.value_objects.gateway_request import (
    SHOP_ID_PLACEHOLDER,
    GatewayRequest,
)
from printify_storefront.core.domain.gateway.value_objects.gateway_response import GatewayResponse
from printify_storefront.core.domain.gateway.value_objects.http_method import HttpMethod

__all__ = [
    "GatewayRequest",
    "GatewayResponse",
    "HttpMethod",
    "SHOP_ID_PLACEHOLDER",
    "success_statuses",
]
