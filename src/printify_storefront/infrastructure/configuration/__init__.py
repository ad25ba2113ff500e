from printify_storefront.infrastructure.configuration.gateway_config import GatewayConfig
from printify_storefront.infrastructure.configuration.main_settings import Settings
from printify_storefront.infrastructure.configuration.printify_settings import PrintifySettings

__all__ = [
    "GatewayConfig",
    "PrintifySettings",
    "Settings",
]
