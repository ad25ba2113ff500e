"""Builds the storefront services once per process.

The rate-limit windows and carts only enforce their guarantees when every
caller shares the same instances, so routers receive them from here.
"""

import httpx

from printify_storefront.core.application.ports.cart_store_port import CartStorePort
from printify_storefront.infrastructure.configuration.gateway_config import GatewayConfig
from printify_storefront.infrastructure.configuration.main_settings import Settings
from printify_storefront.infrastructure.drivers.printify.printify_gateway import PrintifyGateway
from printify_storefront.infrastructure.drivers.printify.printify_http_client import (
    PrintifyHttpClient,
)
from printify_storefront.infrastructure.drivers.printify.rate_limiter import (
    SlidingWindowRateLimiter,
)
from printify_storefront.infrastructure.observability.logger_factory_service import get_logger
from printify_storefront.infrastructure.repositories.in_memory_cart_store import (
    InMemoryCartStore,
)

logger = get_logger(__name__)


class StorefrontContainer:
    def __init__(
        self,
        settings: Settings,
        http_client: httpx.AsyncClient | None = None,
        cart_store: CartStorePort | None = None,
    ):
        printify = settings.printify
        self.settings = settings
        self.gateway_config = GatewayConfig.from_settings(printify)
        self.rate_limiter = SlidingWindowRateLimiter(
            max_requests=printify.rate_limit_max_requests,
            window_seconds=printify.rate_limit_window_seconds,
            idle_ttl_seconds=printify.rate_limit_idle_ttl_seconds,
        )
        self.printify_client = PrintifyHttpClient(self.gateway_config, self.rate_limiter, http_client)
        self.gateway = PrintifyGateway(self.printify_client)
        self.cart_store = cart_store or InMemoryCartStore(ttl_seconds=printify.cart_ttl_seconds)

        logger.info(
            "Storefront container ready",
            has_api_key=printify.has_api_key,
            has_shop_id=printify.has_shop_id,
            rate_limit_max_requests=printify.rate_limit_max_requests,
            rate_limit_window_seconds=printify.rate_limit_window_seconds,
        )

    async def aclose(self) -> None:
        await self.printify_client.aclose()
