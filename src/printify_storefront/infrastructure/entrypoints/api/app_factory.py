from contextlib import asynccontextmanager

from fastapi import FastAPI

from printify_storefront.infrastructure.configuration.main_settings import Settings
from printify_storefront.infrastructure.entrypoints.api.cart_router import router as cart_router
from printify_storefront.infrastructure.entrypoints.api.catalog_router import (
    router as catalog_router,
)
from printify_storefront.infrastructure.entrypoints.api.error_handlers import (
    register_exception_handlers,
)
from printify_storefront.infrastructure.entrypoints.api.health_router import (
    router as health_router,
)
from printify_storefront.infrastructure.entrypoints.api.webhook_router import (
    router as webhook_router,
)
from printify_storefront.infrastructure.observability.logger_factory_service import (
    configure_logging,
    get_logger,
)
from printify_storefront.infrastructure.observability.logging.correlation_middleware import (
    CorrelationMiddleware,
)
from printify_storefront.infrastructure.resolution.container import StorefrontContainer

logger = get_logger(__name__)


def create_app(settings: Settings, container: StorefrontContainer | None = None) -> FastAPI:
    configure_logging(settings.log_level)
    logger.info(
        "Boot diagnostics",
        app_name=settings.app_name,
        env=settings.env,
        has_api_key=settings.printify.has_api_key,
        has_shop_id=settings.printify.has_shop_id,
    )

    container = container or StorefrontContainer(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        yield
        await container.aclose()

    app = FastAPI(title=settings.app_name, lifespan=lifespan)
    app.state.container = container
    app.add_middleware(CorrelationMiddleware)
    register_exception_handlers(app)

    app.include_router(health_router)
    app.include_router(cart_router)
    app.include_router(catalog_router)
    app.include_router(webhook_router)

    return app
