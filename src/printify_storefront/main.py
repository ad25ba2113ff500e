import uvicorn

from printify_storefront.infrastructure.configuration.main_settings import Settings
from printify_storefront.infrastructure.entrypoints.api.app_factory import create_app


def dev():
    """Run the development server."""
    settings = Settings()
    uvicorn.run(
        "printify_storefront.main:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
        log_level=settings.log_level.lower(),
    )


# Instantiate global app for ASGI
settings = Settings()
app = create_app(settings)
