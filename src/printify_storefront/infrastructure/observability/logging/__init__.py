from printify_storefront.infrastructure.observability.logging.correlation_middleware import (
    CorrelationMiddleware,
)
from printify_storefront.infrastructure.observability.logging.storefront_schema_processor import (
    storefront_schema_processor,
)

__all__ = [
    "CorrelationMiddleware",
    "storefront_schema_processor",
]
