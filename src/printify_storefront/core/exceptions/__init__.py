from printify_storefront.core.exceptions.missing_configuration_error import (
    MissingConfigurationError,
)
from printify_storefront.core.exceptions.not_found_error import CartNotFoundError, NotFoundError
from printify_storefront.core.exceptions.rate_limit_exceeded_error import RateLimitExceededError
from printify_storefront.core.exceptions.storefront_error import StorefrontError
from printify_storefront.core.exceptions.transport_error import TransportError
from printify_storefront.core.exceptions.upstream_api_error import UpstreamApiError

__all__ = [
    "CartNotFoundError",
    "MissingConfigurationError",
    "NotFoundError",
    "RateLimitExceededError",
    "StorefrontError",
    "TransportError",
    "UpstreamApiError",
]
