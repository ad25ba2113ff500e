from .mappers.cart_items_mapper import CartItemsMapper
from .printify_gateway import PrintifyGateway
from .printify_http_client import PrintifyHttpClient
from .rate_limiter import AdmissionDecision, SlidingWindowRateLimiter

__all__ = [
    "AdmissionDecision",
    "CartItemsMapper",
    "PrintifyGateway",
    "PrintifyHttpClient",
    "SlidingWindowRateLimiter",
]
