"""Prometheus metrics declarations for the storefront.

All metrics are declared statically at module level.
Labels use ONLY static enumerations, never shop ids or cart ids.
"""

from prometheus_client import Counter, Histogram

# ── Outbound gateway ──────────────────────────────────────────────

GATEWAY_REQUESTS_TOTAL = Counter(
    "storefront_gateway_requests_total",
    "Outbound Printify calls by method and outcome",
    ["method", "outcome"],
)

GATEWAY_REQUEST_SECONDS = Histogram(
    "storefront_gateway_request_seconds",
    "Outbound Printify call latency in seconds",
    ["method"],
)

RATE_LIMIT_REJECTIONS_TOTAL = Counter(
    "storefront_rate_limit_rejections_total",
    "Outbound calls rejected by the per-shop rate limiter",
)

# ── Local cart store ──────────────────────────────────────────────

CART_OPERATIONS_TOTAL = Counter(
    "storefront_cart_operations_total",
    "Local cart store operations by kind and outcome",
    ["operation", "outcome"],
)
