from printify_storefront.core.exceptions.storefront_error import StorefrontError


class TransportError(StorefrontError):
    """Network-level failure (timeout, DNS, connection reset). Retry policy belongs to the caller."""

    code = "TRANSPORT_ERROR"
    retryable = True
