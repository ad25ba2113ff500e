import math

from printify_storefront.core.exceptions.storefront_error import StorefrontError


class RateLimitExceededError(StorefrontError):
    """Raised before dispatch when a shop has used up its request window."""

    code = "RATE_LIMIT_EXCEEDED"
    retryable = True

    def __init__(self, key: str, retry_after_seconds: float) -> None:
        self.key = key
        self.retry_after_seconds = max(retry_after_seconds, 0.0)
        super().__init__(
            f"Rate limit exceeded for shop {key}. "
            f"Please wait {self.retry_after_whole_seconds} seconds",
            context={"key": key, "retry_after_seconds": self.retry_after_seconds},
        )

    @property
    def retry_after_whole_seconds(self) -> int:
        return math.ceil(self.retry_after_seconds)
