from printify_storefront.infrastructure.common.keyed_locks import KeyedLocks
from printify_storefront.infrastructure.common.retry_policy import RetryPolicy

__all__ = ["KeyedLocks", "RetryPolicy"]
