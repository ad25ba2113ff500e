from __future__ import annotations

from dataclasses import dataclass
from typing import Awaitable, Callable, TypeVar

from tenacity import (
    AsyncRetrying,
    RetryCallState,
    retry_if_exception,
    stop_after_attempt,
    wait_exponential_jitter,
)

from printify_storefront.core.exceptions import RateLimitExceededError, StorefrontError

_T = TypeVar("_T")


def _retryable(exc: BaseException) -> bool:
    return isinstance(exc, StorefrontError) and exc.retryable


@dataclass(frozen=True, slots=True)
class RetryPolicy:
    """Caller-side retry for gateway calls. The gateway itself never retries."""

    max_attempts: int = 3
    initial_wait: float = 0.5
    max_wait: float = 10.0

    async def run(self, fn: Callable[[], Awaitable[_T]]) -> _T:
        return await self._retrying()(fn)

    def _retrying(self) -> AsyncRetrying:
        return AsyncRetrying(
            retry=retry_if_exception(_retryable),
            stop=stop_after_attempt(self.max_attempts),
            wait=self._wait,
            reraise=True,
        )

    def _wait(self, retry_state: RetryCallState) -> float:
        # A rejected admission already knows when the window frees up.
        exc = retry_state.outcome.exception() if retry_state.outcome else None
        if isinstance(exc, RateLimitExceededError):
            return exc.retry_after_seconds
        return wait_exponential_jitter(initial=self.initial_wait, max=self.max_wait)(retry_state)
