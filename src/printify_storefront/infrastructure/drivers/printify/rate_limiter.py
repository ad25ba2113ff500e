"""Per-shop sliding-window rate limiter for outbound Printify calls.

Counts admitted timestamps inside a trailing window; it is not a token
bucket, so a shop can burst one full quota per window and recovers exactly
as its oldest admissions age out.
"""

from __future__ import annotations

import threading
import time
from collections import deque
from dataclasses import dataclass
from typing import Callable

from printify_storefront.core.exceptions import RateLimitExceededError
from printify_storefront.infrastructure.observability.metrics_service import (
    RATE_LIMIT_REJECTIONS_TOTAL,
)


@dataclass(frozen=True)
class AdmissionDecision:
    admitted: bool
    retry_after_seconds: float = 0.0
    remaining: int = 0


class SlidingWindowRateLimiter:
    def __init__(
        self,
        max_requests: int,
        window_seconds: float = 60.0,
        clock: Callable[[], float] = time.monotonic,
        idle_ttl_seconds: float | None = None,
    ) -> None:
        if max_requests < 1:
            raise ValueError(f"max_requests must be at least 1, got {max_requests}.")
        if window_seconds <= 0:
            raise ValueError(f"window_seconds must be positive, got {window_seconds}.")
        if idle_ttl_seconds is not None and idle_ttl_seconds <= 0:
            raise ValueError(f"idle_ttl_seconds must be positive, got {idle_ttl_seconds}.")
        self.max_requests = max_requests
        self.window_seconds = window_seconds
        self.idle_ttl_seconds = idle_ttl_seconds
        self._clock = clock
        self._windows: dict[str, deque[float]] = {}
        # Check-and-append must be atomic; nothing inside the lock awaits.
        self._lock = threading.Lock()

    def check(self, key: str) -> AdmissionDecision:
        with self._lock:
            now = self._clock()
            if self.idle_ttl_seconds is not None:
                self._evict_idle(now)

            window = self._windows.setdefault(key, deque())
            while window and now - window[0] >= self.window_seconds:
                window.popleft()

            if len(window) >= self.max_requests:
                retry_after = self.window_seconds - (now - window[0])
                return AdmissionDecision(admitted=False, retry_after_seconds=retry_after)

            window.append(now)
            return AdmissionDecision(admitted=True, remaining=self.max_requests - len(window))

    def admit(self, key: str) -> bool:
        return self.check(key).admitted

    def acquire(self, key: str) -> None:
        """Admits one call for ``key`` or raises RateLimitExceededError."""
        decision = self.check(key)
        if not decision.admitted:
            RATE_LIMIT_REJECTIONS_TOTAL.inc()
            raise RateLimitExceededError(key, decision.retry_after_seconds)

    def count(self, key: str) -> int:
        """Admissions currently counted for ``key`` (without purging)."""
        with self._lock:
            return len(self._windows.get(key, ()))

    def _evict_idle(self, now: float) -> None:
        # A window still holding admissions inside the quota period is never dropped.
        horizon = max(self.idle_ttl_seconds, self.window_seconds)
        idle = [
            key
            for key, window in self._windows.items()
            if not window or now - window[-1] >= horizon
        ]
        for key in idle:
            del self._windows[key]

    def __len__(self) -> int:
        return len(self._windows)
