"""Storefront exception hierarchy.

Every gateway, cart store and configuration failure raises from this tree so
callers can decide on retries from the type and ``retryable`` flag alone.
"""

from typing import Any


class StorefrontError(Exception):
    """Base exception for all storefront errors."""

    code: str = "STOREFRONT_ERROR"
    retryable: bool = False

    def __init__(self, message: str = "", *, context: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.context: dict[str, Any] = context or {}
