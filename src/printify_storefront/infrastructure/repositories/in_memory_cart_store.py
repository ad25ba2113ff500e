"""In-memory cart store standing in for the cart capability Printify lacks.

State lives for the process lifetime only. Mutations of one cart are
serialised per cart id; different carts never contend.
"""

import secrets
import string
import time
from collections.abc import Sequence
from datetime import datetime, timedelta
from typing import Any, Callable

from printify_storefront.core.application.ports.cart_store_port import CartStorePort
from printify_storefront.core.domain.cart import Cart, CartLine, VariantId, utc_now
from printify_storefront.core.exceptions import CartNotFoundError
from printify_storefront.infrastructure.common.keyed_locks import KeyedLocks
from printify_storefront.infrastructure.observability.logger_factory_service import get_logger
from printify_storefront.infrastructure.observability.metrics_service import CART_OPERATIONS_TOTAL

logger = get_logger(__name__)

_ID_ALPHABET = string.ascii_lowercase + string.digits
_ID_SUFFIX_LENGTH = 9


def generate_cart_id() -> str:
    """``cart_<epoch ms>_<9 random base36 chars>``."""
    suffix = "".join(secrets.choice(_ID_ALPHABET) for _ in range(_ID_SUFFIX_LENGTH))
    return f"cart_{int(time.time() * 1000)}_{suffix}"


class InMemoryCartStore(CartStorePort):
    def __init__(
        self,
        clock: Callable[[], datetime] = utc_now,
        ttl_seconds: float | None = None,
        id_factory: Callable[[], str] = generate_cart_id,
    ):
        if ttl_seconds is not None and ttl_seconds <= 0:
            raise ValueError(f"ttl_seconds must be positive, got {ttl_seconds}.")
        self._clock = clock
        self._ttl = timedelta(seconds=ttl_seconds) if ttl_seconds is not None else None
        self._id_factory = id_factory
        self._carts: dict[str, Cart] = {}
        self._locks = KeyedLocks()

    async def create(self) -> Cart:
        now = self._clock()
        self._evict_expired(now)

        cart_id = self._id_factory()
        while cart_id in self._carts:
            cart_id = self._id_factory()

        cart = Cart(id=cart_id, created_at=now, updated_at=now)
        self._carts[cart_id] = cart
        CART_OPERATIONS_TOTAL.labels(operation="create", outcome="success").inc()
        logger.info("Cart created", cart_id=cart_id)
        return cart

    async def load(self, cart_id: str) -> Cart:
        return self._get(cart_id, "load")

    async def add_item(self, cart_id: str, variant_id: VariantId, quantity: int = 1) -> Cart:
        async with self._locks.hold(cart_id):
            cart = self._get(cart_id, "add_item")
            cart.add_line(variant_id, quantity, self._clock())
            CART_OPERATIONS_TOTAL.labels(operation="add_item", outcome="success").inc()
            return cart

    async def replace_items(self, cart_id: str, lines: Sequence[dict[str, Any]]) -> Cart:
        async with self._locks.hold(cart_id):
            cart = self._get(cart_id, "replace_items")
            now = self._clock()
            cart.replace_lines([self._to_line(line, now) for line in lines], now)
            CART_OPERATIONS_TOTAL.labels(operation="replace_items", outcome="success").inc()
            return cart

    async def delete(self, cart_id: str) -> dict[str, Any]:
        async with self._locks.hold(cart_id):
            self._get(cart_id, "delete")
            del self._carts[cart_id]
            CART_OPERATIONS_TOTAL.labels(operation="delete", outcome="success").inc()
            logger.info("Cart deleted", cart_id=cart_id)
            return {"success": True}

    def __len__(self) -> int:
        return len(self._carts)

    def _get(self, cart_id: str, operation: str) -> Cart:
        # Expired carts are gone for every operation, writes included.
        self._evict_expired(self._clock())
        cart = self._carts.get(cart_id)
        if cart is None:
            CART_OPERATIONS_TOTAL.labels(operation=operation, outcome="not_found").inc()
            raise CartNotFoundError(cart_id)
        return cart

    def _evict_expired(self, now: datetime) -> None:
        if self._ttl is None:
            return
        expired = [cart_id for cart_id, cart in self._carts.items() if now - cart.updated_at >= self._ttl]
        for cart_id in expired:
            del self._carts[cart_id]
        if expired:
            logger.info("Expired carts evicted", evicted=len(expired))

    @staticmethod
    def _to_line(line: dict[str, Any], now: datetime) -> CartLine:
        variant_id = line.get("variantId", line.get("variant_id"))
        added_at = line.get("addedAt", line.get("added_at"))
        if isinstance(added_at, str):
            added_at = datetime.fromisoformat(added_at.replace("Z", "+00:00"))
        return CartLine(
            variant_id=variant_id,
            quantity=line.get("quantity", 1),
            added_at=added_at or now,
        )
