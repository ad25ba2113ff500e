from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import Any

from printify_storefront.core.domain.cart import Cart, VariantId


class CartStorePort(ABC):
    @abstractmethod
    async def create(self) -> Cart:
        """Creates and stores an empty cart."""
        pass

    @abstractmethod
    async def load(self, cart_id: str) -> Cart:
        """Returns the cart or raises CartNotFoundError."""
        pass

    @abstractmethod
    async def add_item(self, cart_id: str, variant_id: VariantId, quantity: int = 1) -> Cart:
        """Merges a variant into the cart, summing quantities for an existing line."""
        pass

    @abstractmethod
    async def replace_items(self, cart_id: str, lines: Sequence[dict[str, Any]]) -> Cart:
        """Replaces the whole item list."""
        pass

    @abstractmethod
    async def delete(self, cart_id: str) -> dict[str, Any]:
        pass
