from collections.abc import Iterable, Mapping
from typing import Any

from printify_storefront.core.domain.cart import VariantId


class CartItemsMapper:
    """Translates between storefront cart lines and the upstream ``cart.items`` shape."""

    @staticmethod
    def to_upstream_item(line: Mapping[str, Any]) -> dict[str, Any]:
        variant_id = line.get("variant_id", line.get("variantId"))
        if variant_id is None:
            raise ValueError(f"Cart line without variant id: {dict(line)}")
        quantity = line.get("quantity", 1)
        if isinstance(quantity, bool) or not isinstance(quantity, int) or quantity < 1:
            raise ValueError(f"Cart line quantity must be a positive integer, got {quantity!r}.")
        return {"variant_id": variant_id, "quantity": quantity}

    @classmethod
    def to_upstream_body(cls, lines: Iterable[Mapping[str, Any]]) -> dict[str, Any]:
        return {"cart": {"items": [cls.to_upstream_item(line) for line in lines]}}

    @staticmethod
    def extract_items(payload: Any) -> list[dict[str, Any]]:
        """Reads the item list from either ``{"cart": {"items": [...]}}`` or ``{"items": [...]}``."""
        if not isinstance(payload, Mapping):
            return []
        container = payload.get("cart", payload)
        if not isinstance(container, Mapping):
            return []
        items = container.get("items") or []
        return [dict(item) for item in items if isinstance(item, Mapping)]

    @classmethod
    def merge_item(
        cls, items: list[dict[str, Any]], variant_id: VariantId, quantity: int
    ) -> list[dict[str, Any]]:
        """Increments the line for ``variant_id`` or appends it; order is preserved."""
        merged: list[dict[str, Any]] = []
        found = False
        for item in items:
            upstream_item = cls.to_upstream_item(item)
            if upstream_item["variant_id"] == variant_id:
                upstream_item["quantity"] += quantity
                found = True
            merged.append(upstream_item)
        if not found:
            merged.append({"variant_id": variant_id, "quantity": quantity})
        return merged
