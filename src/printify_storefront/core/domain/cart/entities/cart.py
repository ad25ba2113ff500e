from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any

from printify_storefront.core.domain.cart.value_objects.cart_line import CartLine, VariantId


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def to_iso(moment: datetime) -> str:
    """ISO-8601 in UTC with millisecond precision and a ``Z`` suffix."""
    return moment.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


@dataclass
class Cart:
    id: str
    created_at: datetime
    updated_at: datetime
    items: list[CartLine] = field(default_factory=list)

    def find_line(self, variant_id: VariantId) -> CartLine | None:
        return next((line for line in self.items if line.variant_id == variant_id), None)

    def add_line(self, variant_id: VariantId, quantity: int, now: datetime) -> CartLine:
        """
        Merges into the existing line for ``variant_id`` (quantities sum) or
        appends a new line. Line order is preserved either way.
        """
        for index, line in enumerate(self.items):
            if line.variant_id == variant_id:
                if quantity < 1:
                    raise ValueError(f"Cart line quantity must be at least 1, got {quantity}.")
                merged = line.increased_by(quantity)
                self.items[index] = merged
                self.updated_at = now
                return merged

        new_line = CartLine(variant_id=variant_id, quantity=quantity, added_at=now)
        self.items.append(new_line)
        self.updated_at = now
        return new_line

    def replace_lines(self, lines: list[CartLine], now: datetime) -> None:
        self.items = list(lines)
        self.updated_at = now

    @property
    def total_quantity(self) -> int:
        return sum(line.quantity for line in self.items)

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "items": [
                {
                    "variantId": line.variant_id,
                    "quantity": line.quantity,
                    "addedAt": to_iso(line.added_at),
                }
                for line in self.items
            ],
            "createdAt": to_iso(self.created_at),
            "updatedAt": to_iso(self.updated_at),
        }
