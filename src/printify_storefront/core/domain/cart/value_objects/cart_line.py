from dataclasses import dataclass, replace
from datetime import datetime

VariantId = int | str


@dataclass(frozen=True)
class CartLine:
    variant_id: VariantId
    quantity: int
    added_at: datetime

    def __post_init__(self):
        if self.variant_id is None or self.variant_id == "":
            raise ValueError("Cart line requires a variant id.")
        if isinstance(self.quantity, bool) or not isinstance(self.quantity, int):
            raise ValueError(f"Cart line quantity must be an integer, got {self.quantity!r}.")
        if self.quantity < 1:
            raise ValueError(f"Cart line quantity must be at least 1, got {self.quantity}.")

    def increased_by(self, quantity: int) -> "CartLine":
        return replace(self, quantity=self.quantity + quantity)
