from printify_storefront.core.domain.cart.entities.cart import Cart, to_iso, utc_now
from printify_storefront.core.domain.cart.value_objects.cart_line import CartLine, VariantId

__all__ = [
    "Cart",
    "CartLine",
    "VariantId",
    "to_iso",
    "utc_now",
]
