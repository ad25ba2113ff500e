from printify_storefront.infrastructure.repositories.in_memory_cart_store import (
    InMemoryCartStore,
    generate_cart_id,
)

__all__ = ["InMemoryCartStore", "generate_cart_id"]
