from printify_storefront.core.application.ports.cart_store_port import CartStorePort

__all__ = ["CartStorePort"]
