import copy
from collections.abc import Mapping, Sequence
from typing import Any
from urllib.parse import quote

from printify_storefront.core.domain.cart import VariantId
from printify_storefront.core.domain.gateway import GatewayRequest, GatewayResponse, HttpMethod
from printify_storefront.core.domain.gateway import success_statuses as statuses
from printify_storefront.core.exceptions import UpstreamApiError
from printify_storefront.infrastructure.common.keyed_locks import KeyedLocks
from printify_storefront.infrastructure.drivers.printify.mappers.cart_items_mapper import (
    CartItemsMapper,
)
from printify_storefront.infrastructure.drivers.printify.printify_http_client import (
    PrintifyHttpClient,
)
from printify_storefront.infrastructure.observability.logger_factory_service import get_logger

logger = get_logger(__name__)

PRODUCTS = "/shops/{shop_id}/products.json"
PRODUCT = "/shops/{shop_id}/products/{product_id}.json"
ORDERS = "/shops/{shop_id}/orders.json"
ORDER = "/shops/{shop_id}/orders/{order_id}.json"
CARTS = "/shops/{shop_id}/carts.json"
CART = "/shops/{shop_id}/carts/{cart_id}.json"

EMPTY_COLLECTIONS: dict[str, Any] = {"data": {"collections": {"edges": []}}}


def _segment(value: Any) -> str:
    return quote(str(value), safe="")


class PrintifyGateway:
    """
    Resource operations over the Printify API. Each one maps a semantic
    action to a single request with a fixed endpoint, method and set of
    acceptable success codes.
    """

    def __init__(self, client: PrintifyHttpClient, mapper: CartItemsMapper | None = None):
        self.client = client
        self.mapper = mapper or CartItemsMapper()
        self._cart_locks = KeyedLocks()

    async def _call(
        self,
        endpoint: str,
        method: HttpMethod,
        success: frozenset[int],
        body: Any = None,
    ) -> GatewayResponse:
        return await self.client.request(
            GatewayRequest(endpoint=endpoint, method=method, body=body, success_statuses=success)
        )

    # ── Products ──

    async def list_products(self) -> GatewayResponse:
        return await self._call(PRODUCTS, HttpMethod.GET, statuses.READ)

    async def get_product(self, product_id: str) -> GatewayResponse:
        endpoint = PRODUCT.replace("{product_id}", _segment(product_id))
        return await self._call(endpoint, HttpMethod.GET, statuses.READ)

    async def create_product(self, product_data: Mapping[str, Any]) -> GatewayResponse:
        return await self._call(PRODUCTS, HttpMethod.POST, statuses.CREATED, dict(product_data))

    async def update_product(self, product_id: str, product_data: Mapping[str, Any]) -> GatewayResponse:
        endpoint = PRODUCT.replace("{product_id}", _segment(product_id))
        return await self._call(endpoint, HttpMethod.PUT, statuses.WRITE, dict(product_data))

    async def delete_product(self, product_id: str) -> GatewayResponse:
        endpoint = PRODUCT.replace("{product_id}", _segment(product_id))
        return await self._call(endpoint, HttpMethod.DELETE, statuses.DELETE)

    # ── Orders ──

    async def create_order(self, order_data: Mapping[str, Any]) -> GatewayResponse:
        return await self._call(ORDERS, HttpMethod.POST, statuses.CREATED, dict(order_data))

    async def list_orders(self) -> GatewayResponse:
        return await self._call(ORDERS, HttpMethod.GET, statuses.READ)

    async def get_order(self, order_id: str) -> GatewayResponse:
        endpoint = ORDER.replace("{order_id}", _segment(order_id))
        return await self._call(endpoint, HttpMethod.GET, statuses.READ)

    # ── Carts (compatibility shim, Printify has no native cart) ──

    async def create_cart(self) -> GatewayResponse:
        return await self._call(CARTS, HttpMethod.POST, statuses.CREATED, {"cart": {"items": []}})

    async def load_cart(self, cart_id: str) -> GatewayResponse:
        endpoint = CART.replace("{cart_id}", _segment(cart_id))
        return await self._call(endpoint, HttpMethod.GET, statuses.READ)

    async def add_to_cart(self, cart_id: str, variant_id: VariantId, quantity: int = 1) -> GatewayResponse:
        """
        Merge-by-variant: the current upstream item list is loaded, the
        variant's quantity incremented (or a line appended) and the whole
        list written back. Load and write are serialised per cart.
        """
        if isinstance(quantity, bool) or not isinstance(quantity, int) or quantity < 1:
            raise ValueError(f"Quantity must be a positive integer, got {quantity!r}.")

        async with self._cart_locks.hold(str(cart_id)):
            current = await self.load_cart(cart_id)
            try:
                items = self.mapper.merge_item(self.mapper.extract_items(current.payload), variant_id, quantity)
            except ValueError as exc:
                # Writing back a partial list would drop lines upstream.
                raise UpstreamApiError(
                    status_code=current.status_code,
                    detail=f"Printify returned a malformed cart item: {exc}",
                    payload=current.payload if isinstance(current.payload, dict) else {"data": current.payload},
                ) from exc
            logger.info("Writing merged cart", cart_id=str(cart_id), line_count=len(items))
            endpoint = CART.replace("{cart_id}", _segment(cart_id))
            return await self._call(endpoint, HttpMethod.PUT, statuses.WRITE, {"cart": {"items": items}})

    async def update_cart(self, cart_id: str, lines: Sequence[Mapping[str, Any]]) -> GatewayResponse:
        body = self.mapper.to_upstream_body(lines)
        async with self._cart_locks.hold(str(cart_id)):
            endpoint = CART.replace("{cart_id}", _segment(cart_id))
            return await self._call(endpoint, HttpMethod.PUT, statuses.WRITE, body)

    async def delete_cart(self, cart_id: str) -> GatewayResponse:
        endpoint = CART.replace("{cart_id}", _segment(cart_id))
        return await self._call(endpoint, HttpMethod.DELETE, statuses.DELETE)

    # ── Collections ──

    async def list_collections(self) -> GatewayResponse:
        # Printify has no collections; callers get an empty edge list.
        return GatewayResponse(status_code=200, payload=copy.deepcopy(EMPTY_COLLECTIONS))
