from dataclasses import dataclass, field
from typing import Any

from printify_storefront.core.domain.gateway.value_objects.http_method import HttpMethod

SHOP_ID_PLACEHOLDER = "{shop_id}"


@dataclass(frozen=True, kw_only=True)
class GatewayRequest:
    """Describes one outbound call. Built per call and discarded afterwards."""

    endpoint: str
    method: HttpMethod = HttpMethod.GET
    body: Any = None
    shop_id: str | None = None
    success_statuses: frozenset[int] = field(default_factory=frozenset)

    def __post_init__(self):
        if not self.endpoint:
            raise ValueError("Gateway request requires an endpoint.")
        # Accept plain strings ("post") as well as HttpMethod members.
        object.__setattr__(self, "method", HttpMethod(str(self.method).upper()))

    def resolve_path(self, shop_id: str) -> str:
        return self.endpoint.replace(SHOP_ID_PLACEHOLDER, shop_id)

    @property
    def has_body(self) -> bool:
        return self.body is not None and self.method.carries_body
