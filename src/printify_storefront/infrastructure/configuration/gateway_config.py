from dataclasses import dataclass

from printify_storefront.core.exceptions import MissingConfigurationError
from printify_storefront.infrastructure.configuration.printify_settings import (
    DEFAULT_PRINTIFY_BASE_URL,
    PrintifySettings,
)


@dataclass(frozen=True)
class GatewayConfig:
    """Resolved once at startup and passed down to the gateway client."""

    api_key: str | None
    shop_id: str | None
    base_url: str = DEFAULT_PRINTIFY_BASE_URL
    timeout_seconds: float = 10.0
    user_agent: str = "printify-storefront/1.0"

    @classmethod
    def from_settings(cls, settings: PrintifySettings) -> "GatewayConfig":
        return cls(
            api_key=settings.api_key.get_secret_value() if settings.api_key else None,
            shop_id=settings.shop_id,
            base_url=settings.base_url,
            timeout_seconds=settings.request_timeout_seconds,
            user_agent=settings.user_agent,
        )

    def require_credentials(self, shop_id: str | None = None) -> tuple[str, str]:
        """
        Returns (api_key, shop_id) or raises MissingConfigurationError naming
        every absent value. An explicit ``shop_id`` overrides the configured one.
        """
        resolved_shop = shop_id or self.shop_id
        missing = []
        if not self.api_key:
            missing.append("PRINTIFY_API_KEY")
        if not resolved_shop:
            missing.append("PRINTIFY_SHOP_ID")
        if missing:
            raise MissingConfigurationError(missing)
        return self.api_key, resolved_shop
