from pydantic import AliasChoices, Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_PRINTIFY_BASE_URL = "https://api.printify.com/v1"


class PrintifySettings(BaseSettings):
    """
    Settings for the Printify integration.
    The two secrets accept the legacy VITE_ prefixed names as a fallback;
    the unprefixed name always wins when both are set.
    """
    api_key: SecretStr | None = Field(
        default=None,
        validation_alias=AliasChoices("PRINTIFY_API_KEY", "VITE_PRINTIFY_API_KEY"),
        description="Printify personal access token",
    )
    shop_id: str | None = Field(
        default=None,
        validation_alias=AliasChoices("PRINTIFY_SHOP_ID", "VITE_PRINTIFY_SHOP_ID"),
        description="Printify shop identifier",
    )
    base_url: str = Field(default=DEFAULT_PRINTIFY_BASE_URL, description="Printify API base URL")

    # Gateway limits
    rate_limit_max_requests: int = Field(default=600, ge=1, description="Requests admitted per shop and window")
    rate_limit_window_seconds: float = Field(default=60.0, gt=0)
    rate_limit_idle_ttl_seconds: float | None = Field(default=None, gt=0)
    request_timeout_seconds: float = Field(default=10.0, gt=0)
    user_agent: str = "printify-storefront/1.0"

    # Local cart store
    cart_ttl_seconds: float | None = Field(default=None, gt=0)

    model_config = SettingsConfigDict(
        env_prefix="PRINTIFY_",
        env_file=None,
        extra="ignore",
        populate_by_name=True,
    )

    @property
    def has_api_key(self) -> bool:
        return bool(self.api_key and self.api_key.get_secret_value())

    @property
    def has_shop_id(self) -> bool:
        return bool(self.shop_id)
