from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from printify_storefront.infrastructure.configuration.printify_settings import PrintifySettings


class Settings(BaseSettings):
    """
    Combines all settings.
    Usage:
        settings = Settings()
    """
    app_name: str = "Printify Storefront"
    env: str = Field(default="local", validation_alias=AliasChoices("APP_ENV"))
    log_level: str = "INFO"

    printify: PrintifySettings = Field(default_factory=PrintifySettings)

    model_config = SettingsConfigDict(env_file=None, extra="ignore", populate_by_name=True)
