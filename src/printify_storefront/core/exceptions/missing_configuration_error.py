from printify_storefront.core.exceptions.storefront_error import StorefrontError


class MissingConfigurationError(StorefrontError):
    """Raised when the API key or shop id is absent. Not retryable."""

    code = "MISSING_CONFIGURATION"

    def __init__(self, missing: list[str]) -> None:
        super().__init__(
            f"Printify configuration incomplete, missing: {', '.join(missing)}",
            context={"missing": list(missing)},
        )
        self.missing = list(missing)
