from printify_storefront.core.exceptions.storefront_error import StorefrontError


class NotFoundError(StorefrontError):
    """Raised when a locally managed resource does not exist."""

    code = "NOT_FOUND"

    def __init__(self, resource: str, identifier: str) -> None:
        self.resource = resource
        self.identifier = identifier
        super().__init__(
            f"{resource.capitalize()} not found: {identifier}",
            context={"resource": resource, "identifier": identifier},
        )


class CartNotFoundError(NotFoundError):
    def __init__(self, cart_id: str) -> None:
        super().__init__("cart", cart_id)
