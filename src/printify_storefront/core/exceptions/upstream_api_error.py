from typing import Any

from printify_storefront.core.exceptions.storefront_error import StorefrontError

DEFAULT_UPSTREAM_DETAIL = "Printify API request failed"


class UpstreamApiError(StorefrontError):
    """Non-2xx answer from Printify. Carries the upstream status and body verbatim."""

    code = "UPSTREAM_API_ERROR"

    def __init__(
        self,
        status_code: int,
        detail: str | None = None,
        payload: dict[str, Any] | None = None,
    ) -> None:
        self.status_code = status_code
        self.detail = detail or DEFAULT_UPSTREAM_DETAIL
        self.payload: dict[str, Any] = payload if payload is not None else {}
        super().__init__(
            self.detail,
            context={"status_code": status_code, "payload": self.payload},
        )

    @property
    def retryable(self) -> bool:  # type: ignore[override]
        return self.status_code >= 500

    def __str__(self) -> str:
        return f"{self.detail} status={self.status_code}"
