"""Single choke point for every outbound call to the Printify API.

Injects authentication, resolves the shop-scoped endpoint, consults the
per-shop rate limiter and normalises the response or error shape.
Nothing here retries; retry policy belongs to the caller.
"""

from __future__ import annotations

import time
from typing import Any

import httpx

from printify_storefront.core.domain.gateway import GatewayRequest, GatewayResponse
from printify_storefront.core.domain.gateway.value_objects.success_statuses import is_success
from printify_storefront.core.exceptions import (
    MissingConfigurationError,
    RateLimitExceededError,
    StorefrontError,
    TransportError,
    UpstreamApiError,
)
from printify_storefront.infrastructure.configuration.gateway_config import GatewayConfig
from printify_storefront.infrastructure.drivers.printify.rate_limiter import (
    SlidingWindowRateLimiter,
)
from printify_storefront.infrastructure.observability.logger_factory_service import get_logger
from printify_storefront.infrastructure.observability.metrics_service import (
    GATEWAY_REQUEST_SECONDS,
    GATEWAY_REQUESTS_TOTAL,
)

logger = get_logger(__name__)


class PrintifyHttpClient:
    def __init__(
        self,
        config: GatewayConfig,
        rate_limiter: SlidingWindowRateLimiter,
        http_client: httpx.AsyncClient | None = None,
    ):
        self.config = config
        self.rate_limiter = rate_limiter
        self.base_url = config.base_url.rstrip("/")
        self._owns_client = http_client is None
        self._client = http_client or httpx.AsyncClient(timeout=config.timeout_seconds)

    def build_url(self, path: str) -> str:
        return f"{self.base_url}/{path.lstrip('/')}"

    def _get_headers(self, api_key: str) -> dict[str, str]:
        return {
            "Authorization": f"Bearer {api_key}",
            "Content-Type": "application/json;charset=utf-8",
            "Accept": "application/json",
            "User-Agent": self.config.user_agent,
        }

    async def request(self, descriptor: GatewayRequest) -> GatewayResponse:
        start = time.perf_counter()
        try:
            response = await self._dispatch(descriptor)
        except StorefrontError as exc:
            self._log_failure(descriptor, exc, start)
            raise

        GATEWAY_REQUESTS_TOTAL.labels(method=descriptor.method.value, outcome="success").inc()
        logger.info(
            "Printify request completed",
            context_endpoint=descriptor.endpoint,
            context_method=descriptor.method.value,
            processing_status="SUCCESS",
            processing_http_status=response.status_code,
            processing_duration_ms=_elapsed_ms(start),
        )
        return response

    async def _dispatch(self, descriptor: GatewayRequest) -> GatewayResponse:
        api_key, shop_id = self.config.require_credentials(descriptor.shop_id)
        url = self.build_url(descriptor.resolve_path(shop_id))

        self.rate_limiter.acquire(shop_id)

        method = descriptor.method.value
        with GATEWAY_REQUEST_SECONDS.labels(method=method).time():
            try:
                response = await self._client.request(
                    method,
                    url,
                    headers=self._get_headers(api_key),
                    json=descriptor.body if descriptor.has_body else None,
                    timeout=self.config.timeout_seconds,
                )
            except httpx.TimeoutException as exc:
                raise TransportError(
                    f"Timed out calling Printify {method} {descriptor.endpoint}",
                    context={"url": url},
                ) from exc
            except httpx.RequestError as exc:
                raise TransportError(
                    f"Network error calling Printify {method} {descriptor.endpoint}: {exc}",
                    context={"url": url},
                ) from exc

        payload = _parse_payload(response)

        if not is_success(response.status_code):
            raise UpstreamApiError(
                status_code=response.status_code,
                detail=_extract_detail(payload),
                payload=payload if isinstance(payload, dict) else {"data": payload},
            )

        if descriptor.success_statuses and response.status_code not in descriptor.success_statuses:
            logger.warning(
                "Printify answered with an unexpected success status",
                context_endpoint=descriptor.endpoint,
                context_method=method,
                processing_http_status=response.status_code,
                expected_statuses=sorted(descriptor.success_statuses),
            )

        return GatewayResponse(status_code=response.status_code, payload=payload)

    def _log_failure(self, descriptor: GatewayRequest, exc: StorefrontError, start: float) -> None:
        outcome = _failure_outcome(exc)
        GATEWAY_REQUESTS_TOTAL.labels(method=descriptor.method.value, outcome=outcome).inc()
        logger.error(
            "Printify request failed",
            context_endpoint=descriptor.endpoint,
            context_method=descriptor.method.value,
            processing_status="REJECTED" if outcome in ("rate_limited", "misconfigured") else "ERROR",
            processing_http_status=getattr(exc, "status_code", None),
            processing_duration_ms=_elapsed_ms(start),
            error_type=type(exc).__name__,
            error_code=exc.code,
            error_details=exc.message,
            error_retryable=exc.retryable,
        )

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> "PrintifyHttpClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()


def _parse_payload(response: httpx.Response) -> Any:
    """Unparsable or empty bodies become {} so the status code is never masked."""
    if not response.content:
        return {}
    try:
        return response.json()
    except ValueError:
        return {}


def _extract_detail(payload: Any) -> str | None:
    if isinstance(payload, dict):
        message = payload.get("message") or payload.get("error")
        if isinstance(message, str) and message:
            return message
    return None


def _failure_outcome(exc: StorefrontError) -> str:
    if isinstance(exc, RateLimitExceededError):
        return "rate_limited"
    if isinstance(exc, MissingConfigurationError):
        return "misconfigured"
    if isinstance(exc, UpstreamApiError):
        return "upstream_error"
    return "transport_error"


def _elapsed_ms(start: float) -> float:
    return round((time.perf_counter() - start) * 1000, 2)
