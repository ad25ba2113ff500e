"""Translates storefront errors into HTTP responses."""

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from printify_storefront.core.exceptions import (
    NotFoundError,
    RateLimitExceededError,
    StorefrontError,
    TransportError,
    UpstreamApiError,
)
from printify_storefront.infrastructure.observability.logger_factory_service import get_logger

logger = get_logger(__name__)


def status_for(exc: StorefrontError) -> int:
    if isinstance(exc, RateLimitExceededError):
        return status.HTTP_429_TOO_MANY_REQUESTS
    if isinstance(exc, NotFoundError):
        return status.HTTP_404_NOT_FOUND
    if isinstance(exc, UpstreamApiError):
        if 400 <= exc.status_code < 500:
            return exc.status_code
        return status.HTTP_502_BAD_GATEWAY
    if isinstance(exc, TransportError):
        return status.HTTP_502_BAD_GATEWAY
    # MissingConfigurationError and anything unclassified
    return status.HTTP_500_INTERNAL_SERVER_ERROR


def error_body(exc: StorefrontError) -> dict:
    body = {"error": exc.message, "code": exc.code}
    if isinstance(exc, UpstreamApiError):
        body["details"] = exc.payload
    if isinstance(exc, RateLimitExceededError):
        body["retryAfter"] = exc.retry_after_whole_seconds
    return body


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(StorefrontError)
    async def storefront_exception_handler(request: Request, exc: StorefrontError):
        http_status = status_for(exc)
        log = logger.error if http_status >= 500 else logger.warning
        log(
            "Request failed",
            context_endpoint=request.url.path,
            context_method=request.method,
            processing_http_status=http_status,
            error_type=type(exc).__name__,
            error_code=exc.code,
            error_details=exc.message,
            error_retryable=exc.retryable,
        )
        headers = None
        if isinstance(exc, RateLimitExceededError):
            headers = {"Retry-After": str(exc.retry_after_whole_seconds)}
        return JSONResponse(status_code=http_status, content=error_body(exc), headers=headers)

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        logger.warning("Validation error", context_endpoint=request.url.path, error_details=str(exc.errors()))
        return JSONResponse(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            content={"detail": jsonable_errors(exc)},
        )


def jsonable_errors(exc: RequestValidationError) -> list[dict]:
    return [{"loc": list(err.get("loc", ())), "msg": err.get("msg"), "type": err.get("type")} for err in exc.errors()]
