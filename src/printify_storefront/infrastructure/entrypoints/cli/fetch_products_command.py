"""Fetches the shop's products through the gateway and prints statistics.

Usage:
    printify-fetch-products
"""

import asyncio
import sys
from collections import Counter
from collections.abc import Iterable
from typing import Any

from printify_storefront.core.exceptions import MissingConfigurationError, StorefrontError
from printify_storefront.infrastructure.common.retry_policy import RetryPolicy
from printify_storefront.infrastructure.configuration.main_settings import Settings
from printify_storefront.infrastructure.observability.logger_factory_service import (
    configure_logging,
    get_logger,
)
from printify_storefront.infrastructure.resolution.container import StorefrontContainer

logger = get_logger(__name__)


def extract_products(payload: Any) -> list[dict[str, Any]]:
    """Printify pages products under ``data``; older answers are a bare list."""
    if isinstance(payload, dict):
        payload = payload.get("data", [])
    if not isinstance(payload, list):
        return []
    return [product for product in payload if isinstance(product, dict)]


def summarize_products(products: Iterable[dict[str, Any]]) -> dict[str, Any]:
    products = list(products)
    published = sum(1 for product in products if product.get("is_published"))
    by_status = Counter(str(product.get("status", "unknown")) for product in products)
    return {
        "total": len(products),
        "published": published,
        "unpublished": len(products) - published,
        "by_status": dict(sorted(by_status.items())),
    }


def format_summary(summary: dict[str, Any]) -> str:
    lines = [
        "Product Statistics:",
        f"- Total products: {summary['total']}",
        f"- Published products: {summary['published']}",
        f"- Unpublished products: {summary['unpublished']}",
    ]
    if summary["by_status"]:
        lines.append("")
        lines.append("Products by status:")
        lines.extend(f"- {status}: {count}" for status, count in summary["by_status"].items())
    return "\n".join(lines)


async def fetch_products(container: StorefrontContainer, retry_policy: RetryPolicy) -> list[dict[str, Any]]:
    response = await retry_policy.run(container.gateway.list_products)
    return extract_products(response.payload)


async def run(settings: Settings, retry_policy: RetryPolicy | None = None) -> int:
    container = StorefrontContainer(settings)
    try:
        print(f"Fetching products from Printify (shop {settings.printify.shop_id or '?'})...")
        products = await fetch_products(container, retry_policy or RetryPolicy())
    except MissingConfigurationError as exc:
        print(
            f"{exc.message}. Set PRINTIFY_API_KEY and PRINTIFY_SHOP_ID in the environment.",
            file=sys.stderr,
        )
        return 1
    except StorefrontError as exc:
        logger.error("Fetching products failed", error_type=type(exc).__name__, error_details=str(exc))
        print(f"Failed to fetch products: {exc}", file=sys.stderr)
        return 1
    finally:
        await container.aclose()

    print(f"\nSuccessfully fetched {len(products)} products from Printify\n")
    print(format_summary(summarize_products(products)))
    return 0


def main() -> None:
    settings = Settings()
    configure_logging(settings.log_level)
    sys.exit(asyncio.run(run(settings)))


if __name__ == "__main__":
    main()
