import pytest

from printify_storefront.infrastructure.configuration.gateway_config import GatewayConfig
from printify_storefront.infrastructure.configuration.main_settings import Settings
from printify_storefront.infrastructure.configuration.printify_settings import PrintifySettings
from printify_storefront.infrastructure.drivers.printify.printify_gateway import PrintifyGateway
from printify_storefront.infrastructure.drivers.printify.printify_http_client import (
    PrintifyHttpClient,
)
from printify_storefront.infrastructure.drivers.printify.rate_limiter import (
    SlidingWindowRateLimiter,
)

from tests.support import API_KEY, BASE_URL, SHOP_ID, FakeClock


@pytest.fixture(autouse=True)
def _isolate_env(monkeypatch):
    for name in (
        "PRINTIFY_API_KEY",
        "VITE_PRINTIFY_API_KEY",
        "PRINTIFY_SHOP_ID",
        "VITE_PRINTIFY_SHOP_ID",
        "PRINTIFY_RATE_LIMIT_MAX_REQUESTS",
        "APP_ENV",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def printify_settings():
    return PrintifySettings(
        api_key=API_KEY,
        shop_id=SHOP_ID,
        base_url=BASE_URL,
        rate_limit_max_requests=30,
    )


@pytest.fixture
def settings(printify_settings):
    return Settings(app_name="TestStorefront", printify=printify_settings)


@pytest.fixture
def gateway_config():
    return GatewayConfig(api_key=API_KEY, shop_id=SHOP_ID, base_url=BASE_URL)


@pytest.fixture
def rate_limiter(clock):
    return SlidingWindowRateLimiter(max_requests=30, window_seconds=60.0, clock=clock)


@pytest.fixture
def http_client(gateway_config, rate_limiter):
    return PrintifyHttpClient(gateway_config, rate_limiter)


@pytest.fixture
def gateway(http_client):
    return PrintifyGateway(http_client)
