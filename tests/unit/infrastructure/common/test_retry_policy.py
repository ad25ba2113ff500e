import pytest

from printify_storefront.core.exceptions import (
    MissingConfigurationError,
    RateLimitExceededError,
    TransportError,
    UpstreamApiError,
)
from printify_storefront.infrastructure.common import RetryPolicy

FAST = RetryPolicy(max_attempts=3, initial_wait=0.0, max_wait=0.0)


class Flaky:
    def __init__(self, failures):
        self.failures = list(failures)
        self.calls = 0

    async def __call__(self):
        self.calls += 1
        if self.failures:
            raise self.failures.pop(0)
        return "ok"


@pytest.mark.asyncio
async def test_retries_transport_errors_until_success():
    fn = Flaky([TransportError("reset"), TransportError("reset")])

    assert await FAST.run(fn) == "ok"
    assert fn.calls == 3


@pytest.mark.asyncio
async def test_gives_up_after_max_attempts():
    fn = Flaky([UpstreamApiError(503)] * 5)

    with pytest.raises(UpstreamApiError):
        await FAST.run(fn)
    assert fn.calls == 3


@pytest.mark.asyncio
@pytest.mark.parametrize("error", [UpstreamApiError(404), MissingConfigurationError(["PRINTIFY_API_KEY"])])
async def test_does_not_retry_permanent_errors(error):
    fn = Flaky([error])

    with pytest.raises(type(error)):
        await FAST.run(fn)
    assert fn.calls == 1


@pytest.mark.asyncio
async def test_rate_limit_waits_for_the_reported_window():
    fn = Flaky([RateLimitExceededError("shop", 0.0)])

    assert await FAST.run(fn) == "ok"
    assert fn.calls == 2
