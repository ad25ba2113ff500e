BASE_URL = "https://api.printify.test/v1"
SHOP_ID = "shop-42"
API_KEY = "mock_printify_token"


class FakeClock:
    """Monotonic clock the tests move by hand."""

    def __init__(self, start: float = 1000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds
