import pytest
from fastapi.testclient import TestClient

from printify_storefront.infrastructure.entrypoints.api import create_app


@pytest.fixture
def client(settings):
    with TestClient(create_app(settings)) as test_client:
        yield test_client
