import httpx
import respx
from fastapi.testclient import TestClient

from printify_storefront.infrastructure.configuration import PrintifySettings, Settings
from printify_storefront.infrastructure.entrypoints.api import create_app
from tests.support import BASE_URL, SHOP_ID

PRODUCTS_URL = f"{BASE_URL}/shops/{SHOP_ID}/products.json"


def test_health(client):
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json()["status"] == "ok"
    assert response.json()["service"] == "printify-storefront"


def test_metrics_exposes_storefront_counters(client):
    client.post("/api/cart")

    response = client.get("/metrics")

    assert response.status_code == 200
    assert "storefront_cart_operations_total" in response.text


def test_config_check_reports_presence_only(client):
    response = client.get("/api/printify/config-check")

    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    assert body["config"]["hasApiKey"] is True
    assert "mock_printify_token" not in response.text


def test_config_check_fails_without_secrets():
    with TestClient(create_app(Settings(printify=PrintifySettings()))) as client:
        response = client.get("/api/printify/config-check")

    assert response.status_code == 500
    assert response.json()["config"] == {
        "hasApiKey": False,
        "hasShopId": False,
        "baseUrl": "https://api.printify.com/v1",
    }


@respx.mock
def test_connectivity_check_reports_upstream_answer(client):
    respx.get(PRODUCTS_URL).mock(return_value=httpx.Response(200, json={"data": [{"id": "p1"}]}))

    response = client.get("/api/test/printify")

    assert response.status_code == 200
    assert response.json() == {
        "success": True,
        "status": 200,
        "data": {"data": [{"id": "p1"}]},
        "message": "Successfully connected to Printify API",
    }


@respx.mock
def test_connectivity_check_reports_upstream_failure(client):
    respx.get(PRODUCTS_URL).mock(return_value=httpx.Response(401, json={"message": "Unauthenticated"}))

    response = client.get("/api/test/printify")

    assert response.status_code == 401
    body = response.json()
    assert body["success"] is False
    assert body["status"] == 401
    assert body["error"] == "Unauthenticated"
    assert body["details"] == {"message": "Unauthenticated"}


def test_connectivity_check_reports_missing_configuration():
    with TestClient(create_app(Settings(printify=PrintifySettings()))) as client:
        response = client.get("/api/test/printify")

    assert response.status_code == 500
    assert response.json()["code"] == "MISSING_CONFIGURATION"
