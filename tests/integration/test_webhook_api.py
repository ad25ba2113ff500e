def test_webhook_acknowledges_events(client):
    response = client.post(
        "/api/webhooks/printify",
        json={"type": "order:created", "resource": {"id": "o1"}},
    )

    assert response.status_code == 200
    assert response.text == "OK"


def test_webhook_rejects_malformed_json(client):
    response = client.post(
        "/api/webhooks/printify",
        content=b"{not json",
        headers={"Content-Type": "application/json"},
    )

    assert response.status_code == 400
    assert response.text == "Bad Request"
