def test_create_cart_returns_201(client):
    response = client.post("/api/cart")

    assert response.status_code == 201
    body = response.json()
    assert body["id"].startswith("cart_")
    assert body["items"] == []
    assert body["createdAt"].endswith("Z")


def test_get_on_collection_also_creates_a_cart(client):
    assert client.get("/api/cart").status_code == 201


def test_add_items_merge_by_variant(client):
    cart_id = client.post("/api/cart").json()["id"]

    client.post(f"/api/cart/{cart_id}", json={"variantId": "v1", "quantity": 2})
    response = client.post(f"/api/cart/{cart_id}", json={"variantId": "v1", "quantity": 3})

    assert response.status_code == 200
    items = response.json()["items"]
    assert [(item["variantId"], item["quantity"]) for item in items] == [("v1", 5)]
    assert client.get(f"/api/cart/{cart_id}").json()["items"] == items


def test_quantity_defaults_to_one(client):
    cart_id = client.post("/api/cart").json()["id"]

    response = client.post(f"/api/cart/{cart_id}", json={"variantId": 12})

    assert response.json()["items"][0] == {
        "variantId": 12,
        "quantity": 1,
        "addedAt": response.json()["items"][0]["addedAt"],
    }


def test_replace_lines(client):
    cart_id = client.post("/api/cart").json()["id"]
    client.post(f"/api/cart/{cart_id}", json={"variantId": 1})

    response = client.put(f"/api/cart/{cart_id}", json={"lines": [{"variantId": 2, "quantity": 3}]})

    assert response.status_code == 200
    assert [(i["variantId"], i["quantity"]) for i in response.json()["items"]] == [(2, 3)]

    emptied = client.put(f"/api/cart/{cart_id}", json={"lines": []})
    assert emptied.json()["items"] == []


def test_delete_cart(client):
    cart_id = client.post("/api/cart").json()["id"]

    response = client.delete(f"/api/cart/{cart_id}")

    assert response.status_code == 200
    assert response.json() == {"success": True}
    assert client.get(f"/api/cart/{cart_id}").status_code == 404


def test_unknown_cart_is_404(client):
    response = client.get("/api/cart/cart_missing")

    assert response.status_code == 404
    assert response.json() == {"error": "Cart not found: cart_missing", "code": "NOT_FOUND"}


def test_invalid_quantity_is_422(client):
    cart_id = client.post("/api/cart").json()["id"]

    response = client.post(f"/api/cart/{cart_id}", json={"variantId": 1, "quantity": 0})

    assert response.status_code == 422
    assert client.get(f"/api/cart/{cart_id}").json()["items"] == []


def test_correlation_id_is_echoed(client):
    response = client.post("/api/cart", headers={"X-Correlation-Id": "corr-1"})

    assert response.headers["x-correlation-id"] == "corr-1"
