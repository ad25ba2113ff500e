import pytest

from printify_storefront.infrastructure.observability.redaction_service import (
    REDACTED,
    is_sensitive_key,
    redact_dict,
    redact_text,
)


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("Authorization: Bearer abc.def", f"Authorization: Bearer {REDACTED}"),
        ("authorization=bearer abc.def", f"authorization=bearer {REDACTED}"),
        ("Authorization: Basic dXNlcjpwYXNz", f"Authorization: Basic {REDACTED}"),
        ("Authorization: abc.def", f"Authorization: {REDACTED}"),
        ("X-Pfy-Signature: sha256=9f86d0", f"X-Pfy-Signature: {REDACTED}"),
        ("GET /v1/shops.json?token=abc&page=2", f"GET /v1/shops.json?token={REDACTED}&page=2"),
        ("order:created for shop 42", "order:created for shop 42"),
        ("", ""),
    ],
)
def test_redact_text(raw, expected):
    assert redact_text(raw) == expected


def test_redacting_twice_is_stable():
    once = redact_text("Authorization: Bearer abc.def")

    assert redact_text(once) == once


def test_sensitive_keys_ignore_case_and_separators():
    assert is_sensitive_key("X-Pfy-Signature")
    assert is_sensitive_key("ACCESS-TOKEN")
    assert not is_sensitive_key("shop_id")


def test_redact_dict_masks_printify_webhook_delivery():
    delivery = {
        "headers": {"Authorization": "Bearer abc", "X-Pfy-Signature": "sha256=1", "Content-Type": "application/json"},
        "body": {
            "id": "653b6be8-2ff7-4ab5-a7a6-6889a8b3bbf5",
            "type": "order:created",
            "resource": {"id": "5a96f649b2439217d070f507", "data": {"shop_id": 815256, "api_key": "k"}},
            "notes": ["see https://example.test/hook?access_token=xyz"],
        },
    }

    redacted = redact_dict(delivery)

    assert redacted["headers"] == {
        "Authorization": REDACTED,
        "X-Pfy-Signature": REDACTED,
        "Content-Type": "application/json",
    }
    assert redacted["body"]["type"] == "order:created"
    assert redacted["body"]["resource"]["data"] == {"shop_id": 815256, "api_key": REDACTED}
    assert redacted["body"]["notes"] == [f"see https://example.test/hook?access_token={REDACTED}"]
    assert delivery["headers"]["Authorization"] == "Bearer abc"
