import pytest

WEBHOOK = {
    "object": "webhook",
    "id": "wh_1",
    "name": "Pedidos",
    "url": "https://shop.example.com/webhooks/asaas",
    "email": "dev@example.com",
    "enabled": True,
    "interrupted": False,
    "apiVersion": 3,
    "hasAuthToken": True,
    "sendType": "SEQUENTIALLY",
    "events": ["PAYMENT_RECEIVED", "PAYMENT_OVERDUE"],
}


def test_create(client, fake):
    fake.add(200, WEBHOOK)
    wh = client.webhooks.create(name="Pedidos", url="https://shop.example.com/webhooks/asaas",
                                events=["payment_received", "PAYMENT_OVERDUE"], auth_token="s3cret",
                                send_type="SEQUENTIALLY", enabled=True)
    assert wh.has_auth_token
    assert fake.last.url.path == "/api/v3/webhooks"
    assert fake.last_json() == {
        "name": "Pedidos",
        "url": "https://shop.example.com/webhooks/asaas",
        "events": ["PAYMENT_RECEIVED", "PAYMENT_OVERDUE"],
        "authToken": "s3cret",
        "sendType": "SEQUENTIALLY",
        "enabled": True,
    }


def test_create_validates_url(client, fake):
    with pytest.raises(ValueError):
        client.webhooks.create(name="x", url="shop.example.com", events=["PAYMENT_RECEIVED"])
    assert fake.requests == []


def test_update_uses_put(client, fake):
    fake.add(200, {**WEBHOOK, "enabled": False})
    wh = client.webhooks.update("wh_1", enabled=False)
    assert wh.enabled is False
    assert fake.last.method == "PUT"
    assert fake.last_json() == {"enabled": False}


def test_get_list_delete_remove_backoff(client, fake):
    fake.add(200, WEBHOOK)
    fake.add(200, {"object": "list", "hasMore": False, "totalCount": 1, "limit": 10, "offset": 0, "data": [WEBHOOK]})
    fake.add(200, {"deleted": True, "id": "wh_1"})
    fake.add(200, {**WEBHOOK, "interrupted": False})
    assert client.webhooks.get("wh_1").events == ["PAYMENT_RECEIVED", "PAYMENT_OVERDUE"]
    assert client.webhooks.list().data[0].id == "wh_1"
    assert client.webhooks.delete("wh_1").deleted
    client.webhooks.remove_backoff("wh_1")
    assert fake.last.method == "POST"
    assert fake.last.url.path == "/api/v3/webhooks/wh_1/removeBackoff"
