import pytest

LINK = {
    "id": "725104409743",
    "name": "Curso de Python",
    "value": 199.9,
    "active": True,
    "chargeType": "DETACHED",
    "url": "https://www.asaas.com/c/725104409743",
    "billingType": "UNDEFINED",
    "deleted": False,
}


def test_create(client, fake):
    fake.add(200, LINK)
    link = client.payment_links.create(name="Curso de Python", billing_type="UNDEFINED",
                                       charge_type="DETACHED", value=199.9, due_date_limit_days=5)
    assert link.url.endswith("725104409743")
    assert fake.last.url.path == "/api/v3/paymentLinks"
    assert fake.last_json() == {
        "name": "Curso de Python",
        "billingType": "UNDEFINED",
        "chargeType": "DETACHED",
        "value": 199.9,
        "dueDateLimitDays": 5,
    }


def test_create_installment_link_requires_max(client, fake):
    with pytest.raises(ValueError, match="max_installment_count"):
        client.payment_links.create(name="x", billing_type="CREDIT_CARD", charge_type="INSTALLMENT")


def test_update_uses_put(client, fake):
    fake.add(200, {**LINK, "active": False})
    assert client.payment_links.update("725104409743", active=False).active is False
    assert fake.last.method == "PUT"
    assert fake.last_json() == {"active": False}


def test_list_delete_restore(client, fake):
    fake.add(200, {"object": "list", "hasMore": False, "totalCount": 1, "limit": 10, "offset": 0, "data": [LINK]})
    fake.add(200, {"deleted": True, "id": LINK["id"]})
    fake.add(200, LINK)
    assert client.payment_links.list(active=True).data[0].name == "Curso de Python"
    assert fake.last.url.params["active"] == "true"
    assert client.payment_links.delete(LINK["id"]).deleted
    client.payment_links.restore(LINK["id"])
    assert fake.last.url.path == "/api/v3/paymentLinks/725104409743/restore"
