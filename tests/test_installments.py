import pytest

INSTALLMENT = {
    "object": "installment",
    "id": "ins_000005219613",
    "value": 300.0,
    "netValue": 290.1,
    "paymentValue": 100.0,
    "installmentCount": 3,
    "billingType": "CREDIT_CARD",
    "customer": "cus_1",
    "dateCreated": "2024-06-12",
    "deleted": False,
}


def test_get_and_list(client, fake):
    fake.add(200, INSTALLMENT)
    fake.add(200, {"object": "list", "hasMore": False, "totalCount": 1, "limit": 5, "offset": 0,
                   "data": [INSTALLMENT]})
    ins = client.installments.get("ins_000005219613")
    assert ins.installment_count == 3
    page = client.installments.list(limit=5)
    assert page.data[0].id == "ins_000005219613"
    assert fake.last.url.path == "/api/v3/installments"


def test_list_payments_filters_charges(client, fake):
    fake.add(200, {"object": "list", "hasMore": False, "totalCount": 1, "limit": 10, "offset": 0,
                   "data": [{"id": "pay_1", "installment": "ins_1", "installmentNumber": 1}]})
    page = client.installments.list_payments("ins_1")
    assert page.data[0].installment_number == 1
    assert fake.last.url.path == "/api/v3/payments"
    assert fake.last.url.params["installment"] == "ins_1"


def test_list_payments_requires_id(client):
    with pytest.raises(ValueError):
        client.installments.list_payments("")


def test_delete_and_refund(client, fake):
    fake.add(200, {"deleted": True, "id": "ins_1"}).add(200, {**INSTALLMENT, "id": "ins_1"})
    assert client.installments.delete("ins_1").deleted
    assert fake.last.method == "DELETE"
    assert client.installments.refund("ins_1").id == "ins_1"
    assert fake.last.url.path == "/api/v3/installments/ins_1/refund"
