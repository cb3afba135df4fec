import httpx
import pytest

from asaas import (
    AsaasAPIError,
    AsaasClient,
    AsaasConfig,
    AsaasConfigError,
    AsaasDecodeError,
    AsaasHTTPError,
    AsaasTransportError,
    __version__,
)
from asaas.models import Customer


def test_default_headers(client, fake, config):
    client.get("/customers")
    req = fake.last
    assert req.headers["access_token"] == config.access_token
    assert req.headers["User-Agent"] == f"asaas-python/{__version__}"
    assert req.headers["Accept"] == "application/json"
    assert str(req.url) == "https://sandbox.asaas.com/api/v3/customers"


def test_post_sends_json(client, fake):
    client.post("/customers", json={"name": "Maria"})
    assert fake.last.method == "POST"
    assert fake.last.headers["Content-Type"] == "application/json"
    assert fake.last_json() == {"name": "Maria"}


def test_post_without_body_sends_empty_object(client, fake):
    client.post("/payments/pay_1/restore")
    assert fake.last_json() == {}


def test_query_params(client, fake):
    client.get("/payments", params={"customer": "cus_1", "limit": 10})
    assert fake.last.url.params["customer"] == "cus_1"
    assert fake.last.url.params["limit"] == "10"


def test_empty_and_204_bodies_decode_to_empty_dict(client, fake):
    fake.add(204)
    fake.add(200)
    assert client.delete("/webhooks/wh_1") == {}
    assert client.get("/finance/balance") == {}


def test_list_body_is_wrapped(client, fake):
    fake.add(200, [{"id": "a"}, {"id": "b"}])
    assert client.get("/whatever") == {"data": [{"id": "a"}, {"id": "b"}]}


def test_business_error_raises_api_error(client, fake):
    fake.add(400, {"errors": [{"code": "invalid_dueDate", "description": "Data inválida."}]},
             headers={"X-Request-Id": "rq-9"})
    with pytest.raises(AsaasAPIError) as ei:
        client.post("/payments", json={})
    e = ei.value
    assert e.status == 400
    assert e.code == "invalid_dueDate"
    assert e.request_id == "rq-9"
    assert e.method == "POST"
    assert e.url.endswith("/payments")


def test_errors_array_on_2xx_is_still_a_failure(client, fake):
    fake.add(200, {"errors": [{"code": "x", "description": "y"}]})
    with pytest.raises(AsaasAPIError):
        client.get("/payments/pay_1")


def test_non_2xx_without_errors_raises_http_error(client, fake):
    fake.add(404)
    with pytest.raises(AsaasHTTPError) as ei:
        client.get("/payments/pay_missing")
    assert not isinstance(ei.value, AsaasAPIError)
    assert ei.value.status == 404
    assert ei.value.payload == {}


def test_non_json_error_body_is_kept_as_message(client, fake):
    fake.add(502, text="<html>Bad Gateway</html>")
    with pytest.raises(AsaasHTTPError) as ei:
        client.get("/customers")
    assert ei.value.payload == {"message": "<html>Bad Gateway</html>"}
    assert ei.value.message_text == "<html>Bad Gateway</html>"


def test_invalid_json_on_success_raises_decode_error(client, fake):
    fake.add(200, text="not json")
    with pytest.raises(AsaasDecodeError) as ei:
        client.get("/customers")
    assert ei.value.body == "not json"


def test_scalar_json_on_success_raises_decode_error(client, fake):
    fake.add(200, text="42")
    with pytest.raises(AsaasDecodeError):
        client.get("/customers")


def test_request_model_validation_failure(client, fake):
    fake.add(200, {"name": "no id here"})
    with pytest.raises(AsaasDecodeError) as ei:
        client.request_model("GET", "/customers/cus_1", Customer)
    assert ei.value.model == "Customer"
    assert ei.value.body == {"name": "no id here"}


def test_response_meta(client, fake):
    fake.add(200, {}, headers={"X-Request-Id": "rq-1", "RateLimit-Remaining": "24"})
    client.get("/finance/balance")
    assert client.last_response_meta["request_id"] == "rq-1"
    assert client.last_response_meta["RateLimit-Remaining"] == "24"


def test_retries_transient_status_with_backoff(config, fake, no_sleep):
    fake.add(503).add(500).add(200, {"ok": True})
    with AsaasClient(config, retries=2, backoff_factor=0.5, transport=httpx.MockTransport(fake)) as c:
        assert c.get("/finance/balance") == {"ok": True}
    assert len(fake.requests) == 3
    assert no_sleep == [0.5, 1.0]


def test_retry_after_header_wins(config, fake, no_sleep):
    fake.add(429, {}, headers={"Retry-After": "7"}).add(200, {})
    with AsaasClient(config, retries=1, transport=httpx.MockTransport(fake)) as c:
        c.get("/customers")
    assert no_sleep == [7.0]


def test_gives_up_after_retries(config, fake, no_sleep):
    fake.add(503).add(503)
    with AsaasClient(config, retries=1, transport=httpx.MockTransport(fake)) as c:
        with pytest.raises(AsaasHTTPError) as ei:
            c.get("/customers")
    assert ei.value.status == 503
    assert ei.value.retryable


def test_client_errors_are_not_retried(config, fake, no_sleep):
    fake.add(400, {"errors": [{"code": "bad", "description": "bad"}]})
    with AsaasClient(config, retries=3, transport=httpx.MockTransport(fake)) as c:
        with pytest.raises(AsaasAPIError):
            c.post("/customers", json={})
    assert len(fake.requests) == 1
    assert no_sleep == []


def test_transport_error_is_wrapped(client, fake):
    fake.fail(httpx.ConnectError("connection refused"))
    with pytest.raises(AsaasTransportError) as ei:
        client.get("/customers")
    assert ei.value.status == -1
    assert ei.value.method == "GET"
    assert isinstance(ei.value.__cause__, httpx.ConnectError)


def test_transport_error_is_retried(config, fake, no_sleep):
    fake.fail(httpx.ReadTimeout("timed out")).add(200, {"id": "cus_1"})
    with AsaasClient(config, retries=1, backoff_factor=0.1, transport=httpx.MockTransport(fake)) as c:
        assert c.get("/customers/cus_1") == {"id": "cus_1"}
    assert no_sleep == [0.1]


def test_post_is_not_resent_after_read_timeout(config, fake, no_sleep):
    fake.fail(httpx.ReadTimeout("timed out")).add(200, {"id": "tra_1"})
    with AsaasClient(config, retries=2, transport=httpx.MockTransport(fake)) as c:
        with pytest.raises(AsaasTransportError):
            c.transfers.create_pix(value=10, pix_address_key="a@b.com", pix_address_key_type="EMAIL")
    assert len(fake.requests) == 1
    assert no_sleep == []


def test_post_is_not_resent_after_server_error(config, fake, no_sleep):
    fake.add(502).add(200, {"id": "pay_1"})
    with AsaasClient(config, retries=2, transport=httpx.MockTransport(fake)) as c:
        with pytest.raises(AsaasHTTPError) as ei:
            c.post("/payments", json={"value": 10})
    assert ei.value.status == 502
    assert len(fake.requests) == 1


def test_post_retries_connect_error_and_429(config, fake, no_sleep):
    fake.fail(httpx.ConnectError("refused")).add(429, {}, headers={"Retry-After": "2"}).add(200, {"id": "pay_1"})
    with AsaasClient(config, retries=2, backoff_factor=0.5, transport=httpx.MockTransport(fake)) as c:
        assert c.post("/payments", json={"value": 10}) == {"id": "pay_1"}
    assert len(fake.requests) == 3
    assert no_sleep == [0.5, 2.0]


def test_delete_retries_read_timeout(config, fake, no_sleep):
    fake.fail(httpx.ReadTimeout("timed out")).add(200, {"deleted": True, "id": "cus_1"})
    with AsaasClient(config, retries=1, backoff_factor=0.1, transport=httpx.MockTransport(fake)) as c:
        assert c.delete("/customers/cus_1") == {"deleted": True, "id": "cus_1"}
    assert len(fake.requests) == 2


def test_missing_token_fails_fast():
    with pytest.raises(AsaasConfigError):
        AsaasClient(AsaasConfig())


def test_services_are_cached(client):
    assert client.charges is client.charges
    assert client.customers.client is client
    assert client.pix.client is client
