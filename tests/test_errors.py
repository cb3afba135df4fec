from asaas import (
    AsaasAPIError,
    AsaasHTTPError,
    AsaasSDKError,
    AsaasTransportError,
    is_failure,
)

BUSINESS_ERROR = {
    "errors": [
        {"code": "invalid_customer", "description": "Cliente inexistente."},
        {"code": "invalid_value", "description": "Valor deve ser maior que zero."},
    ]
}


def test_http_error_message_includes_context():
    e = AsaasHTTPError(404, {"message": "not found"}, "req-1", method="GET", url="https://x/v3/payments/pay_1")
    assert str(e) == "HTTP 404 GET https://x/v3/payments/pay_1 req_id=req-1: not found"
    assert e.code is None
    assert e.retryable is False
    assert isinstance(e, AsaasSDKError)


def test_http_error_retryable_statuses():
    assert AsaasHTTPError(429, {}).retryable
    assert AsaasHTTPError(503, {}).retryable
    assert not AsaasHTTPError(400, {}).retryable


def test_message_text_fallbacks():
    assert AsaasHTTPError(500, "  upstream down ").message_text == "upstream down"
    assert AsaasHTTPError(500, {"detail": "boom"}).message_text == "boom"
    assert AsaasHTTPError(500, None).message_text == "error"
    long_payload = {"blob": "x" * 500}
    assert len(AsaasHTTPError(500, long_payload).message_text) == 240


def test_api_error_exposes_items():
    e = AsaasAPIError(400, BUSINESS_ERROR, method="POST", url="/payments")
    assert isinstance(e, AsaasHTTPError)
    assert e.code == "invalid_customer"
    assert e.codes == ["invalid_customer", "invalid_value"]
    assert e.has_code("invalid_value")
    assert not e.has_code("other")
    assert e.message_text == "Cliente inexistente.; Valor deve ser maior que zero."
    assert e.errors[1].description == "Valor deve ser maior que zero."
    assert "code=invalid_customer" in str(e)


def test_api_error_to_dict():
    d = AsaasAPIError(400, BUSINESS_ERROR, "abc").to_dict()
    assert d["status"] == 400
    assert d["request_id"] == "abc"
    assert d["code"] == "invalid_customer"
    assert d["retryable"] is False
    assert d["errors"][0] == {"code": "invalid_customer", "description": "Cliente inexistente."}


def test_transport_error():
    e = AsaasTransportError("connection refused", method="GET", url="/customers")
    assert e.status == -1
    assert e.retryable
    assert e.method == "GET"
    assert str(e) == "connection refused"


def test_is_failure():
    assert is_failure(BUSINESS_ERROR)
    assert not is_failure({"errors": []})
    assert not is_failure({"id": "pay_1"})
    assert not is_failure([{"errors": [1]}])
    assert not is_failure(None)
