import json

import pytest

from asaas import AsaasWebhookError, WebhookEventTypes, WebhookRouter, parse_event, verify_and_parse, verify_token
from asaas.models import Charge

TOKEN = "whk_7f3c1a9e5b"

EVENT = {
    "id": "evt_05b708f961d739ea7eba7e4db318f621&368604920",
    "event": "PAYMENT_RECEIVED",
    "dateCreated": "2024-06-12 16:45:03",
    "payment": {
        "object": "payment",
        "id": "pay_080225913252",
        "customer": "cus_000005219613",
        "value": 150.5,
        "billingType": "PIX",
        "status": "RECEIVED",
        "dueDate": "2024-06-15",
        "paymentDate": "2024-06-12",
    },
}


def _body(payload=EVENT):
    return json.dumps(payload).encode("utf-8")


class TestVerifyToken:
    def test_ok_case_insensitive_header(self):
        info = verify_token(headers={"Asaas-Access-Token": TOKEN}, expected=TOKEN)
        assert info["ok"] is True

    def test_mismatch(self):
        with pytest.raises(AsaasWebhookError, match="mismatch"):
            verify_token(headers={"asaas-access-token": "nope"}, expected=TOKEN)

    def test_missing_header(self):
        with pytest.raises(AsaasWebhookError, match="not found"):
            verify_token(headers={}, expected=TOKEN)

    def test_token_not_configured(self):
        with pytest.raises(AsaasWebhookError, match="not configured"):
            verify_token(headers={"asaas-access-token": TOKEN}, expected=None)

    def test_skip_verification(self):
        assert verify_token(headers={}, expected=None, skip_verification=True) == {"skipped": True}


class TestParseEvent:
    def test_parses_payment_event(self):
        ev = parse_event(body=_body(), headers={"asaas-access-token": TOKEN}, token=TOKEN)
        assert ev.event == WebhookEventTypes.PAYMENT_RECEIVED
        assert ev.family == "PAYMENT"
        assert isinstance(ev.payment, Charge)
        assert ev.payment.is_paid
        assert ev.resource is ev.payment

    def test_accepts_str_and_dict_bodies(self):
        assert parse_event(body=json.dumps(EVENT), skip_verification=True).id == EVENT["id"]
        assert parse_event(body=dict(EVENT), skip_verification=True).id == EVENT["id"]

    def test_rejects_bad_token_before_parsing(self):
        with pytest.raises(AsaasWebhookError, match="mismatch"):
            parse_event(body=b"not json", headers={"asaas-access-token": "x"}, token=TOKEN)

    def test_invalid_json(self):
        with pytest.raises(AsaasWebhookError, match="invalid JSON"):
            parse_event(body=b"{not json", skip_verification=True)

    def test_non_object_json(self):
        with pytest.raises(AsaasWebhookError, match="JSON object"):
            parse_event(body=b"[1, 2]", skip_verification=True)

    def test_missing_event(self):
        with pytest.raises(AsaasWebhookError, match="missing 'event'"):
            parse_event(body=_body({"id": "evt_1"}), skip_verification=True)

    def test_invalid_resource_shape(self):
        with pytest.raises(AsaasWebhookError, match="failed to parse"):
            parse_event(body=_body({"event": "PAYMENT_CREATED", "payment": {"value": 1}}), skip_verification=True)

    def test_other_families_keep_dicts(self):
        ev = parse_event(body=_body({"event": "INVOICE_CREATED", "invoice": {"id": "inv_1"}}),
                         skip_verification=True)
        assert ev.family == "INVOICE"
        assert ev.resource == {"id": "inv_1"}

    def test_verify_and_parse(self):
        info, ev = verify_and_parse(body=_body(), headers={"asaas-access-token": TOKEN}, token=TOKEN)
        assert info["ok"]
        assert ev.payment.id == "pay_080225913252"


class TestRouter:
    def _event(self, name="PAYMENT_RECEIVED", event_id="evt_1"):
        return parse_event(body=_body({**EVENT, "event": name, "id": event_id}), skip_verification=True)

    def test_dispatch_order_exact_family_wildcard(self):
        router = WebhookRouter()
        calls = []
        router.add("*", lambda e: calls.append("any") or "any")

        @router.on("payment_*")
        def family(e):
            calls.append("family")
            return "family"

        @router.on(WebhookEventTypes.PAYMENT_RECEIVED)
        def exact(e):
            calls.append("exact")
            return "exact"

        assert router.dispatch(self._event()) == ["exact", "family", "any"]
        assert calls == ["exact", "family", "any"]

    def test_multi_segment_prefix(self):
        router = WebhookRouter()
        router.add("PAYMENT_*", lambda e: "payment")
        router.add("PAYMENT_CHARGEBACK_*", lambda e: "chargeback")
        event = self._event(WebhookEventTypes.PAYMENT_CHARGEBACK_REQUESTED)
        assert router.dispatch(event) == ["chargeback", "payment"]
        assert router.dispatch(self._event("PAYMENT_RECEIVED", event_id="evt_2")) == ["payment"]

    def test_unrelated_handlers_are_skipped(self):
        router = WebhookRouter()
        router.add("SUBSCRIPTION_*", lambda e: "sub")
        router.add("PAYMENT_OVERDUE", lambda e: "overdue")
        assert router.dispatch(self._event("PAYMENT_RECEIVED")) == []

    def test_handler_errors_are_collected(self):
        router = WebhookRouter()

        @router.on("PAYMENT_RECEIVED")
        def broken(e):
            raise RuntimeError("db down")

        router.add("PAYMENT_RECEIVED", lambda e: "ok")
        results = router.dispatch(self._event())
        assert isinstance(results[0], RuntimeError)
        assert results[1] == "ok"

    def test_dedupe(self):
        router = WebhookRouter(dedupe_size=2)
        router.add("*", lambda e: e.id)
        assert router.dispatch(self._event(event_id="a")) == ["a"]
        assert router.dispatch(self._event(event_id="a")) == []
        router.dispatch(self._event(event_id="b"))
        router.dispatch(self._event(event_id="c"))
        # "a" fell out of the window
        assert router.dispatch(self._event(event_id="a")) == ["a"]

    def test_no_dedupe_by_default(self):
        router = WebhookRouter()
        router.add("*", lambda e: e.id)
        assert router.dispatch(self._event(event_id="a")) == ["a"]
        assert router.dispatch(self._event(event_id="a")) == ["a"]

    def test_on_requires_event_type(self):
        with pytest.raises(ValueError):
            WebhookRouter().on("")


def test_all_events_lists_constants():
    events = WebhookEventTypes.all_events()
    assert "PAYMENT_RECEIVED" in events
    assert "TRANSFER_DONE" in events
    assert all(e.isupper() for e in events)
