import asyncio
import json

import pytest

from asaas import WebhookEventTypes, WebhookRouter
from asaas.frameworks import get_framework_integration

TOKEN = "whk_7f3c1a9e5b"

EVENT = {
    "id": "evt_1",
    "event": "PAYMENT_CONFIRMED",
    "dateCreated": "2024-06-12 16:45:03",
    "payment": {"id": "pay_1", "status": "CONFIRMED", "value": 99.75},
}


@pytest.fixture
def router():
    r = WebhookRouter()
    r.received = []

    @r.on(WebhookEventTypes.PAYMENT_CONFIRMED)
    def confirmed(event):
        r.received.append(event.payment.id)

    @r.on("PAYMENT_*")
    def broken(event):
        raise RuntimeError("handler failure must not turn into a 500")

    return r


def test_unknown_framework():
    assert get_framework_integration("bottle") is None


class TestFlask:
    @pytest.fixture
    def app(self, router):
        flask = pytest.importorskip("flask")
        from asaas.frameworks.flask import create_webhook_blueprint

        app = flask.Flask(__name__)
        app.register_blueprint(create_webhook_blueprint(router, token=TOKEN))
        return app

    def test_loader(self):
        pytest.importorskip("flask")
        assert get_framework_integration("flask").create_webhook_blueprint

    def test_accepts_authentic_delivery(self, app, router):
        resp = app.test_client().post(
            "/webhooks/asaas/",
            data=json.dumps(EVENT),
            headers={"asaas-access-token": TOKEN, "Content-Type": "application/json"},
        )
        assert resp.status_code == 200
        assert resp.get_json() == {"received": True}
        assert router.received == ["pay_1"]

    def test_rejects_bad_token(self, app, router):
        resp = app.test_client().post("/webhooks/asaas/", data=json.dumps(EVENT),
                                      headers={"asaas-access-token": "wrong"})
        assert resp.status_code == 401
        assert router.received == []

    def test_rejects_bad_body(self, app):
        resp = app.test_client().post("/webhooks/asaas/", data="{oops",
                                      headers={"asaas-access-token": TOKEN})
        assert resp.status_code == 400
        assert resp.get_json()["received"] is False

    def test_token_from_environment(self, router, monkeypatch):
        flask = pytest.importorskip("flask")
        from asaas.frameworks.flask import create_webhook_blueprint

        monkeypatch.setenv("ASAAS_WEBHOOK_TOKEN", "env-token")
        app = flask.Flask(__name__)
        app.register_blueprint(create_webhook_blueprint(router, url_prefix="/hooks"))
        resp = app.test_client().post("/hooks/", data=json.dumps(EVENT),
                                      headers={"asaas-access-token": "env-token"})
        assert resp.status_code == 200

    def test_two_receivers_on_one_app(self, router):
        flask = pytest.importorskip("flask")
        from asaas.frameworks.flask import create_webhook_blueprint

        other = WebhookRouter()
        other.received = []
        other.add("*", lambda e: other.received.append(e.id))

        app = flask.Flask(__name__)
        app.register_blueprint(create_webhook_blueprint(router, token=TOKEN))
        app.register_blueprint(create_webhook_blueprint(other, token="second-token",
                                                        url_prefix="/webhooks/asaas-sub", name="asaas_sub"))
        resp = app.test_client().post("/webhooks/asaas-sub/", data=json.dumps(EVENT),
                                      headers={"asaas-access-token": "second-token"})
        assert resp.status_code == 200
        assert other.received == ["evt_1"]
        assert router.received == []


class TestFastAPI:
    @pytest.fixture
    def http(self, router):
        fastapi = pytest.importorskip("fastapi")
        from fastapi.testclient import TestClient

        from asaas.frameworks.fastapi import create_webhook_router

        app = fastapi.FastAPI()
        app.include_router(create_webhook_router(router, token=TOKEN))
        return TestClient(app)

    def test_accepts_authentic_delivery(self, http, router):
        resp = http.post("/webhooks/asaas", content=json.dumps(EVENT), headers={"asaas-access-token": TOKEN})
        assert resp.status_code == 200
        assert resp.json() == {"received": True}
        assert router.received == ["pay_1"]

    def test_rejects_bad_token(self, http, router):
        resp = http.post("/webhooks/asaas", content=json.dumps(EVENT), headers={"asaas-access-token": "wrong"})
        assert resp.status_code == 401
        assert router.received == []

    def test_rejects_missing_event(self, http):
        resp = http.post("/webhooks/asaas", content=json.dumps({"id": "evt_1"}),
                         headers={"asaas-access-token": TOKEN})
        assert resp.status_code == 400

    def test_handlers_run_off_the_event_loop(self, http, router):
        seen = []

        @router.on("*")
        def blocking(event):
            try:
                asyncio.get_running_loop()
                seen.append("loop")
            except RuntimeError:
                seen.append("thread")

        resp = http.post("/webhooks/asaas", content=json.dumps(EVENT), headers={"asaas-access-token": TOKEN})
        assert resp.status_code == 200
        assert seen == ["thread"]
