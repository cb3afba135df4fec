import json
import os

import httpx
import pytest

from asaas import AsaasClient, AsaasConfig, debug

SANDBOX_TOKEN = "$aact_hmlg_000MzkwODA2MWY2OGM3MWRlMDU2NWM3MzJlNzZmNGZhZGY6OjAwMDAwMDAwMDAwMDAwNjY1NzQ6OiRhYWNoXzk5"
PROD_TOKEN = "$aact_prod_000MzkwODA2MWY2OGM3MWRlMDU2NWM3MzJlNzZmNGZhZGY6OjAwMDAwMDAwMDAwMDAwNjY1NzQ6OiRhYWNoXzEx"


class FakeAsaas:
    """
    Scripted handler for httpx.MockTransport.

    Queue responses with `add(...)` (or exceptions with `fail(...)`); every
    request received is kept in `requests`. An empty queue answers 200 {}.
    """

    def __init__(self):
        self.requests = []
        self._queue = []

    def add(self, status=200, json_body=None, *, text=None, headers=None):
        if text is not None:
            resp = httpx.Response(status, text=text, headers=headers)
        elif json_body is not None:
            resp = httpx.Response(status, json=json_body, headers=headers)
        else:
            resp = httpx.Response(status, headers=headers)
        self._queue.append(resp)
        return self

    def fail(self, exc):
        self._queue.append(exc)
        return self

    def __call__(self, request):
        self.requests.append(request)
        item = self._queue.pop(0) if self._queue else httpx.Response(200, json={})
        if isinstance(item, Exception):
            raise item
        return item

    @property
    def last(self):
        return self.requests[-1]

    def last_json(self):
        return json.loads(self.last.content)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    monkeypatch.setattr(debug, "_DEBUG_ENABLED", False)
    for key in list(os.environ):
        if key.startswith("ASAAS_"):
            monkeypatch.delenv(key, raising=False)


@pytest.fixture
def config():
    return AsaasConfig(access_token=SANDBOX_TOKEN, environment="sandbox")


@pytest.fixture
def fake():
    return FakeAsaas()


@pytest.fixture
def client(config, fake):
    c = AsaasClient(config, transport=httpx.MockTransport(fake))
    yield c
    c.close()


@pytest.fixture
def no_sleep(monkeypatch):
    """Record retry/poll sleeps instead of waiting."""
    slept = []
    monkeypatch.setattr("time.sleep", slept.append)
    return slept
