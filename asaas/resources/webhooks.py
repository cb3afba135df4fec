from __future__ import annotations
from typing import Any, Iterator, Mapping, Optional, Union

from ..client import AsaasClient
from ..debug import dprint, djson
from ..models import (
    DeletedResponse,
    Page,
    Webhook,
    WebhookCreate,
    WebhookListParams,
    WebhookUpdate,
)
from ..pagination import DEFAULT_PAGE_SIZE, iterate_items
from ._helpers import as_params, as_payload, fetch_page, id_path

_BASE = "/webhooks"


class WebhooksAPI:
    """
    Webhook configuration API (where Asaas should POST events).

    Receiving and authenticating deliveries is handled by `asaas.webhook`.
    """

    def __init__(self, client: AsaasClient):
        self.client = client

    def create(self, body: Union[WebhookCreate, Mapping[str, Any], None] = None, **fields: Any) -> Webhook:
        payload = as_payload(WebhookCreate, body, fields)
        djson("webhooks.create body", payload)
        return self.client.request_model("POST", _BASE, Webhook, json=payload)

    def get(self, webhook_id: str) -> Webhook:
        dprint("webhooks.get()", {"webhook_id": webhook_id})
        return self.client.request_model("GET", id_path(_BASE, "webhook_id", webhook_id), Webhook)

    def list(self, **paging: Any) -> Page[Webhook]:
        params = as_params(WebhookListParams, paging)
        return fetch_page(self.client, _BASE, Webhook, params)

    def iter_all(self, *, page_size: int = DEFAULT_PAGE_SIZE, max_pages: Optional[int] = None) -> Iterator[Webhook]:
        params = as_params(WebhookListParams, {"limit": page_size})
        return iterate_items(lambda p: fetch_page(self.client, _BASE, Webhook, p), params, max_pages=max_pages)

    def update(
        self,
        webhook_id: str,
        body: Union[WebhookUpdate, Mapping[str, Any], None] = None,
        **fields: Any,
    ) -> Webhook:
        path = id_path(_BASE, "webhook_id", webhook_id)
        payload = as_payload(WebhookUpdate, body, fields)
        dprint("webhooks.update()", {"webhook_id": webhook_id, "fields": sorted(payload)})
        return self.client.request_model("PUT", path, Webhook, json=payload)

    def delete(self, webhook_id: str) -> DeletedResponse:
        dprint("webhooks.delete()", {"webhook_id": webhook_id})
        return self.client.request_model("DELETE", id_path(_BASE, "webhook_id", webhook_id), DeletedResponse)

    def remove_backoff(self, webhook_id: str) -> Webhook:
        """
        Resume a queue Asaas interrupted after repeated delivery failures.
        """
        dprint("webhooks.remove_backoff()", {"webhook_id": webhook_id})
        path = id_path(_BASE, "webhook_id", webhook_id, "removeBackoff")
        return self.client.request_model("POST", path, Webhook)


__all__ = ["WebhooksAPI"]
