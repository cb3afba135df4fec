from __future__ import annotations
from typing import Any, Iterator, Mapping, Optional, Union

from ..client import AsaasClient
from ..debug import dprint, djson
from ..models import (
    DeletedResponse,
    Page,
    PaymentLink,
    PaymentLinkCreate,
    PaymentLinkListParams,
    PaymentLinkUpdate,
)
from ..pagination import DEFAULT_PAGE_SIZE, iterate_items
from ._helpers import as_params, as_payload, fetch_page, id_path

_BASE = "/paymentLinks"


class PaymentLinksAPI:
    """Shareable checkout links (one-off, installment or recurring)."""

    def __init__(self, client: AsaasClient):
        self.client = client

    def create(self, body: Union[PaymentLinkCreate, Mapping[str, Any], None] = None, **fields: Any) -> PaymentLink:
        payload = as_payload(PaymentLinkCreate, body, fields)
        djson("payment_links.create body", payload)
        return self.client.request_model("POST", _BASE, PaymentLink, json=payload)

    def get(self, link_id: str) -> PaymentLink:
        dprint("payment_links.get()", {"link_id": link_id})
        return self.client.request_model("GET", id_path(_BASE, "link_id", link_id), PaymentLink)

    def list(self, **filters: Any) -> Page[PaymentLink]:
        params = as_params(PaymentLinkListParams, filters)
        return fetch_page(self.client, _BASE, PaymentLink, params)

    def iter_all(
        self,
        *,
        page_size: int = DEFAULT_PAGE_SIZE,
        max_pages: Optional[int] = None,
        **filters: Any,
    ) -> Iterator[PaymentLink]:
        params = as_params(PaymentLinkListParams, {**filters, "limit": page_size})
        return iterate_items(lambda p: fetch_page(self.client, _BASE, PaymentLink, p), params, max_pages=max_pages)

    def update(
        self,
        link_id: str,
        body: Union[PaymentLinkUpdate, Mapping[str, Any], None] = None,
        **fields: Any,
    ) -> PaymentLink:
        path = id_path(_BASE, "link_id", link_id)
        payload = as_payload(PaymentLinkUpdate, body, fields)
        dprint("payment_links.update()", {"link_id": link_id, "fields": sorted(payload)})
        return self.client.request_model("PUT", path, PaymentLink, json=payload)

    def delete(self, link_id: str) -> DeletedResponse:
        return self.client.request_model("DELETE", id_path(_BASE, "link_id", link_id), DeletedResponse)

    def restore(self, link_id: str) -> PaymentLink:
        return self.client.request_model("POST", id_path(_BASE, "link_id", link_id, "restore"), PaymentLink)


__all__ = ["PaymentLinksAPI"]
