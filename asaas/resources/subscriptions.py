from __future__ import annotations
from datetime import date
from typing import Any, Iterator, Mapping, Optional, Union

from ..client import AsaasClient
from ..debug import dprint, djson
from ..models import (
    BillingType,
    Charge,
    ChargeListParams,
    DeletedResponse,
    Page,
    Subscription,
    SubscriptionCreate,
    SubscriptionListParams,
    SubscriptionUpdate,
)
from ..pagination import DEFAULT_PAGE_SIZE, iterate_items
from ._helpers import as_params, as_payload, fetch_page, id_path

_BASE = "/subscriptions"

Body = Union[Mapping[str, Any], None]


class SubscriptionsAPI:
    """
    Subscriptions API.

    A subscription generates one charge per `cycle`, starting at
    `next_due_date`. The generated charges are regular charges: list them
    with `list_payments(...)` and manage them through `ChargesAPI`.
    """

    def __init__(self, client: AsaasClient):
        self.client = client

    # ------------------------ create ------------------------

    def create(self, body: Union[SubscriptionCreate, Body] = None, **fields: Any) -> Subscription:
        payload = as_payload(SubscriptionCreate, body, fields)
        dprint("subscriptions.create()", {
            "customer": payload.get("customer"),
            "cycle": payload.get("cycle"),
            "value": payload.get("value"),
            "next_due_date": payload.get("nextDueDate"),
        })
        djson("subscriptions.create body", payload)
        return self.client.request_model("POST", _BASE, Subscription, json=payload)

    def create_with_credit_card(
        self,
        *,
        customer: str,
        value: Any,
        next_due_date: date,
        cycle: str,
        remote_ip: str,
        credit_card: Optional[Mapping[str, Any]] = None,
        credit_card_holder_info: Optional[Mapping[str, Any]] = None,
        credit_card_token: Optional[str] = None,
        **extra: Any,
    ) -> Subscription:
        """Card subscription; the first charge is attempted immediately."""
        if credit_card_token is None and (credit_card is None or credit_card_holder_info is None):
            raise ValueError("pass credit_card_token, or credit_card together with credit_card_holder_info.")
        fields = dict(
            customer=customer,
            billing_type=BillingType.CREDIT_CARD,
            value=value,
            next_due_date=next_due_date,
            cycle=cycle,
            remote_ip=remote_ip,
            **extra,
        )
        if credit_card_token is not None:
            fields["credit_card_token"] = credit_card_token
        else:
            fields["credit_card"] = credit_card
            fields["credit_card_holder_info"] = credit_card_holder_info
        return self.create(**fields)

    # ------------------------ read ------------------------

    def get(self, subscription_id: str) -> Subscription:
        dprint("subscriptions.get()", {"subscription_id": subscription_id})
        return self.client.request_model("GET", id_path(_BASE, "subscription_id", subscription_id), Subscription)

    def list(self, **filters: Any) -> Page[Subscription]:
        params = as_params(SubscriptionListParams, filters)
        dprint("subscriptions.list()", {"params": params})
        return fetch_page(self.client, _BASE, Subscription, params)

    def iter_all(
        self,
        *,
        page_size: int = DEFAULT_PAGE_SIZE,
        max_pages: Optional[int] = None,
        **filters: Any,
    ) -> Iterator[Subscription]:
        params = as_params(SubscriptionListParams, {**filters, "limit": page_size})
        return iterate_items(lambda p: fetch_page(self.client, _BASE, Subscription, p), params, max_pages=max_pages)

    def list_payments(self, subscription_id: str, **filters: Any) -> Page[Charge]:
        """Charges generated by a subscription (filters: status, offset, limit)."""
        path = id_path(_BASE, "subscription_id", subscription_id, "payments")
        params = as_params(ChargeListParams, filters)
        return fetch_page(self.client, path, Charge, params)

    # ------------------------ update / delete ------------------------

    def update(
        self,
        subscription_id: str,
        body: Union[SubscriptionUpdate, Body] = None,
        **fields: Any,
    ) -> Subscription:
        """
        Update a subscription. Pass `update_pending_payments=True` to reprice
        charges that were already generated and are still pending.
        """
        path = id_path(_BASE, "subscription_id", subscription_id)
        payload = as_payload(SubscriptionUpdate, body, fields)
        dprint("subscriptions.update()", {"subscription_id": subscription_id, "fields": sorted(payload)})
        return self.client.request_model("POST", path, Subscription, json=payload)

    def delete(self, subscription_id: str) -> DeletedResponse:
        """Cancel the subscription; pending charges it generated are removed too."""
        dprint("subscriptions.delete()", {"subscription_id": subscription_id})
        path = id_path(_BASE, "subscription_id", subscription_id)
        return self.client.request_model("DELETE", path, DeletedResponse)

    # alias kept for readability in billing code
    cancel = delete


__all__ = ["SubscriptionsAPI"]
