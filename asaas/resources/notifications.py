from __future__ import annotations
from typing import Any, Iterable, Mapping, Union

from ..client import AsaasClient
from ..debug import dprint
from ..models import (
    Notification,
    NotificationBatchItem,
    NotificationBatchResponse,
    NotificationBatchUpdate,
    NotificationUpdate,
    Page,
)
from ._helpers import as_payload, id_path, validate_id

_BASE = "/notifications"


class NotificationsAPI:
    """
    Per-customer notification settings (emails, SMS, WhatsApp, calls)
    that Asaas sends on charge events.
    """

    def __init__(self, client: AsaasClient):
        self.client = client

    def list_for_customer(self, customer_id: str, **paging: Any) -> Page[Notification]:
        return self.client.customers.list_notifications(customer_id, **paging)

    def update(
        self,
        notification_id: str,
        body: Union[NotificationUpdate, Mapping[str, Any], None] = None,
        **fields: Any,
    ) -> Notification:
        path = id_path(_BASE, "notification_id", notification_id)
        payload = as_payload(NotificationUpdate, body, fields)
        dprint("notifications.update()", {"notification_id": notification_id, "fields": sorted(payload)})
        return self.client.request_model("POST", path, Notification, json=payload)

    def update_batch(
        self,
        customer_id: str,
        notifications: Iterable[Union[Mapping[str, Any], NotificationBatchItem]],
    ) -> NotificationBatchResponse:
        """Update several notifications of one customer in a single call; each item needs `id`."""
        customer_id = validate_id("customer_id", customer_id)
        items = list(notifications)
        if not items:
            raise ValueError("notifications must not be empty.")
        payload = as_payload(NotificationBatchUpdate, {"customer": customer_id, "notifications": items})
        dprint("notifications.update_batch()", {"customer_id": customer_id, "count": len(items)})
        return self.client.request_model("PUT", f"{_BASE}/batch", NotificationBatchResponse, json=payload)


__all__ = ["NotificationsAPI"]
