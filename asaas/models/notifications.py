from __future__ import annotations
from typing import List, Optional

from .base import AsaasModel, RequestModel


class NotificationUpdate(RequestModel):
    enabled: Optional[bool] = None
    email_enabled_for_provider: Optional[bool] = None
    sms_enabled_for_provider: Optional[bool] = None
    email_enabled_for_customer: Optional[bool] = None
    sms_enabled_for_customer: Optional[bool] = None
    phone_call_enabled_for_customer: Optional[bool] = None
    whatsapp_enabled_for_customer: Optional[bool] = None
    # days before (or after) the due date; only for date-driven events
    schedule_offset: Optional[int] = None


class NotificationBatchItem(NotificationUpdate):
    id: str


class NotificationBatchUpdate(RequestModel):
    customer: str
    notifications: List[NotificationBatchItem]


class Notification(AsaasModel):
    id: str
    object: Optional[str] = None
    customer: Optional[str] = None
    enabled: Optional[bool] = None
    email_enabled_for_provider: Optional[bool] = None
    sms_enabled_for_provider: Optional[bool] = None
    email_enabled_for_customer: Optional[bool] = None
    sms_enabled_for_customer: Optional[bool] = None
    phone_call_enabled_for_customer: Optional[bool] = None
    whatsapp_enabled_for_customer: Optional[bool] = None
    event: Optional[str] = None
    schedule_offset: Optional[int] = None
    deleted: bool = False


class NotificationBatchResponse(AsaasModel):
    notifications: List[Notification] = []


__all__ = [
    "NotificationUpdate",
    "NotificationBatchItem",
    "NotificationBatchUpdate",
    "Notification",
    "NotificationBatchResponse",
]
