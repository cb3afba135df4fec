from __future__ import annotations
from datetime import date
from enum import Enum
from typing import List, Optional

from pydantic import field_validator

from .base import AsaasModel, ListParams, Money, RequestModel
from .common import (
    BillingType,
    Callback,
    CreditCard,
    CreditCardHolderInfo,
    Cycle,
    Discount,
    Fine,
    Interest,
    Split,
    normalize_cycle,
)


class SubscriptionStatus(str, Enum):
    ACTIVE = "ACTIVE"
    EXPIRED = "EXPIRED"
    INACTIVE = "INACTIVE"


class _SubscriptionFields(RequestModel):
    description: Optional[str] = None
    end_date: Optional[date] = None
    max_payments: Optional[int] = None
    external_reference: Optional[str] = None
    discount: Optional[Discount] = None
    interest: Optional[Interest] = None
    fine: Optional[Fine] = None
    split: Optional[List[Split]] = None
    callback: Optional[Callback] = None


class SubscriptionCreate(_SubscriptionFields):
    """Request body for POST /subscriptions."""
    customer: str
    billing_type: BillingType
    value: Money
    next_due_date: date
    cycle: Cycle

    credit_card: Optional[CreditCard] = None
    credit_card_holder_info: Optional[CreditCardHolderInfo] = None
    credit_card_token: Optional[str] = None
    remote_ip: Optional[str] = None

    @field_validator("cycle", mode="before")
    @classmethod
    def _cycle(cls, v):
        return normalize_cycle(v)

    @field_validator("value")
    @classmethod
    def _positive(cls, v: Money) -> Money:
        if v <= 0:
            raise ValueError("value must be positive.")
        return v


class SubscriptionUpdate(_SubscriptionFields):
    billing_type: Optional[BillingType] = None
    status: Optional[SubscriptionStatus] = None
    value: Optional[Money] = None
    next_due_date: Optional[date] = None
    cycle: Optional[Cycle] = None
    # also reprice payments already generated and still pending
    update_pending_payments: Optional[bool] = None

    @field_validator("cycle", mode="before")
    @classmethod
    def _cycle(cls, v):
        return normalize_cycle(v) if v is not None else v


class Subscription(AsaasModel):
    id: str
    object: Optional[str] = None
    date_created: Optional[date] = None
    customer: Optional[str] = None
    payment_link: Optional[str] = None
    billing_type: Optional[str] = None
    cycle: Optional[str] = None
    value: Optional[Money] = None
    next_due_date: Optional[date] = None
    end_date: Optional[date] = None
    description: Optional[str] = None
    status: Optional[str] = None
    deleted: bool = False
    max_payments: Optional[int] = None
    external_reference: Optional[str] = None

    @property
    def is_active(self) -> bool:
        return (self.status or "").upper() == SubscriptionStatus.ACTIVE.value


class SubscriptionListParams(ListParams):
    customer: Optional[str] = None
    customer_group_name: Optional[str] = None
    billing_type: Optional[BillingType] = None
    status: Optional[SubscriptionStatus] = None
    deleted_only: Optional[bool] = None
    include_deleted: Optional[bool] = None
    external_reference: Optional[str] = None
    order: Optional[str] = None
    sort: Optional[str] = None


__all__ = [
    "SubscriptionStatus",
    "SubscriptionCreate",
    "SubscriptionUpdate",
    "Subscription",
    "SubscriptionListParams",
]
