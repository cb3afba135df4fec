from __future__ import annotations
from datetime import date
from enum import Enum
from typing import Optional

from pydantic import model_validator

from .base import AsaasModel, ListParams, Money, RequestModel
from .common import BillingType, Callback, Cycle


class ChargeType(str, Enum):
    DETACHED = "DETACHED"
    RECURRENT = "RECURRENT"
    INSTALLMENT = "INSTALLMENT"


class PaymentLinkCreate(RequestModel):
    name: str
    billing_type: BillingType
    charge_type: ChargeType
    description: Optional[str] = None
    end_date: Optional[date] = None
    value: Optional[Money] = None  # None lets the payer choose the amount
    due_date_limit_days: Optional[int] = None
    subscription_cycle: Optional[Cycle] = None
    max_installment_count: Optional[int] = None
    external_reference: Optional[str] = None
    notification_enabled: Optional[bool] = None
    callback: Optional[Callback] = None
    is_address_required: Optional[bool] = None

    @model_validator(mode="after")
    def _charge_type_fields(self) -> "PaymentLinkCreate":
        if self.charge_type == ChargeType.RECURRENT and self.subscription_cycle is None:
            raise ValueError("subscription_cycle is required for RECURRENT links.")
        if self.charge_type == ChargeType.INSTALLMENT and not self.max_installment_count:
            raise ValueError("max_installment_count is required for INSTALLMENT links.")
        return self


class PaymentLinkUpdate(RequestModel):
    name: Optional[str] = None
    billing_type: Optional[BillingType] = None
    charge_type: Optional[ChargeType] = None
    description: Optional[str] = None
    end_date: Optional[date] = None
    value: Optional[Money] = None
    due_date_limit_days: Optional[int] = None
    subscription_cycle: Optional[Cycle] = None
    max_installment_count: Optional[int] = None
    external_reference: Optional[str] = None
    notification_enabled: Optional[bool] = None
    callback: Optional[Callback] = None
    active: Optional[bool] = None


class PaymentLink(AsaasModel):
    id: str
    name: Optional[str] = None
    value: Optional[Money] = None
    active: Optional[bool] = None
    charge_type: Optional[str] = None
    url: Optional[str] = None
    billing_type: Optional[str] = None
    subscription_cycle: Optional[str] = None
    description: Optional[str] = None
    end_date: Optional[date] = None
    deleted: bool = False
    views_count: Optional[int] = None
    max_installment_count: Optional[int] = None
    due_date_limit_days: Optional[int] = None
    notification_enabled: Optional[bool] = None
    external_reference: Optional[str] = None


class PaymentLinkListParams(ListParams):
    active: Optional[bool] = None
    include_deleted: Optional[bool] = None
    name: Optional[str] = None
    external_reference: Optional[str] = None


__all__ = [
    "ChargeType",
    "PaymentLinkCreate",
    "PaymentLinkUpdate",
    "PaymentLink",
    "PaymentLinkListParams",
]
