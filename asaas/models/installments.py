from __future__ import annotations
from datetime import date
from typing import Optional

from .base import AsaasModel, ListParams, Money


class Installment(AsaasModel):
    """An installment plan groups the charges created by one `installment_count` request."""
    id: str
    object: Optional[str] = None
    value: Optional[Money] = None
    net_value: Optional[Money] = None
    payment_value: Optional[Money] = None
    installment_count: Optional[int] = None
    billing_type: Optional[str] = None
    payment_date: Optional[date] = None
    description: Optional[str] = None
    expiration_day: Optional[int] = None
    date_created: Optional[date] = None
    customer: Optional[str] = None
    payment_link: Optional[str] = None
    transaction_receipt_url: Optional[str] = None
    deleted: bool = False


class InstallmentListParams(ListParams):
    pass


__all__ = ["Installment", "InstallmentListParams"]
