from __future__ import annotations
from datetime import date
from typing import Optional

from pydantic import Field

from .base import AsaasModel, Money, QueryParams
from .charges import ChargeStatus
from .common import BillingType


class Balance(AsaasModel):
    balance: Money


class PaymentStatistics(AsaasModel):
    quantity: int = 0
    value: Money = 0
    net_value: Money = 0


class SplitStatistics(AsaasModel):
    income: Money = 0  # splits received from other accounts
    value: Money = 0   # splits sent to other accounts


class PaymentStatisticsParams(QueryParams):
    customer: Optional[str] = None
    billing_type: Optional[BillingType] = None
    status: Optional[ChargeStatus] = None
    anticipated: Optional[bool] = None
    external_reference: Optional[str] = None
    date_created_ge: Optional[date] = Field(None, alias="dateCreated[ge]")
    date_created_le: Optional[date] = Field(None, alias="dateCreated[le]")
    due_date_ge: Optional[date] = Field(None, alias="dueDate[ge]")
    due_date_le: Optional[date] = Field(None, alias="dueDate[le]")
    estimated_credit_date_ge: Optional[date] = Field(None, alias="estimatedCreditDate[ge]")
    estimated_credit_date_le: Optional[date] = Field(None, alias="estimatedCreditDate[le]")


__all__ = ["Balance", "PaymentStatistics", "SplitStatistics", "PaymentStatisticsParams"]
