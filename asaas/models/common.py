"""
Building blocks shared by charges, subscriptions, installments and payment links.
"""
from __future__ import annotations
from enum import Enum
from typing import Optional

from pydantic import field_validator

from .base import Money, RequestModel
from ..utils import only_digits


class BillingType(str, Enum):
    UNDEFINED = "UNDEFINED"  # the payer picks on the invoice page
    BOLETO = "BOLETO"
    CREDIT_CARD = "CREDIT_CARD"
    PIX = "PIX"


class Cycle(str, Enum):
    WEEKLY = "WEEKLY"
    BIWEEKLY = "BIWEEKLY"
    MONTHLY = "MONTHLY"
    BIMONTHLY = "BIMONTHLY"
    QUARTERLY = "QUARTERLY"
    SEMIANNUALLY = "SEMIANNUALLY"
    YEARLY = "YEARLY"


class ValueType(str, Enum):
    FIXED = "FIXED"
    PERCENTAGE = "PERCENTAGE"


# Accepted spellings -> Cycle
_CYCLE_ALIASES = {
    "weekly": Cycle.WEEKLY,
    "biweekly": Cycle.BIWEEKLY,
    "bi-weekly": Cycle.BIWEEKLY,
    "monthly": Cycle.MONTHLY,
    "bimonthly": Cycle.BIMONTHLY,
    "bi-monthly": Cycle.BIMONTHLY,
    "quarterly": Cycle.QUARTERLY,
    "semiannually": Cycle.SEMIANNUALLY,
    "semiannual": Cycle.SEMIANNUALLY,
    "semi-annual": Cycle.SEMIANNUALLY,
    "yearly": Cycle.YEARLY,
    "annually": Cycle.YEARLY,
    "annual": Cycle.YEARLY,
}


def normalize_cycle(value: "str | Cycle") -> Cycle:
    if isinstance(value, Cycle):
        return value
    if not isinstance(value, str) or not value.strip():
        raise ValueError("cycle is required (e.g., 'MONTHLY').")
    raw = value.strip().lower().replace(" ", "")
    try:
        return _CYCLE_ALIASES[raw]
    except KeyError:
        raise ValueError(f"unsupported cycle {value!r}; allowed: {[c.value for c in Cycle]}") from None


class Discount(RequestModel):
    value: Money
    due_date_limit_days: Optional[int] = None
    type: Optional[ValueType] = None


class Interest(RequestModel):
    """Monthly interest percentage applied after the due date."""
    value: Money


class Fine(RequestModel):
    value: Money
    type: Optional[ValueType] = None


class Split(RequestModel):
    wallet_id: str
    fixed_value: Optional[Money] = None
    percentual_value: Optional[Money] = None
    total_fixed_value: Optional[Money] = None
    external_reference: Optional[str] = None
    description: Optional[str] = None


class Callback(RequestModel):
    success_url: str
    auto_redirect: Optional[bool] = None


class CreditCard(RequestModel):
    holder_name: str
    number: str
    expiry_month: str
    expiry_year: str
    ccv: str

    @field_validator("number")
    @classmethod
    def _number_digits(cls, v: str) -> str:
        return only_digits(v)


class CreditCardHolderInfo(RequestModel):
    name: str
    email: str
    cpf_cnpj: str
    postal_code: str
    address_number: str
    address_complement: Optional[str] = None
    phone: str
    mobile_phone: Optional[str] = None

    @field_validator("cpf_cnpj", "postal_code")
    @classmethod
    def _digits(cls, v: str) -> str:
        return only_digits(v)


__all__ = [
    "BillingType",
    "Cycle",
    "ValueType",
    "normalize_cycle",
    "Discount",
    "Interest",
    "Fine",
    "Split",
    "Callback",
    "CreditCard",
    "CreditCardHolderInfo",
]
