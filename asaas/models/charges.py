from __future__ import annotations
from datetime import date
from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import Field, field_validator

from .base import AsaasModel, ListParams, Money, RequestModel
from .common import (
    BillingType,
    Callback,
    CreditCard,
    CreditCardHolderInfo,
    Discount,
    Fine,
    Interest,
    Split,
)


class ChargeStatus(str, Enum):
    PENDING = "PENDING"
    RECEIVED = "RECEIVED"
    CONFIRMED = "CONFIRMED"
    OVERDUE = "OVERDUE"
    REFUNDED = "REFUNDED"
    RECEIVED_IN_CASH = "RECEIVED_IN_CASH"
    REFUND_REQUESTED = "REFUND_REQUESTED"
    REFUND_IN_PROGRESS = "REFUND_IN_PROGRESS"
    CHARGEBACK_REQUESTED = "CHARGEBACK_REQUESTED"
    CHARGEBACK_DISPUTE = "CHARGEBACK_DISPUTE"
    AWAITING_CHARGEBACK_REVERSAL = "AWAITING_CHARGEBACK_REVERSAL"
    DUNNING_REQUESTED = "DUNNING_REQUESTED"
    DUNNING_RECEIVED = "DUNNING_RECEIVED"
    AWAITING_RISK_ANALYSIS = "AWAITING_RISK_ANALYSIS"


# Statuses after which a charge no longer moves on its own.
TERMINAL_STATUSES = frozenset({
    ChargeStatus.RECEIVED.value,
    ChargeStatus.CONFIRMED.value,
    ChargeStatus.RECEIVED_IN_CASH.value,
    ChargeStatus.REFUNDED.value,
    ChargeStatus.DUNNING_RECEIVED.value,
})


# =============================================================================
# Requests
# =============================================================================
class _ChargeFields(RequestModel):
    description: Optional[str] = None
    external_reference: Optional[str] = None
    days_after_due_date_to_registration_cancellation: Optional[int] = None
    discount: Optional[Discount] = None
    interest: Optional[Interest] = None
    fine: Optional[Fine] = None
    postal_service: Optional[bool] = None
    split: Optional[List[Split]] = None
    callback: Optional[Callback] = None


class ChargeCreate(_ChargeFields):
    """
    Request body for POST /payments.

    For installment plans set `installment_count` plus either
    `installment_value` or `total_value` instead of `value`.
    """
    customer: str
    billing_type: BillingType
    due_date: date
    value: Optional[Money] = None
    installment_count: Optional[int] = None
    installment_value: Optional[Money] = None
    total_value: Optional[Money] = None

    # credit card (inline data or a previously tokenized card)
    credit_card: Optional[CreditCard] = None
    credit_card_holder_info: Optional[CreditCardHolderInfo] = None
    credit_card_token: Optional[str] = None
    authorize_only: Optional[bool] = None
    remote_ip: Optional[str] = None

    @field_validator("value", "installment_value", "total_value")
    @classmethod
    def _positive(cls, v: Optional[Money]) -> Optional[Money]:
        if v is not None and v <= 0:
            raise ValueError("value must be positive.")
        return v

    @field_validator("installment_count")
    @classmethod
    def _installments(cls, v: Optional[int]) -> Optional[int]:
        if v is not None and v < 2:
            raise ValueError("installment_count must be >= 2.")
        return v


class ChargeUpdate(_ChargeFields):
    billing_type: Optional[BillingType] = None
    value: Optional[Money] = None
    due_date: Optional[date] = None


class CreditCardPayment(RequestModel):
    """Body for POST /payments/{id}/payWithCreditCard."""
    credit_card: Optional[CreditCard] = None
    credit_card_holder_info: Optional[CreditCardHolderInfo] = None
    credit_card_token: Optional[str] = None


class RefundRequest(RequestModel):
    """Omit `value` for a full refund."""
    value: Optional[Money] = None
    description: Optional[str] = None


class ReceiveInCashRequest(RequestModel):
    payment_date: date
    value: Money
    notify_customer: Optional[bool] = None


class CreditCardTokenizeRequest(RequestModel):
    customer: str
    credit_card: CreditCard
    credit_card_holder_info: CreditCardHolderInfo
    remote_ip: str


# =============================================================================
# Responses
# =============================================================================
class ChargeRefund(AsaasModel):
    date_created: Optional[str] = None
    status: Optional[str] = None
    value: Optional[Money] = None
    description: Optional[str] = None
    transaction_receipt_url: Optional[str] = None


class Charge(AsaasModel):
    """
    Charge resource (`"object": "payment"` on the wire).

    Status and billing type are kept as plain strings so new values from
    the API do not break parsing; compare with `ChargeStatus.X.value`.
    """
    id: str
    object: Optional[str] = None
    date_created: Optional[date] = None
    customer: Optional[str] = None
    subscription: Optional[str] = None
    installment: Optional[str] = None
    payment_link: Optional[str] = None
    value: Optional[Money] = None
    net_value: Optional[Money] = None
    original_value: Optional[Money] = None
    interest_value: Optional[Money] = None
    description: Optional[str] = None
    billing_type: Optional[str] = None
    status: Optional[str] = None
    due_date: Optional[date] = None
    original_due_date: Optional[date] = None
    payment_date: Optional[date] = None
    client_payment_date: Optional[date] = None
    installment_number: Optional[int] = None
    invoice_url: Optional[str] = None
    invoice_number: Optional[str] = None
    external_reference: Optional[str] = None
    deleted: bool = False
    anticipated: Optional[bool] = None
    anticipable: Optional[bool] = None
    credit_date: Optional[date] = None
    estimated_credit_date: Optional[date] = None
    transaction_receipt_url: Optional[str] = None
    nosso_numero: Optional[str] = None
    bank_slip_url: Optional[str] = None
    pix_transaction: Optional[str] = None
    credit_card: Optional[Dict[str, Any]] = None
    refunds: Optional[List[ChargeRefund]] = None
    postal_service: Optional[bool] = None

    @property
    def is_terminal(self) -> bool:
        return (self.status or "").upper() in TERMINAL_STATUSES

    @property
    def is_paid(self) -> bool:
        return (self.status or "").upper() in {
            ChargeStatus.RECEIVED.value,
            ChargeStatus.CONFIRMED.value,
            ChargeStatus.RECEIVED_IN_CASH.value,
        }


class ChargeStatusResponse(AsaasModel):
    status: str


class IdentificationField(AsaasModel):
    """Boleto digitable line and barcode."""
    identification_field: Optional[str] = None
    nosso_numero: Optional[str] = None
    bar_code: Optional[str] = None


class PixQrCode(AsaasModel):
    success: Optional[bool] = None
    encoded_image: Optional[str] = None  # base64 PNG
    payload: Optional[str] = None        # copy-and-paste code
    expiration_date: Optional[str] = None


class BillingInfo(AsaasModel):
    pix: Optional[Dict[str, Any]] = None
    credit_card: Optional[Dict[str, Any]] = None
    bank_slip: Optional[Dict[str, Any]] = None


class CreditCardToken(AsaasModel):
    credit_card_number: Optional[str] = None  # last four digits
    credit_card_brand: Optional[str] = None
    credit_card_token: str


class ChargeListParams(ListParams):
    customer: Optional[str] = None
    customer_group_name: Optional[str] = None
    billing_type: Optional[BillingType] = None
    status: Optional[ChargeStatus] = None
    subscription: Optional[str] = None
    installment: Optional[str] = None
    external_reference: Optional[str] = None
    payment_date: Optional[date] = None
    estimated_credit_date: Optional[date] = None
    pix_qr_code_id: Optional[str] = None
    anticipated: Optional[bool] = None
    date_created_ge: Optional[date] = Field(None, alias="dateCreated[ge]")
    date_created_le: Optional[date] = Field(None, alias="dateCreated[le]")
    payment_date_ge: Optional[date] = Field(None, alias="paymentDate[ge]")
    payment_date_le: Optional[date] = Field(None, alias="paymentDate[le]")
    due_date_ge: Optional[date] = Field(None, alias="dueDate[ge]")
    due_date_le: Optional[date] = Field(None, alias="dueDate[le]")


__all__ = [
    "ChargeStatus",
    "TERMINAL_STATUSES",
    "ChargeCreate",
    "ChargeUpdate",
    "CreditCardPayment",
    "RefundRequest",
    "ReceiveInCashRequest",
    "CreditCardTokenizeRequest",
    "ChargeRefund",
    "Charge",
    "ChargeStatusResponse",
    "IdentificationField",
    "PixQrCode",
    "BillingInfo",
    "CreditCardToken",
    "ChargeListParams",
]
