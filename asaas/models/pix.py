from __future__ import annotations
from datetime import date
from enum import Enum
from typing import Any, Dict, Optional

from .base import AsaasModel, ListParams, Money, RequestModel


class QrCodeFormat(str, Enum):
    ALL = "ALL"
    IMAGE = "IMAGE"
    PAYLOAD = "PAYLOAD"


class PixKeyCreate(RequestModel):
    # Asaas only issues random (EVP) keys through the API
    type: str = "EVP"


class PixKey(AsaasModel):
    id: str
    key: Optional[str] = None
    type: Optional[str] = None
    status: Optional[str] = None
    date_created: Optional[str] = None
    can_be_deleted: Optional[bool] = None
    cannot_be_deleted_reason: Optional[str] = None
    qr_code: Optional[Dict[str, Any]] = None


class PixKeyListParams(ListParams):
    status: Optional[str] = None
    status_list: Optional[str] = None


class StaticQrCodeCreate(RequestModel):
    address_key: str
    description: Optional[str] = None
    value: Optional[Money] = None  # None lets the payer type the amount
    format: Optional[QrCodeFormat] = None
    expiration_date: Optional[str] = None
    expiration_seconds: Optional[int] = None
    allows_multiple_payments: Optional[bool] = None
    external_reference: Optional[str] = None


class StaticQrCode(AsaasModel):
    id: Optional[str] = None
    encoded_image: Optional[str] = None
    payload: Optional[str] = None
    allows_multiple_payments: Optional[bool] = None
    expiration_date: Optional[str] = None
    external_reference: Optional[str] = None


class QrCodePayload(RequestModel):
    payload: str
    change_value: Optional[Money] = None


class QrCodeDecode(RequestModel):
    payload: str
    change_value: Optional[Money] = None
    expected_payment_date: Optional[date] = None


class QrCodePay(RequestModel):
    qr_code: QrCodePayload
    value: Money
    description: Optional[str] = None
    schedule_date: Optional[date] = None


class DecodedQrCode(AsaasModel):
    payload: Optional[str] = None
    type: Optional[str] = None  # "STATIC" | "DYNAMIC"
    transaction_origin_type: Optional[str] = None
    pix_key: Optional[str] = None
    conciliation_identifier: Optional[str] = None
    end_to_end_identifier: Optional[str] = None
    due_date: Optional[str] = None
    expiration_date: Optional[str] = None
    value: Optional[Money] = None
    total_value: Optional[Money] = None
    can_be_paid: Optional[bool] = None
    cannot_be_paid_reason: Optional[str] = None
    receiver: Optional[Dict[str, Any]] = None
    payer: Optional[Dict[str, Any]] = None


class PixTransaction(AsaasModel):
    id: str
    end_to_end_identifier: Optional[str] = None
    value: Optional[Money] = None
    status: Optional[str] = None
    type: Optional[str] = None
    effective_date: Optional[str] = None
    scheduled_date: Optional[str] = None
    can_be_canceled: Optional[bool] = None
    description: Optional[str] = None


__all__ = [
    "QrCodeFormat",
    "PixKeyCreate",
    "PixKey",
    "PixKeyListParams",
    "StaticQrCodeCreate",
    "StaticQrCode",
    "QrCodePayload",
    "QrCodeDecode",
    "QrCodePay",
    "DecodedQrCode",
    "PixTransaction",
]
