from __future__ import annotations
from datetime import date
from typing import Any, Mapping, Optional, Union

from ..client import AsaasClient
from ..debug import dprint
from ..models import (
    DecodedQrCode,
    DeletedResponse,
    Page,
    PixKey,
    PixKeyCreate,
    PixKeyListParams,
    PixTransaction,
    QrCodeDecode,
    QrCodePay,
    StaticQrCode,
    StaticQrCodeCreate,
)
from ._helpers import as_params, as_payload, fetch_page, id_path

_KEYS = "/pix/addressKeys"
_QR = "/pix/qrCodes"


class PixAPI:
    """
    PIX: account keys, static QR codes, and paying third-party QR codes.

    Charges with billing_type=PIX expose their own QR code through
    `ChargesAPI.get_pix_qr_code`.
    """

    def __init__(self, client: AsaasClient):
        self.client = client

    # ------------------------ keys ------------------------

    def create_key(self) -> PixKey:
        """Register a random (EVP) key for the account."""
        payload = PixKeyCreate(type="EVP").to_payload()
        dprint("pix.create_key()")
        return self.client.request_model("POST", _KEYS, PixKey, json=payload)

    def get_key(self, key_id: str) -> PixKey:
        return self.client.request_model("GET", id_path(_KEYS, "key_id", key_id), PixKey)

    def list_keys(self, **filters: Any) -> Page[PixKey]:
        params = as_params(PixKeyListParams, filters)
        return fetch_page(self.client, _KEYS, PixKey, params)

    def delete_key(self, key_id: str) -> DeletedResponse:
        dprint("pix.delete_key()", {"key_id": key_id})
        return self.client.request_model("DELETE", id_path(_KEYS, "key_id", key_id), DeletedResponse)

    # ------------------------ QR codes ------------------------

    def create_static_qr_code(
        self, body: Union[StaticQrCodeCreate, Mapping[str, Any], None] = None, **fields: Any
    ) -> StaticQrCode:
        payload = as_payload(StaticQrCodeCreate, body, fields)
        dprint("pix.create_static_qr_code()", {"value": payload.get("value")})
        return self.client.request_model("POST", f"{_QR}/static", StaticQrCode, json=payload)

    def decode_qr_code(self, payload: str, *, change_value: Optional[Any] = None) -> DecodedQrCode:
        """Inspect a copy-and-paste PIX code before paying it."""
        fields: dict = {"payload": payload}
        if change_value is not None:
            fields["change_value"] = change_value
        body = as_payload(QrCodeDecode, fields)
        return self.client.request_model("POST", f"{_QR}/decode", DecodedQrCode, json=body)

    def pay_qr_code(
        self,
        payload: str,
        *,
        value: Any,
        description: Optional[str] = None,
        schedule_date: Optional[date] = None,
    ) -> PixTransaction:
        """Pay a PIX QR code from the account balance."""
        fields: dict = {"qr_code": {"payload": payload}, "value": value}
        if description is not None:
            fields["description"] = description
        if schedule_date is not None:
            fields["schedule_date"] = schedule_date
        body = as_payload(QrCodePay, fields)
        dprint("pix.pay_qr_code()", {"value": body.get("value"), "scheduled": bool(schedule_date)})
        return self.client.request_model("POST", f"{_QR}/pay", PixTransaction, json=body)


__all__ = ["PixAPI"]
