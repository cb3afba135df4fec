from __future__ import annotations
import time
from datetime import date
from typing import Any, Iterator, Mapping, Optional, Union

from ..client import AsaasClient
from ..debug import dprint, djson
from ..errors import AsaasHTTPError
from ..models import (
    BillingInfo,
    BillingType,
    Charge,
    ChargeCreate,
    ChargeListParams,
    ChargeStatusResponse,
    ChargeUpdate,
    CreditCardPayment,
    CreditCardToken,
    CreditCardTokenizeRequest,
    DeletedResponse,
    IdentificationField,
    Page,
    PixQrCode,
    ReceiveInCashRequest,
    RefundRequest,
)
from ..pagination import DEFAULT_PAGE_SIZE, iterate_items
from ._helpers import as_params, as_payload, fetch_page, id_path

_BASE = "/payments"
_TOKENIZE = "/creditCard/tokenize"

Body = Union[Mapping[str, Any], None]


class ChargesAPI:
    """
    Charges API (Asaas calls them "payments").

    Notes:
      - `billing_type` decides how the payer pays: BOLETO, PIX, CREDIT_CARD,
        or UNDEFINED to let the payer choose on the invoice page.
      - Card charges settle synchronously; boleto/PIX stay PENDING until paid.
        Use webhooks, or `wait_until_terminal(...)` for scripts.
    """

    def __init__(self, client: AsaasClient):
        self.client = client

    # ----------------------- create -----------------------

    def create(self, body: Union[ChargeCreate, Body] = None, **fields: Any) -> Charge:
        """Create a charge (boleto, PIX, card or undefined)."""
        payload = as_payload(ChargeCreate, body, fields)
        dprint("charges.create()", {
            "customer": payload.get("customer"),
            "billing_type": payload.get("billingType"),
            "value": payload.get("value"),
            "due_date": payload.get("dueDate"),
        })
        djson("charges.create body", payload)
        return self.client.request_model("POST", _BASE, Charge, json=payload)

    def create_with_credit_card(
        self,
        *,
        customer: str,
        value: Any,
        due_date: date,
        remote_ip: str,
        credit_card: Optional[Mapping[str, Any]] = None,
        credit_card_holder_info: Optional[Mapping[str, Any]] = None,
        credit_card_token: Optional[str] = None,
        **extra: Any,
    ) -> Charge:
        """
        Create and settle a card charge in one call.

        Pass either raw card data (`credit_card` + `credit_card_holder_info`)
        or a `credit_card_token` obtained from `tokenize_credit_card`.
        """
        if credit_card_token is None and (credit_card is None or credit_card_holder_info is None):
            raise ValueError("pass credit_card_token, or credit_card together with credit_card_holder_info.")
        fields = dict(
            customer=customer,
            billing_type=BillingType.CREDIT_CARD,
            value=value,
            due_date=due_date,
            remote_ip=remote_ip,
            **extra,
        )
        if credit_card_token is not None:
            fields["credit_card_token"] = credit_card_token
        else:
            fields["credit_card"] = credit_card
            fields["credit_card_holder_info"] = credit_card_holder_info
        return self.create(**fields)

    def tokenize_credit_card(self, body: Union[CreditCardTokenizeRequest, Body] = None, **fields: Any) -> CreditCardToken:
        """Store a card for later charges and get back an opaque token."""
        payload = as_payload(CreditCardTokenizeRequest, body, fields)
        dprint("charges.tokenize_credit_card()", {"customer": payload.get("customer")})
        return self.client.request_model("POST", _TOKENIZE, CreditCardToken, json=payload)

    # ----------------------- read -----------------------

    def get(self, charge_id: str) -> Charge:
        dprint("charges.get()", {"charge_id": charge_id})
        return self.client.request_model("GET", id_path(_BASE, "charge_id", charge_id), Charge)

    def try_get(self, charge_id: str) -> Optional[Charge]:
        """Like `get()` but returns None on HTTP 404."""
        try:
            return self.get(charge_id)
        except AsaasHTTPError as e:
            if e.status == 404:
                return None
            raise

    def list(self, **filters: Any) -> Page[Charge]:
        """
        One page of charges. Filters: customer, subscription, installment,
        billing_type, status, external_reference, date ranges such as
        date_created_ge/date_created_le, plus offset/limit.
        """
        params = as_params(ChargeListParams, filters)
        dprint("charges.list()", {"params": params})
        return fetch_page(self.client, _BASE, Charge, params)

    def iter_all(
        self,
        *,
        page_size: int = DEFAULT_PAGE_SIZE,
        max_pages: Optional[int] = None,
        **filters: Any,
    ) -> Iterator[Charge]:
        params = as_params(ChargeListParams, {**filters, "limit": page_size})
        return iterate_items(lambda p: fetch_page(self.client, _BASE, Charge, p), params, max_pages=max_pages)

    def get_status(self, charge_id: str) -> str:
        resp = self.client.request_model(
            "GET", id_path(_BASE, "charge_id", charge_id, "status"), ChargeStatusResponse
        )
        return resp.status

    def get_identification_field(self, charge_id: str) -> IdentificationField:
        """Boleto digitable line / barcode."""
        path = id_path(_BASE, "charge_id", charge_id, "identificationField")
        return self.client.request_model("GET", path, IdentificationField)

    def get_pix_qr_code(self, charge_id: str) -> PixQrCode:
        path = id_path(_BASE, "charge_id", charge_id, "pixQrCode")
        return self.client.request_model("GET", path, PixQrCode)

    def get_billing_info(self, charge_id: str) -> BillingInfo:
        path = id_path(_BASE, "charge_id", charge_id, "billingInfo")
        return self.client.request_model("GET", path, BillingInfo)

    # ----------------------- waiter -----------------------

    def wait_until_terminal(
        self,
        charge_id: str,
        *,
        timeout_s: float = 90,
        interval_s: float = 2.0,
    ) -> Charge:
        """
        Poll until the charge is paid, refunded, or otherwise settled.
        Returns the last seen charge on timeout.
        """
        if timeout_s <= 0 or interval_s <= 0:
            raise ValueError("timeout_s and interval_s must be positive.")

        dprint("charges.wait_until_terminal()", {
            "charge_id": charge_id,
            "timeout_s": timeout_s,
            "interval_s": interval_s,
        })

        deadline = time.monotonic() + timeout_s
        while True:
            ch = self.get(charge_id)
            if ch.is_terminal:
                dprint("charges.wait_until_terminal -> terminal", {"status": ch.status})
                return ch
            if time.monotonic() >= deadline:
                dprint("charges.wait_until_terminal -> timeout", {"last_status": ch.status})
                return ch
            time.sleep(interval_s)

    # ----------------------- update / delete -----------------------

    def update(self, charge_id: str, body: Union[ChargeUpdate, Body] = None, **fields: Any) -> Charge:
        """Only PENDING/OVERDUE charges can be updated."""
        path = id_path(_BASE, "charge_id", charge_id)
        payload = as_payload(ChargeUpdate, body, fields)
        dprint("charges.update()", {"charge_id": charge_id, "fields": sorted(payload)})
        return self.client.request_model("POST", path, Charge, json=payload)

    def delete(self, charge_id: str) -> DeletedResponse:
        dprint("charges.delete()", {"charge_id": charge_id})
        return self.client.request_model("DELETE", id_path(_BASE, "charge_id", charge_id), DeletedResponse)

    def restore(self, charge_id: str) -> Charge:
        dprint("charges.restore()", {"charge_id": charge_id})
        return self.client.request_model("POST", id_path(_BASE, "charge_id", charge_id, "restore"), Charge)

    # ----------------------- actions -----------------------

    def refund(
        self,
        charge_id: str,
        *,
        value: Optional[Any] = None,
        description: Optional[str] = None,
    ) -> Charge:
        """
        Refund a received/confirmed charge. Omit `value` for a full refund.
        """
        fields: dict = {}
        if value is not None:
            fields["value"] = value
        if description is not None:
            fields["description"] = description
        payload = as_payload(RefundRequest, fields)
        if "value" in payload and payload["value"] <= 0:
            raise ValueError("refund value must be positive.")
        dprint("charges.refund()", {"charge_id": charge_id, "value": payload.get("value")})
        path = id_path(_BASE, "charge_id", charge_id, "refund")
        return self.client.request_model("POST", path, Charge, json=payload)

    def receive_in_cash(
        self,
        charge_id: str,
        *,
        payment_date: date,
        value: Any,
        notify_customer: Optional[bool] = None,
    ) -> Charge:
        """Mark a charge as paid outside Asaas (cash, transfer to another bank...)."""
        fields: dict = {"payment_date": payment_date, "value": value}
        if notify_customer is not None:
            fields["notify_customer"] = notify_customer
        payload = as_payload(ReceiveInCashRequest, fields)
        dprint("charges.receive_in_cash()", {"charge_id": charge_id, "value": payload["value"]})
        path = id_path(_BASE, "charge_id", charge_id, "receiveInCash")
        return self.client.request_model("POST", path, Charge, json=payload)

    def undo_received_in_cash(self, charge_id: str) -> Charge:
        path = id_path(_BASE, "charge_id", charge_id, "undoReceivedInCash")
        dprint("charges.undo_received_in_cash()", {"charge_id": charge_id})
        return self.client.request_model("POST", path, Charge)

    def capture_authorized(self, charge_id: str) -> Charge:
        """Capture a card charge created with `authorize_only=True`."""
        path = id_path(_BASE, "charge_id", charge_id, "captureAuthorizedPayment")
        dprint("charges.capture_authorized()", {"charge_id": charge_id})
        return self.client.request_model("POST", path, Charge)

    def pay_with_credit_card(self, charge_id: str, body: Union[CreditCardPayment, Body] = None, **fields: Any) -> Charge:
        """Settle an existing pending charge with a card."""
        payload = as_payload(CreditCardPayment, body, fields)
        if not payload.get("creditCardToken") and not payload.get("creditCard"):
            raise ValueError("pass credit_card_token or credit_card.")
        path = id_path(_BASE, "charge_id", charge_id, "payWithCreditCard")
        dprint("charges.pay_with_credit_card()", {"charge_id": charge_id})
        return self.client.request_model("POST", path, Charge, json=payload)


__all__ = ["ChargesAPI"]
