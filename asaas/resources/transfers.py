from __future__ import annotations
from datetime import date
from typing import Any, Iterator, Mapping, Optional, Union

from ..client import AsaasClient
from ..debug import dprint
from ..models import (
    BankAccount,
    OperationType,
    Page,
    PixKeyType,
    Transfer,
    TransferCreate,
    TransferListParams,
)
from ..pagination import DEFAULT_PAGE_SIZE, iterate_items
from ._helpers import as_params, as_payload, fetch_page, id_path

_BASE = "/transfers"


class TransfersAPI:
    """
    Transfers from the Asaas account balance to a bank account or PIX key.
    """

    def __init__(self, client: AsaasClient):
        self.client = client

    def create(self, body: Union[TransferCreate, Mapping[str, Any], None] = None, **fields: Any) -> Transfer:
        payload = as_payload(TransferCreate, body, fields)
        dprint("transfers.create()", {
            "value": payload.get("value"),
            "operation_type": payload.get("operationType"),
            "pix_key_type": payload.get("pixAddressKeyType"),
        })
        return self.client.request_model("POST", _BASE, Transfer, json=payload)

    def create_pix(
        self,
        *,
        value: Any,
        pix_address_key: str,
        pix_address_key_type: Union[PixKeyType, str],
        description: Optional[str] = None,
        schedule_date: Optional[date] = None,
        external_reference: Optional[str] = None,
    ) -> Transfer:
        fields: dict = {
            "value": value,
            "operation_type": OperationType.PIX,
            "pix_address_key": pix_address_key,
            "pix_address_key_type": pix_address_key_type,
        }
        for name, v in (("description", description), ("schedule_date", schedule_date),
                        ("external_reference", external_reference)):
            if v is not None:
                fields[name] = v
        return self.create(**fields)

    def create_to_bank_account(
        self,
        *,
        value: Any,
        bank_account: Union[BankAccount, Mapping[str, Any]],
        operation_type: Union[OperationType, str] = OperationType.TED,
        description: Optional[str] = None,
        schedule_date: Optional[date] = None,
        external_reference: Optional[str] = None,
    ) -> Transfer:
        fields: dict = {
            "value": value,
            "bank_account": bank_account,
            "operation_type": operation_type,
        }
        for name, v in (("description", description), ("schedule_date", schedule_date),
                        ("external_reference", external_reference)):
            if v is not None:
                fields[name] = v
        return self.create(**fields)

    def get(self, transfer_id: str) -> Transfer:
        dprint("transfers.get()", {"transfer_id": transfer_id})
        return self.client.request_model("GET", id_path(_BASE, "transfer_id", transfer_id), Transfer)

    def list(self, **filters: Any) -> Page[Transfer]:
        params = as_params(TransferListParams, filters)
        dprint("transfers.list()", {"params": params})
        return fetch_page(self.client, _BASE, Transfer, params)

    def iter_all(
        self,
        *,
        page_size: int = DEFAULT_PAGE_SIZE,
        max_pages: Optional[int] = None,
        **filters: Any,
    ) -> Iterator[Transfer]:
        params = as_params(TransferListParams, {**filters, "limit": page_size})
        return iterate_items(lambda p: fetch_page(self.client, _BASE, Transfer, p), params, max_pages=max_pages)

    def cancel(self, transfer_id: str) -> Transfer:
        """Cancel a transfer that has not reached the bank yet."""
        dprint("transfers.cancel()", {"transfer_id": transfer_id})
        return self.client.request_model("DELETE", id_path(_BASE, "transfer_id", transfer_id, "cancel"), Transfer)


__all__ = ["TransfersAPI"]
