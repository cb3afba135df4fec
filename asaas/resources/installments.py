from __future__ import annotations
from typing import Any, Iterator, Optional

from ..client import AsaasClient
from ..debug import dprint
from ..models import Charge, ChargeListParams, DeletedResponse, Installment, InstallmentListParams, Page
from ..pagination import DEFAULT_PAGE_SIZE, iterate_items
from ._helpers import as_params, fetch_page, id_path, validate_id

_BASE = "/installments"


class InstallmentsAPI:
    """
    Installment plans.

    Plans are created through `ChargesAPI.create(installment_count=...)`;
    this API reads, refunds and removes them as a whole.
    """

    def __init__(self, client: AsaasClient):
        self.client = client

    def get(self, installment_id: str) -> Installment:
        dprint("installments.get()", {"installment_id": installment_id})
        return self.client.request_model("GET", id_path(_BASE, "installment_id", installment_id), Installment)

    def list(self, **paging: Any) -> Page[Installment]:
        params = as_params(InstallmentListParams, paging)
        return fetch_page(self.client, _BASE, Installment, params)

    def iter_all(self, *, page_size: int = DEFAULT_PAGE_SIZE, max_pages: Optional[int] = None) -> Iterator[Installment]:
        params = as_params(InstallmentListParams, {"limit": page_size})
        return iterate_items(lambda p: fetch_page(self.client, _BASE, Installment, p), params, max_pages=max_pages)

    def list_payments(self, installment_id: str, **filters: Any) -> Page[Charge]:
        """Charges belonging to the plan, via /payments?installment=..."""
        installment_id = validate_id("installment_id", installment_id)
        params = as_params(ChargeListParams, {**filters, "installment": installment_id})
        return fetch_page(self.client, "/payments", Charge, params)

    def delete(self, installment_id: str) -> DeletedResponse:
        """Remove every still-pending charge of the plan."""
        dprint("installments.delete()", {"installment_id": installment_id})
        return self.client.request_model("DELETE", id_path(_BASE, "installment_id", installment_id), DeletedResponse)

    def refund(self, installment_id: str) -> Installment:
        """Refund every received charge of a card installment plan."""
        dprint("installments.refund()", {"installment_id": installment_id})
        path = id_path(_BASE, "installment_id", installment_id, "refund")
        return self.client.request_model("POST", path, Installment)


__all__ = ["InstallmentsAPI"]
