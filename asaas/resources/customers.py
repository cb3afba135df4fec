from __future__ import annotations
from typing import Any, Iterator, Mapping, Optional, Union

from ..client import AsaasClient
from ..debug import dprint, djson
from ..errors import AsaasHTTPError
from ..models import (
    Customer,
    CustomerCreate,
    CustomerListParams,
    CustomerUpdate,
    DeletedResponse,
    Notification,
    Page,
)
from ..models.base import ListParams
from ..pagination import DEFAULT_PAGE_SIZE, iterate_items
from ._helpers import as_params, as_payload, fetch_page, id_path

_BASE = "/customers"


class CustomersAPI:
    """
    Customers API.

    Every charge and subscription belongs to a customer, so this is
    usually the first call of an integration:

        customer = client.customers.create(name="Maria", cpf_cnpj="24971563792")
    """

    def __init__(self, client: AsaasClient):
        self.client = client

    # ------------------------ create / update ------------------------

    def create(self, body: Union[CustomerCreate, Mapping[str, Any], None] = None, **fields: Any) -> Customer:
        payload = as_payload(CustomerCreate, body, fields)
        dprint("customers.create()", {"external_reference": payload.get("externalReference")})
        djson("customers.create body", payload)
        return self.client.request_model("POST", _BASE, Customer, json=payload)

    def update(
        self,
        customer_id: str,
        body: Union[CustomerUpdate, Mapping[str, Any], None] = None,
        **fields: Any,
    ) -> Customer:
        """
        Update a customer. Asaas uses POST (not PUT/PATCH) on the item URL.
        Fields passed as None are sent as null and cleared server-side.
        """
        path = id_path(_BASE, "customer_id", customer_id)
        payload = as_payload(CustomerUpdate, body, fields)
        dprint("customers.update()", {"customer_id": customer_id, "fields": sorted(payload)})
        return self.client.request_model("POST", path, Customer, json=payload)

    # ------------------------ read ------------------------

    def get(self, customer_id: str) -> Customer:
        dprint("customers.get()", {"customer_id": customer_id})
        return self.client.request_model("GET", id_path(_BASE, "customer_id", customer_id), Customer)

    def try_get(self, customer_id: str) -> Optional[Customer]:
        """Like `get()` but returns None on HTTP 404."""
        try:
            return self.get(customer_id)
        except AsaasHTTPError as e:
            if e.status == 404:
                return None
            raise

    def list(self, **filters: Any) -> Page[Customer]:
        """
        One page of customers. Filters: name, email, cpf_cnpj, group_name,
        external_reference, offset, limit.
        """
        params = as_params(CustomerListParams, filters)
        dprint("customers.list()", {"params": params})
        return fetch_page(self.client, _BASE, Customer, params)

    def iter_all(
        self,
        *,
        page_size: int = DEFAULT_PAGE_SIZE,
        max_pages: Optional[int] = None,
        **filters: Any,
    ) -> Iterator[Customer]:
        params = as_params(CustomerListParams, {**filters, "limit": page_size})
        return iterate_items(lambda p: fetch_page(self.client, _BASE, Customer, p), params, max_pages=max_pages)

    def find_by_cpf_cnpj(self, cpf_cnpj: str) -> Optional[Customer]:
        """First non-deleted customer with this document, or None."""
        page = self.list(cpf_cnpj=cpf_cnpj, limit=10)
        for customer in page.data:
            if not customer.deleted:
                return customer
        return None

    # ------------------------ delete / restore ------------------------

    def delete(self, customer_id: str) -> DeletedResponse:
        dprint("customers.delete()", {"customer_id": customer_id})
        return self.client.request_model("DELETE", id_path(_BASE, "customer_id", customer_id), DeletedResponse)

    def restore(self, customer_id: str) -> Customer:
        dprint("customers.restore()", {"customer_id": customer_id})
        return self.client.request_model("POST", id_path(_BASE, "customer_id", customer_id, "restore"), Customer)

    # ------------------------ notifications ------------------------

    def list_notifications(self, customer_id: str, **paging: Any) -> Page[Notification]:
        """Notification settings for a customer (one entry per event)."""
        path = id_path(_BASE, "customer_id", customer_id, "notifications")
        params = as_params(ListParams, paging)
        return fetch_page(self.client, path, Notification, params)


__all__ = ["CustomersAPI"]
