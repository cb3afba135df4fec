from __future__ import annotations
from datetime import date
from typing import Optional

from pydantic import field_validator

from .base import AsaasModel, ListParams, RequestModel
from ..utils import only_digits


class CustomerCreate(RequestModel):
    """
    Request body for creating (or updating) a customer.

    `cpf_cnpj` is normalized to digits only.
    """
    name: str
    cpf_cnpj: str
    email: Optional[str] = None
    phone: Optional[str] = None
    mobile_phone: Optional[str] = None
    address: Optional[str] = None
    address_number: Optional[str] = None
    complement: Optional[str] = None
    province: Optional[str] = None
    postal_code: Optional[str] = None
    external_reference: Optional[str] = None
    notification_disabled: Optional[bool] = None
    additional_emails: Optional[str] = None
    municipal_inscription: Optional[str] = None
    state_inscription: Optional[str] = None
    observations: Optional[str] = None
    group_name: Optional[str] = None
    company: Optional[str] = None
    foreign_customer: Optional[bool] = None

    @field_validator("cpf_cnpj", "postal_code")
    @classmethod
    def _digits(cls, v: Optional[str]) -> Optional[str]:
        return only_digits(v) if v is not None else v


class CustomerUpdate(CustomerCreate):
    """Every field optional; unset fields are left untouched by the server."""
    name: Optional[str] = None
    cpf_cnpj: Optional[str] = None


class Customer(AsaasModel):
    id: str
    object: Optional[str] = None
    date_created: Optional[date] = None
    name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    mobile_phone: Optional[str] = None
    address: Optional[str] = None
    address_number: Optional[str] = None
    complement: Optional[str] = None
    province: Optional[str] = None
    city: Optional[int] = None
    city_name: Optional[str] = None
    state: Optional[str] = None
    country: Optional[str] = None
    postal_code: Optional[str] = None
    cpf_cnpj: Optional[str] = None
    person_type: Optional[str] = None  # "FISICA" | "JURIDICA"
    deleted: bool = False
    additional_emails: Optional[str] = None
    external_reference: Optional[str] = None
    notification_disabled: Optional[bool] = None
    observations: Optional[str] = None
    foreign_customer: Optional[bool] = None


class CustomerListParams(ListParams):
    name: Optional[str] = None
    email: Optional[str] = None
    cpf_cnpj: Optional[str] = None
    group_name: Optional[str] = None
    external_reference: Optional[str] = None


__all__ = ["CustomerCreate", "CustomerUpdate", "Customer", "CustomerListParams"]
