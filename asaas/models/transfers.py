from __future__ import annotations
from datetime import date
from enum import Enum
from typing import Any, Dict, Optional

from pydantic import Field, field_validator, model_validator

from .base import AsaasModel, ListParams, Money, RequestModel
from ..utils import only_digits


class OperationType(str, Enum):
    PIX = "PIX"
    TED = "TED"
    INTERNAL = "INTERNAL"


class PixKeyType(str, Enum):
    CPF = "CPF"
    CNPJ = "CNPJ"
    EMAIL = "EMAIL"
    PHONE = "PHONE"
    EVP = "EVP"


class TransferStatus(str, Enum):
    PENDING = "PENDING"
    BANK_PROCESSING = "BANK_PROCESSING"
    DONE = "DONE"
    CANCELLED = "CANCELLED"
    FAILED = "FAILED"


class BankAccountType(str, Enum):
    CONTA_CORRENTE = "CONTA_CORRENTE"
    CONTA_POUPANCA = "CONTA_POUPANCA"


class Bank(RequestModel):
    code: str


class BankAccount(RequestModel):
    bank: Bank
    account_name: Optional[str] = None
    owner_name: str
    owner_birth_date: Optional[date] = None
    cpf_cnpj: str
    agency: str
    account: str
    account_digit: str
    bank_account_type: Optional[BankAccountType] = None
    ispb: Optional[str] = None

    @field_validator("cpf_cnpj")
    @classmethod
    def _digits(cls, v: str) -> str:
        return only_digits(v)


class TransferCreate(RequestModel):
    """
    Request body for POST /transfers.

    Either a PIX key (`pix_address_key` + `pix_address_key_type`) or a
    `bank_account` must be given.
    """
    value: Money
    bank_account: Optional[BankAccount] = None
    operation_type: Optional[OperationType] = None
    pix_address_key: Optional[str] = None
    pix_address_key_type: Optional[PixKeyType] = None
    description: Optional[str] = None
    schedule_date: Optional[date] = None
    external_reference: Optional[str] = None

    @field_validator("value")
    @classmethod
    def _positive(cls, v: Money) -> Money:
        if v <= 0:
            raise ValueError("value must be positive.")
        return v

    @model_validator(mode="after")
    def _destination(self) -> "TransferCreate":
        has_pix = bool(self.pix_address_key)
        if has_pix and self.pix_address_key_type is None:
            raise ValueError("pix_address_key_type is required with pix_address_key.")
        if has_pix and self.bank_account is not None:
            raise ValueError("use either pix_address_key or bank_account, not both.")
        if not has_pix and self.bank_account is None:
            raise ValueError("a transfer needs pix_address_key or bank_account.")
        return self


class Transfer(AsaasModel):
    id: str
    object: Optional[str] = None
    type: Optional[str] = None  # "BANK_ACCOUNT" | "ASAAS_ACCOUNT"
    date_created: Optional[date] = None
    value: Optional[Money] = None
    net_value: Optional[Money] = None
    transfer_fee: Optional[Money] = None
    status: Optional[str] = None
    effective_date: Optional[str] = None
    schedule_date: Optional[date] = None
    end_to_end_identifier: Optional[str] = None
    authorized: Optional[bool] = None
    failure_reason: Optional[str] = None
    external_reference: Optional[str] = None
    transaction_receipt_url: Optional[str] = None
    operation_type: Optional[str] = None
    description: Optional[str] = None
    can_be_cancelled: Optional[bool] = None
    bank_account: Optional[Dict[str, Any]] = None

    @property
    def is_done(self) -> bool:
        return (self.status or "").upper() == TransferStatus.DONE.value


class TransferListParams(ListParams):
    type: Optional[str] = None
    date_created_ge: Optional[date] = Field(None, alias="dateCreated[ge]")
    date_created_le: Optional[date] = Field(None, alias="dateCreated[le]")
    transfer_date_ge: Optional[date] = Field(None, alias="transferDate[ge]")
    transfer_date_le: Optional[date] = Field(None, alias="transferDate[le]")


__all__ = [
    "OperationType",
    "PixKeyType",
    "TransferStatus",
    "BankAccountType",
    "Bank",
    "BankAccount",
    "TransferCreate",
    "Transfer",
    "TransferListParams",
]
