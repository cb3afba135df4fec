from __future__ import annotations
from enum import Enum
from typing import List, Optional

from pydantic import field_validator

from .base import AsaasModel, ListParams, RequestModel


class SendType(str, Enum):
    SEQUENTIALLY = "SEQUENTIALLY"
    NON_SEQUENTIALLY = "NON_SEQUENTIALLY"


class WebhookCreate(RequestModel):
    """
    Request body for POST /webhooks.

    `auth_token` is echoed back by Asaas in the `asaas-access-token`
    header of every delivery; keep it secret.
    """
    name: str
    url: str
    email: Optional[str] = None
    enabled: Optional[bool] = None
    interrupted: Optional[bool] = None
    api_version: Optional[int] = None
    auth_token: Optional[str] = None
    send_type: Optional[SendType] = None
    events: List[str]

    @field_validator("url")
    @classmethod
    def _https(cls, v: str) -> str:
        if not v.lower().startswith(("https://", "http://")):
            raise ValueError("url must be an http(s) URL.")
        return v

    @field_validator("events")
    @classmethod
    def _events(cls, v: List[str]) -> List[str]:
        if not v:
            raise ValueError("at least one event is required.")
        return [e.strip().upper() for e in v]


class WebhookUpdate(RequestModel):
    name: Optional[str] = None
    url: Optional[str] = None
    email: Optional[str] = None
    enabled: Optional[bool] = None
    interrupted: Optional[bool] = None
    api_version: Optional[int] = None
    auth_token: Optional[str] = None
    send_type: Optional[SendType] = None
    events: Optional[List[str]] = None


class Webhook(AsaasModel):
    id: str
    object: Optional[str] = None
    name: Optional[str] = None
    url: Optional[str] = None
    email: Optional[str] = None
    enabled: Optional[bool] = None
    interrupted: Optional[bool] = None
    api_version: Optional[int] = None
    has_auth_token: Optional[bool] = None
    send_type: Optional[str] = None
    events: List[str] = []


class WebhookListParams(ListParams):
    pass


__all__ = ["SendType", "WebhookCreate", "WebhookUpdate", "Webhook", "WebhookListParams"]
