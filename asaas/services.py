"""
One-call constructors returning a service bound to its own client:

    charges = new_charges(AsaasConfig(access_token="..."))
    charges.get("pay_080225913252")

Each call opens a separate HTTP session; call `service.client.close()`
when done, or share one `AsaasClient` and use its properties instead.
"""
from __future__ import annotations
from typing import Any, Optional

from .client import AsaasClient
from .config import AsaasConfig
from .resources import (
    ChargesAPI,
    CustomersAPI,
    FinanceAPI,
    InstallmentsAPI,
    NotificationsAPI,
    PaymentLinksAPI,
    PixAPI,
    SubscriptionsAPI,
    TransfersAPI,
    WebhooksAPI,
)


def _client(config: Optional[AsaasConfig], **client_kwargs: Any) -> AsaasClient:
    return AsaasClient(config or AsaasConfig(), **client_kwargs)


def new_customers(config: Optional[AsaasConfig] = None, **client_kwargs: Any) -> CustomersAPI:
    return CustomersAPI(_client(config, **client_kwargs))


def new_charges(config: Optional[AsaasConfig] = None, **client_kwargs: Any) -> ChargesAPI:
    return ChargesAPI(_client(config, **client_kwargs))


def new_subscriptions(config: Optional[AsaasConfig] = None, **client_kwargs: Any) -> SubscriptionsAPI:
    return SubscriptionsAPI(_client(config, **client_kwargs))


def new_installments(config: Optional[AsaasConfig] = None, **client_kwargs: Any) -> InstallmentsAPI:
    return InstallmentsAPI(_client(config, **client_kwargs))


def new_transfers(config: Optional[AsaasConfig] = None, **client_kwargs: Any) -> TransfersAPI:
    return TransfersAPI(_client(config, **client_kwargs))


def new_webhooks(config: Optional[AsaasConfig] = None, **client_kwargs: Any) -> WebhooksAPI:
    return WebhooksAPI(_client(config, **client_kwargs))


def new_notifications(config: Optional[AsaasConfig] = None, **client_kwargs: Any) -> NotificationsAPI:
    return NotificationsAPI(_client(config, **client_kwargs))


def new_payment_links(config: Optional[AsaasConfig] = None, **client_kwargs: Any) -> PaymentLinksAPI:
    return PaymentLinksAPI(_client(config, **client_kwargs))


def new_pix(config: Optional[AsaasConfig] = None, **client_kwargs: Any) -> PixAPI:
    return PixAPI(_client(config, **client_kwargs))


def new_finance(config: Optional[AsaasConfig] = None, **client_kwargs: Any) -> FinanceAPI:
    return FinanceAPI(_client(config, **client_kwargs))


__all__ = [
    "new_customers",
    "new_charges",
    "new_subscriptions",
    "new_installments",
    "new_transfers",
    "new_webhooks",
    "new_notifications",
    "new_payment_links",
    "new_pix",
    "new_finance",
]
