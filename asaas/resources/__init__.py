"""
Resource APIs for the Asaas SDK.

Public exports:

- CustomersAPI
- ChargesAPI
- SubscriptionsAPI
- InstallmentsAPI
- TransfersAPI
- WebhooksAPI
- NotificationsAPI
- PaymentLinksAPI
- PixAPI
- FinanceAPI
"""

from .customers import CustomersAPI
from .charges import ChargesAPI
from .subscriptions import SubscriptionsAPI
from .installments import InstallmentsAPI
from .transfers import TransfersAPI
from .webhooks import WebhooksAPI
from .notifications import NotificationsAPI
from .payment_links import PaymentLinksAPI
from .pix import PixAPI
from .finance import FinanceAPI

__all__ = (
    "CustomersAPI",
    "ChargesAPI",
    "SubscriptionsAPI",
    "InstallmentsAPI",
    "TransfersAPI",
    "WebhooksAPI",
    "NotificationsAPI",
    "PaymentLinksAPI",
    "PixAPI",
    "FinanceAPI",
)
