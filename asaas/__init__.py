"""
Asaas-Python SDK

Typed client for the Asaas v3 payments API:
- Customers
- Charges (boleto, PIX, credit card), refunds, receive-in-cash
- Subscriptions and installment plans
- Transfers (PIX and TED), PIX keys and QR codes
- Payment links, notifications, balance and statistics
- Webhook configuration, plus verification & routing of deliveries
"""

from __future__ import annotations

# ---------------------------------------------------------------------------
# Version
# ---------------------------------------------------------------------------
__version__ = "0.1.0"

# ---------------------------------------------------------------------------
# Public API re-exports
# ---------------------------------------------------------------------------
from .config import AsaasConfig, ENVIRONMENTS
from .client import AsaasClient
from .errors import (
    AsaasSDKError,
    AsaasConfigError,
    AsaasTransportError,
    AsaasDecodeError,
    AsaasHTTPError,
    AsaasAPIError,
    AsaasWebhookError,
    is_failure,
)
from .models import (
    BillingType,
    Charge,
    ChargeStatus,
    Customer,
    Cycle,
    Page,
    Subscription,
    Transfer,
)
from .resources import (
    CustomersAPI,
    ChargesAPI,
    SubscriptionsAPI,
    InstallmentsAPI,
    TransfersAPI,
    WebhooksAPI,
    NotificationsAPI,
    PaymentLinksAPI,
    PixAPI,
    FinanceAPI,
)
from .services import (
    new_customers,
    new_charges,
    new_subscriptions,
    new_installments,
    new_transfers,
    new_webhooks,
    new_notifications,
    new_payment_links,
    new_pix,
    new_finance,
)
from .webhook import (
    WebhookEvent,
    WebhookEventTypes,
    WebhookRouter,
    parse_event,
    verify_token,
    verify_and_parse,
)
from .utils import (
    to_money,
    to_cents,
    from_cents,
    format_brl,
    only_digits,
    is_valid_cpf,
    is_valid_cnpj,
    is_valid_cpf_cnpj,
    utcnow_iso,
)
from .debug import dprint, djson, is_enabled as debug_enabled, set_debug as set_debug_enabled

# ---------------------------------------------------------------------------
# Debug print on import (sanitized; only if ASAAS_DEBUG is truthy)
# ---------------------------------------------------------------------------
dprint("SDK import", {"version": __version__})

__all__ = (
    "__version__",
    # core
    "AsaasConfig",
    "AsaasClient",
    "ENVIRONMENTS",
    # errors
    "AsaasSDKError",
    "AsaasConfigError",
    "AsaasTransportError",
    "AsaasDecodeError",
    "AsaasHTTPError",
    "AsaasAPIError",
    "AsaasWebhookError",
    "is_failure",
    # models
    "BillingType",
    "Charge",
    "ChargeStatus",
    "Customer",
    "Cycle",
    "Page",
    "Subscription",
    "Transfer",
    # resources
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
    # constructors
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
    # webhooks
    "WebhookEvent",
    "WebhookEventTypes",
    "WebhookRouter",
    "parse_event",
    "verify_token",
    "verify_and_parse",
    # utils
    "to_money",
    "to_cents",
    "from_cents",
    "format_brl",
    "only_digits",
    "is_valid_cpf",
    "is_valid_cnpj",
    "is_valid_cpf_cnpj",
    "utcnow_iso",
    # debug
    "dprint",
    "djson",
    "debug_enabled",
    "set_debug_enabled",
)
