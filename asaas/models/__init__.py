"""
Typed request/response models for the Asaas v3 API.

Requests serialize with `to_payload()`; responses tolerate unknown fields.
"""
from .base import (
    AsaasModel,
    DeletedResponse,
    ErrorItem,
    ListParams,
    Money,
    Page,
    QueryParams,
    RequestModel,
)
from .common import (
    BillingType,
    Callback,
    CreditCard,
    CreditCardHolderInfo,
    Cycle,
    Discount,
    Fine,
    Interest,
    Split,
    ValueType,
    normalize_cycle,
)
from .customers import Customer, CustomerCreate, CustomerListParams, CustomerUpdate
from .charges import (
    TERMINAL_STATUSES,
    BillingInfo,
    Charge,
    ChargeCreate,
    ChargeListParams,
    ChargeRefund,
    ChargeStatus,
    ChargeStatusResponse,
    ChargeUpdate,
    CreditCardPayment,
    CreditCardToken,
    CreditCardTokenizeRequest,
    IdentificationField,
    PixQrCode,
    ReceiveInCashRequest,
    RefundRequest,
)
from .subscriptions import (
    Subscription,
    SubscriptionCreate,
    SubscriptionListParams,
    SubscriptionStatus,
    SubscriptionUpdate,
)
from .installments import Installment, InstallmentListParams
from .transfers import (
    Bank,
    BankAccount,
    BankAccountType,
    OperationType,
    PixKeyType,
    Transfer,
    TransferCreate,
    TransferListParams,
    TransferStatus,
)
from .webhooks import SendType, Webhook, WebhookCreate, WebhookListParams, WebhookUpdate
from .notifications import (
    Notification,
    NotificationBatchItem,
    NotificationBatchResponse,
    NotificationBatchUpdate,
    NotificationUpdate,
)
from .payment_links import (
    ChargeType,
    PaymentLink,
    PaymentLinkCreate,
    PaymentLinkListParams,
    PaymentLinkUpdate,
)
from .pix import (
    DecodedQrCode,
    PixKey,
    PixKeyCreate,
    PixKeyListParams,
    PixTransaction,
    QrCodeDecode,
    QrCodeFormat,
    QrCodePay,
    QrCodePayload,
    StaticQrCode,
    StaticQrCodeCreate,
)
from .finance import Balance, PaymentStatistics, PaymentStatisticsParams, SplitStatistics
from .events import WebhookEvent, WebhookEventTypes
