from __future__ import annotations
from typing import Any, Dict, Optional

from .base import AsaasModel
from .charges import Charge
from .subscriptions import Subscription
from .transfers import Transfer


class WebhookEvent(AsaasModel):
    """
    Incoming webhook delivery:

        {"id": "evt_05b708f961d739ea7eba7e4db318f621&368604920",
         "event": "PAYMENT_RECEIVED",
         "dateCreated": "2024-06-12 16:45:03",
         "payment": {...}}

    Only the object matching the event family is present.
    """
    id: Optional[str] = None
    event: Optional[str] = None
    date_created: Optional[str] = None
    payment: Optional[Charge] = None
    subscription: Optional[Subscription] = None
    transfer: Optional[Transfer] = None
    invoice: Optional[Dict[str, Any]] = None
    bill: Optional[Dict[str, Any]] = None
    checkout: Optional[Dict[str, Any]] = None
    account: Optional[Dict[str, Any]] = None

    @property
    def family(self) -> Optional[str]:
        """'PAYMENT' for 'PAYMENT_RECEIVED', etc."""
        if not self.event:
            return None
        return self.event.split("_", 1)[0]

    @property
    def resource(self) -> Optional[Any]:
        for name in ("payment", "subscription", "transfer", "invoice", "bill", "checkout", "account"):
            value = getattr(self, name)
            if value is not None:
                return value
        return None


class WebhookEventTypes:
    """Constants for webhook event types."""

    # Charge events
    PAYMENT_CREATED = "PAYMENT_CREATED"
    PAYMENT_AWAITING_RISK_ANALYSIS = "PAYMENT_AWAITING_RISK_ANALYSIS"
    PAYMENT_APPROVED_BY_RISK_ANALYSIS = "PAYMENT_APPROVED_BY_RISK_ANALYSIS"
    PAYMENT_REPROVED_BY_RISK_ANALYSIS = "PAYMENT_REPROVED_BY_RISK_ANALYSIS"
    PAYMENT_AUTHORIZED = "PAYMENT_AUTHORIZED"
    PAYMENT_UPDATED = "PAYMENT_UPDATED"
    PAYMENT_CONFIRMED = "PAYMENT_CONFIRMED"
    PAYMENT_RECEIVED = "PAYMENT_RECEIVED"
    PAYMENT_CREDIT_CARD_CAPTURE_REFUSED = "PAYMENT_CREDIT_CARD_CAPTURE_REFUSED"
    PAYMENT_ANTICIPATED = "PAYMENT_ANTICIPATED"
    PAYMENT_OVERDUE = "PAYMENT_OVERDUE"
    PAYMENT_DELETED = "PAYMENT_DELETED"
    PAYMENT_RESTORED = "PAYMENT_RESTORED"
    PAYMENT_REFUNDED = "PAYMENT_REFUNDED"
    PAYMENT_PARTIALLY_REFUNDED = "PAYMENT_PARTIALLY_REFUNDED"
    PAYMENT_REFUND_IN_PROGRESS = "PAYMENT_REFUND_IN_PROGRESS"
    PAYMENT_RECEIVED_IN_CASH_UNDONE = "PAYMENT_RECEIVED_IN_CASH_UNDONE"
    PAYMENT_CHARGEBACK_REQUESTED = "PAYMENT_CHARGEBACK_REQUESTED"
    PAYMENT_CHARGEBACK_DISPUTE = "PAYMENT_CHARGEBACK_DISPUTE"
    PAYMENT_AWAITING_CHARGEBACK_REVERSAL = "PAYMENT_AWAITING_CHARGEBACK_REVERSAL"
    PAYMENT_DUNNING_RECEIVED = "PAYMENT_DUNNING_RECEIVED"
    PAYMENT_DUNNING_REQUESTED = "PAYMENT_DUNNING_REQUESTED"
    PAYMENT_BANK_SLIP_VIEWED = "PAYMENT_BANK_SLIP_VIEWED"
    PAYMENT_CHECKOUT_VIEWED = "PAYMENT_CHECKOUT_VIEWED"

    # Subscription events
    SUBSCRIPTION_CREATED = "SUBSCRIPTION_CREATED"
    SUBSCRIPTION_UPDATED = "SUBSCRIPTION_UPDATED"
    SUBSCRIPTION_INACTIVATED = "SUBSCRIPTION_INACTIVATED"
    SUBSCRIPTION_DELETED = "SUBSCRIPTION_DELETED"

    # Transfer events
    TRANSFER_CREATED = "TRANSFER_CREATED"
    TRANSFER_PENDING = "TRANSFER_PENDING"
    TRANSFER_IN_BANK_PROCESSING = "TRANSFER_IN_BANK_PROCESSING"
    TRANSFER_BLOCKED = "TRANSFER_BLOCKED"
    TRANSFER_DONE = "TRANSFER_DONE"
    TRANSFER_FAILED = "TRANSFER_FAILED"
    TRANSFER_CANCELLED = "TRANSFER_CANCELLED"

    @classmethod
    def all_events(cls) -> list:
        """Get list of all event types."""
        return [
            value for name, value in vars(cls).items()
            if not name.startswith("_") and isinstance(value, str)
        ]


__all__ = ["WebhookEvent", "WebhookEventTypes"]
