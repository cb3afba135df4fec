from __future__ import annotations
from typing import Any

from ..client import AsaasClient
from ..models import Balance, PaymentStatistics, PaymentStatisticsParams, SplitStatistics
from ._helpers import as_params


class FinanceAPI:
    """Account balance and aggregate figures."""

    def __init__(self, client: AsaasClient):
        self.client = client

    def balance(self) -> Balance:
        return self.client.request_model("GET", "/finance/balance", Balance)

    def payment_statistics(self, **filters: Any) -> PaymentStatistics:
        """Count and sums of charges matching the filters (status, billing_type, date ranges...)."""
        params = as_params(PaymentStatisticsParams, filters)
        return self.client.request_model("GET", "/finance/payment/statistics", PaymentStatistics, params=params)

    def split_statistics(self) -> SplitStatistics:
        return self.client.request_model("GET", "/finance/split/statistics", SplitStatistics)


__all__ = ["FinanceAPI"]
