"""Services: normalization and account history."""

from ledger_history.services.account_history import AccountHistoryService, total_fees_paid
from ledger_history.services.normalizer import classify, normalize_transactions

__all__ = [
    "AccountHistoryService",
    "classify",
    "normalize_transactions",
    "total_fees_paid",
]
