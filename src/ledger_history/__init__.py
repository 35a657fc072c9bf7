"""Ledger history: rate-limited explorer client and transaction normalization."""

from ledger_history.clients import (
    AsyncHttpClient,
    CallRateLimiter,
    ExplorerClient,
)
from ledger_history.config import get_settings
from ledger_history.models import Address, Transaction, TxDirection
from ledger_history.services import AccountHistoryService, normalize_transactions

__version__ = "0.0.1"
__all__ = [
    "AccountHistoryService",
    "Address",
    "AsyncHttpClient",
    "CallRateLimiter",
    "ExplorerClient",
    "Transaction",
    "TxDirection",
    "get_settings",
    "normalize_transactions",
]
