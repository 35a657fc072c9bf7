"""Block explorer API client and response schema."""

from ledger_history.clients.explorer_api.explorer_api import ExplorerClient
from ledger_history.clients.explorer_api.schema import (
    ExplorerTransactionSchema,
    TxListResponseSchema,
)

__all__ = ["ExplorerClient", "ExplorerTransactionSchema", "TxListResponseSchema"]
