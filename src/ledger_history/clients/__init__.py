"""HTTP and API clients."""

from ledger_history.clients.explorer_api import ExplorerClient
from ledger_history.clients.http import AsyncHttpClient
from ledger_history.clients.rate_limiter import CallRateLimiter

__all__ = [
    "AsyncHttpClient",
    "CallRateLimiter",
    "ExplorerClient",
]
