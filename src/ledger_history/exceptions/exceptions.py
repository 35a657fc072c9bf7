"""Custom exceptions for the explorer client and transaction normalization."""

from __future__ import annotations


class LedgerHistoryError(Exception):
    """Base exception for ledger-history errors."""

    pass


class MissingRequiredConfigError(LedgerHistoryError):
    """Raised when a required configuration value is missing."""

    pass


class ExplorerAPIError(LedgerHistoryError):
    """Base class for failures talking to the explorer API."""

    pass


class TransportError(ExplorerAPIError):
    """Raised when the HTTP request fails (connection error or non-2xx status)."""

    def __init__(
        self,
        message: str,
        *,
        url: str | None = None,
        status_code: int | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.url = url
        self.status_code = status_code
        self.cause = cause


class DecodeError(LedgerHistoryError, ValueError):
    """Raised when the response body or one of its fields cannot be decoded."""

    def __init__(self, message: str, *, field: str | None = None) -> None:
        super().__init__(message)
        self.field = field


class InvalidAddressError(LedgerHistoryError, ValueError):
    """Raised when a string is not a well-formed account address."""

    def __init__(self, value: object) -> None:
        super().__init__(f"account address expected, got {value!r}")
        self.value = value


class MissingCounterpartyError(LedgerHistoryError):
    """Raised when a record has neither a recipient nor a contract address."""

    def __init__(self, message: str = "need one of: to, contractAddress") -> None:
        super().__init__(message)


class OwnershipMismatchError(LedgerHistoryError):
    """Raised when a transaction involves neither side of the queried account."""

    def __init__(self, tx_hash: str, address: str) -> None:
        super().__init__(f"transaction {tx_hash} does not belong to account {address}")
        self.tx_hash = tx_hash
        self.address = address
