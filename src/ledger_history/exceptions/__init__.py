"""Exceptions subpackage."""

from ledger_history.exceptions.exceptions import (
    DecodeError,
    ExplorerAPIError,
    InvalidAddressError,
    LedgerHistoryError,
    MissingCounterpartyError,
    MissingRequiredConfigError,
    OwnershipMismatchError,
    TransportError,
)

__all__ = [
    "DecodeError",
    "ExplorerAPIError",
    "InvalidAddressError",
    "LedgerHistoryError",
    "MissingCounterpartyError",
    "MissingRequiredConfigError",
    "OwnershipMismatchError",
    "TransportError",
]
