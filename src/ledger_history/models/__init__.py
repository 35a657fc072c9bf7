# -*- coding: utf-8 -*-
"""Domain models."""

from ledger_history.models.address import Address
from ledger_history.models.counterparty import (
    ContractCreation,
    Counterparty,
    DirectRecipient,
    resolve_counterparty,
)
from ledger_history.models.transaction import AddressAndAmount, Transaction, TxDirection

__all__ = [
    "Address",
    "AddressAndAmount",
    "ContractCreation",
    "Counterparty",
    "DirectRecipient",
    "Transaction",
    "TxDirection",
    "resolve_counterparty",
]
