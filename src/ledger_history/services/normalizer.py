"""Normalization of a raw explorer batch for one queried account."""

from __future__ import annotations

from collections.abc import Iterable

from ledger_history.exceptions import OwnershipMismatchError
from ledger_history.models.address import Address
from ledger_history.models.transaction import Transaction, TxDirection


def classify(transaction: Transaction, address: Address) -> TxDirection:
    """Return the direction of transaction relative to address.

    Raises:
        OwnershipMismatchError: If address is neither sender nor counterparty.
    """
    is_sender = transaction.sender == address
    is_counterparty = transaction.counterparty_address == address
    if not is_sender and not is_counterparty:
        raise OwnershipMismatchError(transaction.id, address.hex)
    if is_sender and is_counterparty:
        return TxDirection.SEND_SELF
    if is_sender:
        return TxDirection.SEND
    return TxDirection.RECEIVE


def normalize_transactions(
    transactions: Iterable[Transaction],
    address: Address,
) -> list[Transaction]:
    """De-duplicate and classify a txlist batch for address.

    The explorer lists a transaction twice when sender and recipient are the
    same account; only the first occurrence of each hash is kept. Input order
    (most recent first) is preserved.

    Args:
        transactions: Decoded batch in explorer order.
        address: The account the batch was queried for.

    Returns:
        Classified copies; the input records are left unclassified.

    Raises:
        OwnershipMismatchError: If any record does not involve address. No
            partial result is returned.
    """
    seen: set[str] = set()
    result: list[Transaction] = []
    for transaction in transactions:
        if transaction.id in seen:
            continue
        seen.add(transaction.id)
        result.append(transaction.with_direction(classify(transaction, address)))
    return result
