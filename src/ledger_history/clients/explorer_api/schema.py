"""Explorer API response types (Etherscan txlist alignment)."""

from __future__ import annotations

from typing import TypedDict

# txlist item. Keys match the API response (camelCase); numbers are quoted
# decimals. Exactly one of `to` and `contractAddress` is non-empty. Functional
# syntax because `from` is a keyword.
ExplorerTransactionSchema = TypedDict(
    "ExplorerTransactionSchema",
    {
        "blockNumber": str,
        "timeStamp": str,
        "hash": str,
        "nonce": str,
        "blockHash": str,
        "transactionIndex": str,
        "from": str,
        "to": str,
        "value": str,
        "gas": str,
        "gasPrice": str,
        "isError": str,
        "txreceipt_status": str,
        "input": str,
        "contractAddress": str,
        "cumulativeGasUsed": str,
        "gasUsed": str,
        "confirmations": str,
    },
    total=False,
)


class TxListResponseSchema(TypedDict, total=False):
    """txlist envelope. `result` is a list on success, a message string on error."""

    status: str
    message: str
    result: list[ExplorerTransactionSchema] | str
