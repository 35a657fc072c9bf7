# -*- coding: utf-8 -*-
"""Transaction: one decoded entry of an account's explorer history.

Built from a raw txlist item via Transaction.from_response(). The direction is
None until the record passes through normalize_transactions(), which returns a
copy classified for the queried account.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, replace
from datetime import datetime
from enum import Enum
from typing import Any, Optional

from ledger_history.exceptions import DecodeError
from ledger_history.models.address import Address
from ledger_history.models.counterparty import ContractCreation, Counterparty, resolve_counterparty
from ledger_history.utils.precision import decode_big_int, decode_timestamp
from ledger_history.utils.validation import is_tx_hash

_REQUIRED_FIELDS = (
    "gasUsed",
    "gasPrice",
    "hash",
    "timeStamp",
    "confirmations",
    "from",
    "value",
)


class TxDirection(str, Enum):
    """Relationship of a transaction to the queried account."""

    SEND = "send"
    RECEIVE = "receive"
    SEND_SELF = "send_self"


@dataclass(frozen=True, slots=True)
class AddressAndAmount:
    """One output of a transaction: where the value went and how much."""

    address: str
    amount: int


@dataclass(frozen=True, slots=True)
class Transaction:
    """Decoded explorer transaction. All amounts are integers in the smallest unit."""

    tx_hash: str
    """Canonical lowercase 0x hash; identifies the transaction."""
    timestamp: datetime
    sender: Address
    counterparty: Counterparty
    value: int
    gas_used: int
    gas_price: int
    confirmations: int
    direction: Optional[TxDirection] = None
    """Set by normalization, relative to the queried account."""

    @classmethod
    def from_response(cls, response: Mapping[str, Any]) -> Transaction:
        """Build from a raw txlist item (camelCase keys, quoted numbers).

        Raises:
            DecodeError: Missing field, malformed hash or numeric/time field.
            InvalidAddressError: Malformed sender or counterparty address.
            MissingCounterpartyError: Neither `to` nor `contractAddress` set.
        """
        if not isinstance(response, Mapping):
            raise DecodeError(f"transaction object expected, got {type(response).__name__}")
        missing = [key for key in _REQUIRED_FIELDS if key not in response]
        if missing:
            raise DecodeError(f"missing fields: {', '.join(missing)}", field=missing[0])

        tx_hash = response["hash"]
        if not is_tx_hash(tx_hash):
            raise DecodeError(f"hash: transaction hash expected, got {tx_hash!r}", field="hash")

        return cls(
            tx_hash=tx_hash.strip().lower(),
            timestamp=decode_timestamp(response["timeStamp"], field="timeStamp"),
            sender=Address.parse(response["from"]),
            counterparty=resolve_counterparty(response.get("to"), response.get("contractAddress")),
            value=decode_big_int(response["value"], field="value"),
            gas_used=decode_big_int(response["gasUsed"], field="gasUsed"),
            gas_price=decode_big_int(response["gasPrice"], field="gasPrice"),
            confirmations=decode_big_int(response["confirmations"], field="confirmations"),
        )

    def with_direction(self, direction: TxDirection) -> Transaction:
        """Return a copy classified with direction. A record is classified only once."""
        if self.direction is not None:
            raise ValueError(f"transaction {self.tx_hash} is already classified as {self.direction.value}")
        return replace(self, direction=direction)

    @property
    def id(self) -> str:
        return self.tx_hash

    @property
    def fee(self) -> int:
        """gas used * gas price, exact."""
        return self.gas_used * self.gas_price

    @property
    def amount(self) -> int:
        return self.value

    @property
    def num_confirmations(self) -> int:
        return self.confirmations

    @property
    def counterparty_address(self) -> Address:
        return self.counterparty.address

    @property
    def is_contract_creation(self) -> bool:
        return isinstance(self.counterparty, ContractCreation)

    def addresses(self) -> list[AddressAndAmount]:
        """Outputs of the transaction. Account-based ledgers have exactly one."""
        return [AddressAndAmount(address=self.counterparty_address.hex, amount=self.amount)]
