"""Counterparty of a transaction: direct recipient or newly created contract.

The explorer sends two string fields, `to` and `contractAddress`, and exactly
one of them is populated. Here the two cases are separate types so a record
can only ever carry one.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from ledger_history.exceptions import MissingCounterpartyError
from ledger_history.models.address import Address


@dataclass(frozen=True, slots=True)
class DirectRecipient:
    """Plain transfer or contract call to an existing account."""

    address: Address


@dataclass(frozen=True, slots=True)
class ContractCreation:
    """Contract deployment; address is the one assigned to the new contract."""

    address: Address


Counterparty = Union[DirectRecipient, ContractCreation]


def resolve_counterparty(to: str | None, contract_address: str | None) -> Counterparty:
    """Resolve the raw `to` / `contractAddress` pair into one counterparty.

    `to` is checked first and wins if both are populated.

    Raises:
        InvalidAddressError: If the populated field is not a valid address.
        MissingCounterpartyError: If both fields are empty.
    """
    if to:
        return DirectRecipient(Address.parse(to))
    if contract_address:
        return ContractCreation(Address.parse(contract_address))
    raise MissingCounterpartyError()
