# -*- coding: utf-8 -*-
"""Unit tests for Transaction decoding and derived fields."""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime, timezone
from typing import Any

import pytest

from ledger_history.exceptions import DecodeError, InvalidAddressError, MissingCounterpartyError
from ledger_history.models.address import Address
from ledger_history.models.counterparty import ContractCreation, DirectRecipient
from ledger_history.models.transaction import AddressAndAmount, Transaction, TxDirection

CONTRACT = "0x" + "2" * 40


def test_from_response_decodes_all_fields(
    raw_tx_factory: Callable[..., dict[str, Any]],
    ours: Address,
    theirs: Address,
) -> None:
    tx = Transaction.from_response(raw_tx_factory(hash="0x" + "AB" * 32))

    assert tx.id == "0x" + "ab" * 32
    assert tx.timestamp == datetime(2022, 1, 1, tzinfo=timezone.utc)
    assert tx.sender == ours
    assert tx.counterparty == DirectRecipient(theirs)
    assert tx.counterparty_address == theirs
    assert tx.amount == 10**18
    assert tx.gas_used == 21000
    assert tx.gas_price == 1_000_000_000
    assert tx.num_confirmations == 12
    assert tx.direction is None
    assert tx.is_contract_creation is False


def test_fee_is_exact_product_of_gas_used_and_gas_price(
    tx_factory: Callable[..., Transaction],
) -> None:
    tx = tx_factory(gasUsed="21000", gasPrice="1000000000")
    assert tx.fee == 21_000_000_000_000


def test_large_values_are_not_truncated(tx_factory: Callable[..., Transaction]) -> None:
    tx = tx_factory(
        value="123456789012345678901234567890",
        gasPrice="99999999999999999999",
        confirmations="18446744073709551617",
    )
    assert str(tx.amount) == "123456789012345678901234567890"
    assert tx.fee == 21000 * 99999999999999999999
    assert tx.num_confirmations == 2**64 + 1


def test_contract_creation_record_uses_contract_address(
    tx_factory: Callable[..., Transaction],
) -> None:
    tx = tx_factory(to="", contractAddress=CONTRACT)
    assert tx.counterparty == ContractCreation(Address.parse(CONTRACT))
    assert tx.is_contract_creation is True
    assert tx.addresses() == [AddressAndAmount(address=CONTRACT, amount=10**18)]


def test_recipient_takes_precedence_over_contract_address(
    tx_factory: Callable[..., Transaction],
    theirs: Address,
) -> None:
    tx = tx_factory(contractAddress=CONTRACT)
    assert tx.counterparty == DirectRecipient(theirs)


def test_missing_to_and_contract_address_raises_missing_counterparty(
    raw_tx_factory: Callable[..., dict[str, Any]],
) -> None:
    raw = raw_tx_factory(to="")
    del raw["contractAddress"]
    with pytest.raises(MissingCounterpartyError):
        Transaction.from_response(raw)


def test_malformed_sender_raises_invalid_address(
    raw_tx_factory: Callable[..., dict[str, Any]],
) -> None:
    with pytest.raises(InvalidAddressError):
        Transaction.from_response(raw_tx_factory(**{"from": "0x123"}))


@pytest.mark.parametrize("field", ["gasUsed", "gasPrice", "value", "confirmations", "timeStamp"])
def test_malformed_numeric_field_raises_decode_error_naming_field(
    raw_tx_factory: Callable[..., dict[str, Any]],
    field: str,
) -> None:
    with pytest.raises(DecodeError) as exc_info:
        Transaction.from_response(raw_tx_factory(**{field: "12abc"}))
    assert exc_info.value.field == field


def test_numeric_field_sent_as_json_number_raises_decode_error(
    raw_tx_factory: Callable[..., dict[str, Any]],
) -> None:
    with pytest.raises(DecodeError, match="decimal string expected"):
        Transaction.from_response(raw_tx_factory(value=5))


def test_missing_required_field_raises_decode_error(
    raw_tx_factory: Callable[..., dict[str, Any]],
) -> None:
    raw = raw_tx_factory()
    del raw["gasUsed"]
    with pytest.raises(DecodeError, match="missing fields: gasUsed"):
        Transaction.from_response(raw)


@pytest.mark.parametrize("bad_hash", ["", "0x1234", "f" * 64, None])
def test_malformed_hash_raises_decode_error(
    raw_tx_factory: Callable[..., dict[str, Any]],
    bad_hash: Any,
) -> None:
    with pytest.raises(DecodeError) as exc_info:
        Transaction.from_response(raw_tx_factory(hash=bad_hash))
    assert exc_info.value.field == "hash"


def test_non_object_record_raises_decode_error() -> None:
    with pytest.raises(DecodeError, match="transaction object expected"):
        Transaction.from_response(["not", "a", "dict"])  # type: ignore[arg-type]


def test_with_direction_returns_classified_copy(tx_factory: Callable[..., Transaction]) -> None:
    tx = tx_factory()

    classified = tx.with_direction(TxDirection.RECEIVE)

    assert classified.direction == TxDirection.RECEIVE
    assert tx.direction is None
    assert classified.id == tx.id


def test_with_direction_rejects_reclassification(tx_factory: Callable[..., Transaction]) -> None:
    classified = tx_factory().with_direction(TxDirection.SEND)
    with pytest.raises(ValueError, match="already classified"):
        classified.with_direction(TxDirection.RECEIVE)
