# -*- coding: utf-8 -*-
"""Shared pytest fixtures for unit tests."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import pytest

from ledger_history.config import Settings
from ledger_history.models.address import Address
from ledger_history.models.transaction import Transaction

OURS = "0xAaAaAaAaAaAaAaAaAaAaAaAaAaAaAaAaAaAaAaAa"
THEIRS = "0xbBbBBBBbbBBBbbbBbbBbbbbBBbBbbbbBbBbbBBbB"


def _tx_hash(n: int) -> str:
    return "0x" + format(n, "064x")


@pytest.fixture
def make_hash() -> Callable[[int], str]:
    """Deterministic 0x + 64 hex hash for record n."""
    return _tx_hash


@pytest.fixture
def ours() -> Address:
    """Queried account used by tests."""
    return Address.parse(OURS)


@pytest.fixture
def theirs() -> Address:
    return Address.parse(THEIRS)


@pytest.fixture
def raw_tx_factory() -> Callable[..., dict[str, Any]]:
    """Build a raw txlist item (camelCase, quoted numbers) with easy overrides."""

    def _build(**overrides: Any) -> dict[str, Any]:
        raw: dict[str, Any] = {
            "blockNumber": "14000000",
            "timeStamp": "1640995200",
            "hash": _tx_hash(1),
            "nonce": "7",
            "from": OURS,
            "to": THEIRS,
            "value": "1000000000000000000",
            "gas": "21000",
            "gasPrice": "1000000000",
            "isError": "0",
            "input": "0x",
            "contractAddress": "",
            "gasUsed": "21000",
            "confirmations": "12",
        }
        raw.update(overrides)
        return raw

    return _build


@pytest.fixture
def tx_factory(raw_tx_factory: Callable[..., dict[str, Any]]) -> Callable[..., Transaction]:
    """Build a decoded (unclassified) Transaction from raw overrides."""

    def _build(**overrides: Any) -> Transaction:
        return Transaction.from_response(raw_tx_factory(**overrides))

    return _build


@pytest.fixture
def settings() -> Settings:
    """Settings pointing at a fake explorer with a short call interval."""
    return Settings.from_env(
        explorer={
            "api_url": "https://explorer.test/api/",
            "call_interval_seconds": 0.01,
        },
    )
