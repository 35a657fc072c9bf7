"""Validation helpers for account addresses and transaction hashes."""

from __future__ import annotations

import re
from typing import Any

_HEX_ADDRESS = re.compile(r"(0[xX])?[0-9a-fA-F]{40}")
_TX_HASH = re.compile(r"0[xX][0-9a-fA-F]{64}")


def is_hex_address(addr: Any) -> bool:
    """Return True if addr is a 20-byte hex address, with or without the 0x prefix."""
    if not isinstance(addr, str):
        return False
    return _HEX_ADDRESS.fullmatch(addr.strip()) is not None


def is_tx_hash(x: Any) -> bool:
    """Return True if x is a transaction hash (0x + 64 hex chars = 66 chars)."""
    if not isinstance(x, str):
        return False
    return _TX_HASH.fullmatch(x.strip()) is not None


def mask_address(addr: str | None) -> str:
    """Return a masked wallet address for logging (e.g. 0x1234...abcd)."""
    if not addr or len(addr) < 10:
        return "***"
    return f"{addr[:6]}...{addr[-4:]}"
