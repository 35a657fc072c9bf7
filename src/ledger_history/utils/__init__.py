# -*- coding: utf-8 -*-
"""Utility modules."""

from ledger_history.utils.precision import decode_big_int, decode_timestamp
from ledger_history.utils.validation import (
    is_hex_address,
    is_tx_hash,
    mask_address,
)

__all__ = [
    "decode_big_int",
    "decode_timestamp",
    "is_hex_address",
    "is_tx_hash",
    "mask_address",
]
