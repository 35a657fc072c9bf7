"""Decoders for explorer fields that are sent as quoted decimal strings.

Amounts, gas prices and confirmation counts may exceed 64 bits, so the explorer
quotes them. Python ints are arbitrary precision; the only work here is strict
validation of the literal.
"""

from __future__ import annotations

import re
from datetime import datetime, timezone
from typing import Any

from ledger_history.exceptions import DecodeError

# ASCII only: int() alone would also accept "1_000" and non-ASCII digits.
_DECIMAL_LITERAL = re.compile(r"[+-]?[0-9]+")


def decode_big_int(raw: Any, *, field: str = "value") -> int:
    """Decode a base-10 integer literal of any magnitude.

    Args:
        raw: JSON value; must be a string such as "123456789012345678901234567890".
        field: Field name used in error messages.

    Returns:
        The decoded integer.

    Raises:
        DecodeError: If raw is not a string or not a base-10 integer literal.
    """
    if not isinstance(raw, str):
        raise DecodeError(f"{field}: decimal string expected, got {type(raw).__name__}", field=field)
    literal = raw.strip()
    if not _DECIMAL_LITERAL.fullmatch(literal):
        raise DecodeError(f"{field}: failed to parse {raw!r}", field=field)
    try:
        return int(literal, 10)
    except ValueError as e:
        # Exceeds sys.get_int_max_str_digits()
        raise DecodeError(f"{field}: failed to parse {raw!r}: {e}", field=field) from e


def decode_timestamp(raw: Any, *, field: str = "timeStamp") -> datetime:
    """Decode a Unix-seconds decimal string into an aware UTC datetime.

    Raises:
        DecodeError: On non-numeric content or a value outside the supported range.
    """
    seconds = decode_big_int(raw, field=field)
    try:
        return datetime.fromtimestamp(seconds, tz=timezone.utc)
    except (OverflowError, OSError, ValueError) as e:
        raise DecodeError(f"{field}: timestamp out of range: {raw!r}", field=field) from e
