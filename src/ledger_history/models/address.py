"""Address: a ledger account identifier in canonical (lowercase 0x) form."""

from __future__ import annotations

from dataclasses import dataclass

from ledger_history.exceptions import InvalidAddressError
from ledger_history.utils.validation import is_hex_address


@dataclass(frozen=True, slots=True)
class Address:
    """20-byte account address.

    Always holds the canonical form, so equality and hashing are
    case-insensitive with respect to the input string.
    """

    hex: str
    """Canonical form: 0x followed by 40 lowercase hex digits."""

    @classmethod
    def parse(cls, raw: str) -> Address:
        """Parse a hex address with or without the 0x prefix.

        Raises:
            InvalidAddressError: If raw is not a 20-byte hex string.
        """
        if not is_hex_address(raw):
            raise InvalidAddressError(raw)
        s = raw.strip().lower()
        if s.startswith("0x"):
            s = s[2:]
        return cls(hex="0x" + s)

    def __str__(self) -> str:
        return self.hex
