"""IEEE 802 MAC-48 subnet addresses and their map-key form."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional

MAC48 = 48
_BITS_IN_NIBBLE = 4

_HEX_DIGITS = re.compile(r"[0-9A-Fa-f]+")
_DECIMAL = re.compile(r"[+-]?[0-9]+")


def _hex_digits(addr: str) -> str:
    """Remove octet delimiters from a written address."""
    return addr.replace(":", "").replace("-", "").replace(".", "")


def _strip_prefix_delimiter(mask: str) -> str:
    return mask.replace("/", "", 1)


def wildcard(prefix: int) -> int:
    """Return the number of host bits left by a subnet prefix."""
    return (MAC48 - prefix) & 0xFF


@dataclass(frozen=True)
class HardwareAddr:
    """A MAC-48 address (or address block) with a subnet prefix in bits."""

    addr: Optional[int] = None
    prefix: int = 0

    def with_addr(self, mac: str) -> "HardwareAddr":
        """Return the address written in ``mac`` (e.g. ``00:03:93``).

        The prefix is the number of bits the written digits span; a ``/n``
        suffix is not applied here but through :meth:`with_prefix`.
        Addresses longer than MAC-48 or not in hex leave ``self`` unchanged.
        """
        digits = _hex_digits(mac.split("/")[0])
        if len(digits) > MAC48 // _BITS_IN_NIBBLE:
            return self
        if not _HEX_DIGITS.fullmatch(digits):
            return self
        prefix = (len(digits) * _BITS_IN_NIBBLE) & 0xFF
        return HardwareAddr(int(digits, 16), prefix)._align()

    def with_prefix(self, mask: str) -> "HardwareAddr":
        """Return a realigned copy for ``mask`` (e.g. ``/28``).

        An empty mask returns ``self``; a decimal mask keeps the current
        prefix and a mask that is not a decimal number clears it.
        """
        if not mask:
            return self
        prefix = self.prefix if _DECIMAL.fullmatch(_strip_prefix_delimiter(mask)) else 0
        addr = self.addr if self.addr is not None else 0
        return HardwareAddr(addr, prefix)._align()

    def _align(self) -> "HardwareAddr":
        if self.addr is None or self.prefix == 0:
            return self
        got = self.addr.bit_length() // _BITS_IN_NIBBLE
        expected = self.prefix // _BITS_IN_NIBBLE
        shift = got - expected
        if shift > 0:
            return HardwareAddr(self.addr >> shift, self.prefix)
        return self

    def parent(self) -> Optional["HardwareAddr"]:
        """Return the enclosing block one nibble shorter, or None if unset."""
        if self.addr is None or self.prefix == 0:
            return None
        return HardwareAddr(
            self.addr >> _BITS_IN_NIBBLE,
            (self.prefix - _BITS_IN_NIBBLE) & 0xFF,
        )

    def wildcard_key(self) -> str:
        """Return ``<wildcard bits>.<address in decimal>``, usable as a map key."""
        addr = str(self.addr) if self.addr is not None else "<nil>"
        return f"{wildcard(self.prefix)}.{addr}"

    def __str__(self) -> str:
        if self.addr is None:
            raise ValueError("hardware address is not set")
        raw = self.addr.to_bytes((self.addr.bit_length() + 7) // 8, "big")
        parts = []
        for i, byte in enumerate(raw):
            parts.append(f"{byte:x}")
            if i % 2 == 0:
                parts.append(":")
        parts.append(f"/{self.prefix}")
        return "".join(parts)