"""Identifier codec: fixed-width hex ids and base64 digests.

Addresses and object ids are 32-byte values. They are parsed from hex of any
length up to 64 digits and left-padded with zero bytes, so ``0x2``, ``0x02``
and ``0X0002`` all name the same identifier.
"""
from __future__ import annotations

import base64
import binascii
from dataclasses import dataclass
from typing import Any

from .errors import DecodeError, InvalidBase64Error, InvalidHexError, TooLongError

ADDRESS_LENGTH = 32


@dataclass(frozen=True)
class HexData:
    """Exactly ``ADDRESS_LENGTH`` bytes, displayed as ``0x``-prefixed hex."""

    data: bytes

    def __post_init__(self) -> None:
        if not isinstance(self.data, bytes):
            raise TypeError(f"HexData expects bytes, got {type(self.data).__name__}")
        if len(self.data) != ADDRESS_LENGTH:
            raise ValueError(
                f"HexData must be {ADDRESS_LENGTH} bytes, got {len(self.data)}"
            )

    @classmethod
    def from_hex(cls, value: str) -> HexData:
        """Create an identifier from a hex string.

        The string may carry a ``0x``/``0X`` prefix or none, e.g. ``'0x1aa'`` or
        ``'1aa'``. Short strings are left padded with zeros.

        Raises:
            InvalidHexError: a character is not a hex digit.
            TooLongError: the value needs more than ``ADDRESS_LENGTH`` bytes.
        """
        digits = value
        if digits.startswith(("0x", "0X")):
            digits = digits[2:]
        if len(digits) % 2 != 0:
            digits = "0" + digits

        try:
            raw = binascii.unhexlify(digits)
        except ValueError as e:
            raise InvalidHexError(f"Invalid hex string {value!r}: {e}") from e

        if len(raw) > ADDRESS_LENGTH:
            raise TooLongError(
                f"Hex string is too long: {len(raw)} bytes, "
                f"an address is {ADDRESS_LENGTH} bytes"
            )
        return cls(raw.rjust(ADDRESS_LENGTH, b"\x00"))

    def short_string(self) -> str:
        """Address with leading zeros trimmed, e.g. ``0x2``.

        The all-zero identifier keeps one digit and renders as ``0x0``.
        """
        return "0x" + (self.data.hex().lstrip("0") or "0")

    def __str__(self) -> str:
        return "0x" + self.data.hex()

    def __bytes__(self) -> bytes:
        return self.data


Address = HexData
ObjectId = HexData


def is_same_string_address(addr1: str, addr2: str) -> bool:
    """Compare two address strings without parsing them.

    Strips one lowercase ``0x`` prefix and then every leading ``0`` from both
    sides. Content is not validated, so two malformed strings with the same
    tail compare equal. Use :meth:`HexData.from_hex` for a strict comparison.
    """
    if addr1.startswith("0x"):
        addr1 = addr1[2:]
    if addr2.startswith("0x"):
        addr2 = addr2[2:]
    return addr1.lstrip("0") == addr2.lstrip("0")


@dataclass(frozen=True)
class Base64Data:
    """Opaque bytes carried as standard base64 text."""

    data: bytes

    def __post_init__(self) -> None:
        if not isinstance(self.data, bytes):
            raise TypeError(
                f"Base64Data expects bytes, got {type(self.data).__name__}"
            )

    @classmethod
    def from_base64(cls, value: str) -> Base64Data:
        try:
            return cls(base64.b64decode(value, validate=True))
        except (binascii.Error, ValueError) as e:
            raise InvalidBase64Error(f"Invalid base64 string {value!r}: {e}") from e

    def __str__(self) -> str:
        return base64.b64encode(self.data).decode("ascii")

    def __bytes__(self) -> bytes:
        return self.data

    def __len__(self) -> int:
        return len(self.data)


Digest = Base64Data
TransactionDigest = Base64Data


def parse_big_int(value: Any) -> int:
    """Read a non-negative integer sent as a JSON number or decimal string."""
    if isinstance(value, bool):
        raise DecodeError(f"Expected an integer, got {value!r}")
    if isinstance(value, int):
        result = value
    elif isinstance(value, str) and value.isascii() and value.isdigit():
        result = int(value)
    else:
        raise DecodeError(f"Expected an integer, got {value!r}")
    if result < 0:
        raise DecodeError(f"Expected a non-negative integer, got {result}")
    return result
